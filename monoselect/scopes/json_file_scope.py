"""Select projects with an expression stored in a JSON file."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

from monoselect.errors import CyclicInclusionError, ScopeResolutionError
from monoselect.expression.loader import try_load_expression_file
from monoselect.models import Project, SelectionConfig
from monoselect.scopes.base import BaseScope, SelectorContext

if TYPE_CHECKING:
    from monoselect.selector import ProjectSelector


class JsonFileScope(BaseScope):
    """Loads an expression file and evaluates it with the owning selector.

    Each file on the current inclusion chain is tracked so that a file which
    includes itself, directly or through other files, fails instead of
    recursing forever.
    """

    def __init__(self, config: SelectionConfig, selector: ProjectSelector):
        self.config = config
        self.selector = selector

    def get_absolute_path(self, file: str) -> Path:
        if file.startswith("."):
            base = Path.cwd()
        else:
            base = self.config.workspace_root
        return (base / file).resolve()

    async def evaluate(self, ctx: SelectorContext) -> set[Project]:
        path = self.get_absolute_path(ctx.unscoped_selector)

        if path in ctx.include_chain:
            chain = " -> ".join(str(p) for p in ctx.include_chain + (path,))
            raise CyclicInclusionError(
                f"JSON file \"{path}\" includes itself ({chain}) in {ctx.context}.",
                ctx.include_chain + (path,),
                ctx.context,
            )
        if len(ctx.include_chain) >= self.config.max_include_depth:
            raise CyclicInclusionError(
                f"JSON file \"{path}\" exceeds the maximum inclusion depth of "
                f"{self.config.max_include_depth} in {ctx.context}.",
                ctx.include_chain + (path,),
                ctx.context,
            )

        file_context = f"JSON file {ctx.unscoped_selector} in {ctx.context}"
        try:
            expr = await asyncio.to_thread(try_load_expression_file, path, file_context)
        except OSError as e:
            raise ScopeResolutionError(
                f"Unable to read JSON file at \"{path}\" in {ctx.context}: {e}", ctx.context,
            ) from e
        if expr is None:
            raise ScopeResolutionError(
                f"Unable to find JSON file at \"{path}\" in {ctx.context}.", ctx.context,
            )

        return await self.selector.select_expression(
            expr,
            file_context,
            include_chain=ctx.include_chain + (path,),
        )
