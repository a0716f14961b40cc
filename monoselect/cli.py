"""Click CLI with select, completions, and serve subcommands."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import click

from monoselect import __version__
from monoselect.errors import SelectorError, WorkspaceError
from monoselect.expression.models import (
    Expression,
    FilterExpression,
    SelectorExpression,
)
from monoselect.expression.parser import parse_selector
from monoselect.graph import closure, load_workspace
from monoselect.models import FilterKind, Project, SelectionConfig
from monoselect.selector import ProjectSelector

_WORKSPACE_OPTION = click.option(
    "--workspace", "-w", "workspace_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default="workspace.json",
    show_default=True,
    help="Workspace JSON file describing the projects",
)


def _load_selector(workspace_file: Path, git_ref: str = "") -> ProjectSelector:
    try:
        graph = load_workspace(workspace_file)
    except WorkspaceError as e:
        raise click.ClickException(str(e))
    config = SelectionConfig(
        workspace_root=workspace_file.resolve().parent,
        default_git_ref=git_ref or None,
    )
    return ProjectSelector(graph, config)


def _collect_expressions(
    selectors: tuple[str, ...],
    to: tuple[str, ...],
    from_: tuple[str, ...],
    only: tuple[str, ...],
    expr_files: tuple[str, ...],
) -> list[tuple[Expression, str]]:
    """Turn command-line parameters into (expression, context) pairs."""
    parts: list[tuple[Expression, str]] = [
        (parse_selector(value), "command-line argument") for value in selectors
    ]
    for flag, kind, values in (
        ("--to", FilterKind.TO, to),
        ("--from", FilterKind.FROM, from_),
        ("--only", FilterKind.ONLY, only),
    ):
        for value in values:
            parts.append((
                FilterExpression(filter=kind.value, arg=parse_selector(value)),
                f"command-line argument {flag}",
            ))
    for path in expr_files:
        parts.append((
            SelectorExpression(scope="json", value=path),
            "command-line argument --expr",
        ))
    return parts


async def _select_all(
    selector: ProjectSelector,
    parts: list[tuple[Expression, str]],
) -> list[Project]:
    selected: set[Project] = set()
    for expr, context in parts:
        selected = closure.union(selected, await selector.select_expression(expr, context))
    return closure.sort_projects(selected)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """monoselect: choose which monorepo projects a command should act on."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@_WORKSPACE_OPTION
@click.argument("selectors", nargs=-1)
@click.option("--to", "-t", "to", multiple=True, help="Select a project and all its dependencies")
@click.option("--from", "-f", "from_", multiple=True,
              help="Select a project, its consumers, and everything they depend on")
@click.option("--only", "-o", "only", multiple=True, help="Select exactly the matching projects")
@click.option("--expr", "-e", "expr_files", multiple=True,
              help="Select with an expression stored in a JSON file")
@click.option("--git-ref", default="", help="Default ref for git: selectors with no value")
@click.option("--json", "as_json", is_flag=True, help="Print the selection as a JSON list")
def select(
    workspace_file: Path,
    selectors: tuple[str, ...],
    to: tuple[str, ...],
    from_: tuple[str, ...],
    only: tuple[str, ...],
    expr_files: tuple[str, ...],
    git_ref: str,
    as_json: bool,
):
    """Print the projects matched by the given selectors.

    Selectors have the form SCOPE:VALUE (name, git, tag, version-policy,
    json); a bare value is a project name. All parameters are combined as
    a union.
    """
    parts = _collect_expressions(selectors, to, from_, only, expr_files)
    if not parts:
        raise click.UsageError("Specify at least one selector, --to, --from, --only or --expr")

    selector = _load_selector(workspace_file, git_ref)
    try:
        projects = asyncio.run(_select_all(selector, parts))
    except SelectorError as e:
        raise click.ClickException(str(e))

    names = [p.name for p in projects]
    if as_json:
        click.echo(json.dumps(names, indent=2))
        return
    if not names:
        click.echo("No projects selected.", err=True)
        return
    for name in names:
        click.echo(name)


@cli.command()
@_WORKSPACE_OPTION
def completions(workspace_file: Path):
    """List known SCOPE:VALUE selectors for shell completion."""
    selector = _load_selector(workspace_file)
    for value in selector.list_completions():
        click.echo(value)


@cli.command()
@click.option("--port", "-p", default=8430, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(port: int, host: str):
    """Start the selection web API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. "
            "Install with: pip install 'monoselect[web]'"
        )

    from monoselect.web import create_app

    click.echo(f"Starting monoselect web API at http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
