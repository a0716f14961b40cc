"""Selector expression tree: an explicitly tagged union of three node kinds."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from monoselect.models import OPERATOR_ARITY


class SelectorExpression(BaseModel):
    """Leaf node: resolve ``value`` with the scope named ``scope``."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["selector"] = "selector"
    scope: str
    value: str

    def to_json(self) -> dict[str, Any]:
        return {"scope": self.scope, "value": self.value}


class FilterExpression(BaseModel):
    """Unary graph-closure transform applied to ``arg``."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["filter"] = "filter"
    filter: str
    arg: Expression

    def to_json(self) -> dict[str, Any]:
        return {"filter": self.filter, "arg": self.arg.to_json()}


class OperatorExpression(BaseModel):
    """Boolean set combinator over ``args``."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["operator"] = "operator"
    op: str
    args: tuple[Expression, ...]

    @model_validator(mode="after")
    def _check_arity(self) -> OperatorExpression:
        expected = OPERATOR_ARITY.get(self.op)
        if expected is not None and len(self.args) != expected:
            raise ValueError(
                f"operator '{self.op}' takes {expected} argument(s), got {len(self.args)}"
            )
        if not self.args:
            raise ValueError(f"operator '{self.op}' requires at least one argument")
        return self

    def to_json(self) -> dict[str, Any]:
        return {"op": self.op, "args": [arg.to_json() for arg in self.args]}


Expression = Annotated[
    Union[SelectorExpression, FilterExpression, OperatorExpression],
    Field(discriminator="kind"),
]

FilterExpression.model_rebuild()
OperatorExpression.model_rebuild()
