"""Matching criteria — which configured annotation keys a resource must carry.

Each strategy is a frozen model tagged by its ``criteria`` field and owns a
set of annotation keys under ``values``::

    {"criteria": "containsAnyOf", "values": ["example.com/owner", "team"]}

How a criterion is evaluated against a live resource is not decided here.
This module only exposes the structural check (``validate()``) and read
access to the configured keys (``values()``).
"""

from __future__ import annotations

from typing import Annotated, Literal, Self

from pydantic import BaseModel, Field

from annotations_policy.domain.errors import InvalidCriterionError

EMPTY_VALUES_MESSAGE = "values cannot be empty"


class BaseCriterion(BaseModel):
    """Shared shape and behavior of every matching strategy."""

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}

    criteria: str
    annotations: frozenset[str] = Field(alias="values")

    @classmethod
    def empty(cls) -> Self:
        """A criterion with no values, which fails ``validate()``."""
        return cls(values=frozenset())

    def validate(self) -> None:  # type: ignore[override]
        """Raise :class:`InvalidCriterionError` if the criterion is malformed."""
        if not self.annotations:
            raise InvalidCriterionError(EMPTY_VALUES_MESSAGE)

    def values(self) -> frozenset[str]:
        """The configured annotation keys."""
        return self.annotations


class ContainsAnyOf(BaseCriterion):
    """At least one of the configured keys is present."""

    criteria: Literal["containsAnyOf"] = "containsAnyOf"


class ContainsAllOf(BaseCriterion):
    """Every configured key is present."""

    criteria: Literal["containsAllOf"] = "containsAllOf"


class DoesNotContainAnyOf(BaseCriterion):
    """None of the configured keys is present."""

    criteria: Literal["doesNotContainAnyOf"] = "doesNotContainAnyOf"


class DoesNotContainAllOf(BaseCriterion):
    """Not every configured key is present."""

    criteria: Literal["doesNotContainAllOf"] = "doesNotContainAllOf"


class ContainsOtherThan(BaseCriterion):
    """Some key outside the configured set is present."""

    criteria: Literal["containsOtherThan"] = "containsOtherThan"


Criterion = Annotated[
    ContainsAnyOf
    | ContainsAllOf
    | DoesNotContainAnyOf
    | DoesNotContainAllOf
    | ContainsOtherThan,
    Field(discriminator="criteria"),
]
