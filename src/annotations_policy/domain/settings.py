"""Policy settings — a single criterion plus annotation naming checks.

``Settings`` serializes exactly as the criterion it wraps, so the policy
configuration document is just ``{"criteria": ..., "values": [...]}``.
"""

from __future__ import annotations

from pydantic import Field, RootModel

from annotations_policy.domain.annotations import invalid_annotation_names
from annotations_policy.domain.criteria import ContainsAnyOf, Criterion
from annotations_policy.domain.errors import InvalidAnnotationNamesError


class Settings(RootModel[Criterion]):
    """Validated configuration for the annotations policy.

    INVARIANT: after ``validate()`` returns, the criterion holds at least
    one value and every value is a well-formed annotation key.
    """

    model_config = {"frozen": True}

    root: Criterion = Field(default_factory=ContainsAnyOf.empty)

    @classmethod
    def default(cls) -> Settings:
        """``containsAnyOf`` with no values.

        This is a structural placeholder only: it fails ``validate()`` until
        values are configured explicitly.
        """
        return cls(ContainsAnyOf.empty())

    @property
    def criterion(self) -> Criterion:
        return self.root

    def validate(self) -> None:  # type: ignore[override]
        """Raise a :class:`SettingsValidationError` if the settings are unusable.

        Structural criterion errors propagate unchanged and short-circuit the
        naming check.
        """
        self.root.validate()

        invalid = invalid_annotation_names(self.root.values())
        if invalid:
            raise InvalidAnnotationNamesError(invalid)
