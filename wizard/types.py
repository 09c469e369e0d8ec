"""Shared value types for the registration wizards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Mapping

from pydantic import BaseModel, ConfigDict, field_validator


class WizardTheme(StrEnum):
    """Visual theme applied to a wizard shell."""

    PLAYER = "player"
    TEAM = "team"
    FAMILY = "family"


@dataclass(frozen=True)
class WizardStepDef:
    """A single wizard step.

    Instances are immutable; toggling ``enabled`` produces a new definition
    (see :meth:`with_enabled`).
    """

    id: str
    label: str
    enabled: bool = True

    def with_enabled(self, enabled: bool) -> "WizardStepDef":
        if enabled == self.enabled:
            return self
        return WizardStepDef(id=self.id, label=self.label, enabled=enabled)


class WizardShellConfig(BaseModel):
    """Identity of a wizard instance: title, theme and optional badge."""

    model_config = ConfigDict(frozen=True)

    title: str
    theme: WizardTheme
    badge: str | None = None

    @field_validator("badge", mode="before")
    @classmethod
    def _blank_badge_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


# Host-supplied navigation predicates: either one callable taking the current
# step id, or one zero-argument callable per step id.
StepPredicate = Callable[[str], bool]
StepPredicateMap = Mapping[str, Callable[[], bool]]
NavigationPredicate = StepPredicate | StepPredicateMap


__all__ = [
    "NavigationPredicate",
    "StepPredicate",
    "StepPredicateMap",
    "WizardShellConfig",
    "WizardStepDef",
    "WizardTheme",
]
