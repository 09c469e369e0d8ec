"""Custom exception types for wizard configuration faults."""

from __future__ import annotations

from typing import Iterable


class WizardConfigurationError(ValueError):
    """Base exception for wizard setup issues.

    Raised only while a wizard is configured (construction or a step list
    replacement), never from ``continue``/``back`` navigation.
    """


class DuplicateStepIdError(WizardConfigurationError):
    """Raised when two step definitions share the same id."""

    def __init__(self, step_ids: Iterable[str]) -> None:
        self.step_ids: tuple[str, ...] = tuple(step_ids)
        joined = ", ".join(repr(step_id) for step_id in self.step_ids)
        super().__init__(f"Duplicate wizard step ids: {joined}")


class MissingNavigationPredicateError(WizardConfigurationError):
    """Raised when a required ``can_continue``/``can_back`` predicate is absent."""

    def __init__(self, predicate: str, step_id: str | None = None) -> None:
        self.predicate = predicate
        self.step_id = step_id
        if step_id is None:
            message = f"Navigation predicate '{predicate}' is required"
        else:
            message = f"Navigation predicate '{predicate}' is missing for step '{step_id}'"
        super().__init__(message)


class EmptyWizardError(WizardConfigurationError):
    """Raised when every step of a non-empty wizard is disabled before it starts."""


class UnknownWizardFlowError(WizardConfigurationError):
    """Raised when a wizard catalog key is not registered."""
