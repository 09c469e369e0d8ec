"""Core package for league registration errors."""

from .errors import (
    DuplicateStepIdError,
    EmptyWizardError,
    MissingNavigationPredicateError,
    UnknownWizardFlowError,
    WizardConfigurationError,
)

__all__ = [
    "DuplicateStepIdError",
    "EmptyWizardError",
    "MissingNavigationPredicateError",
    "UnknownWizardFlowError",
    "WizardConfigurationError",
]
