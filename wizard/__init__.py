"""Registration wizard step model."""

from __future__ import annotations

from .step_registry import active_sequence, validate_steps
from .types import WizardShellConfig, WizardStepDef, WizardTheme

__all__ = [
    "WizardShellConfig",
    "WizardStepDef",
    "WizardTheme",
    "active_sequence",
    "validate_steps",
]
