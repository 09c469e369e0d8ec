"""Navigation state, controller and presentation helpers for the wizards."""

from __future__ import annotations

from wizard.navigation.keys import WizardSessionKeys
from wizard.navigation.presentation import (
    NavigationBarState,
    StepIndicatorItem,
    StepStatus,
    build_navigation_bar,
    build_step_indicator,
    has_content,
)
from wizard.navigation.router import NavigationController, WizardEvent, WizardEventKind
from wizard.navigation.state import WizardState, initial_state, reduce

__all__ = [
    "NavigationBarState",
    "NavigationController",
    "StepIndicatorItem",
    "StepStatus",
    "WizardEvent",
    "WizardEventKind",
    "WizardSessionKeys",
    "WizardState",
    "build_navigation_bar",
    "build_step_indicator",
    "has_content",
    "initial_state",
    "reduce",
]
