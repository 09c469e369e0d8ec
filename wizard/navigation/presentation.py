"""Derived, render-free values for the wizard action bar and step indicator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Sequence

from wizard.navigation.state import WizardState
from wizard.step_registry import step_numbers

DEFAULT_CONTINUE_LABEL = "Continue"


def has_content(can_back: bool, show_continue: bool, badge: str | None) -> bool:
    """Return ``True`` when the navigation bar has anything to display.

    Hosts must skip the whole bar when this is ``False``.
    """

    badge_present = badge is not None and bool(badge.strip())
    return badge_present or can_back or show_continue


@dataclass(frozen=True)
class NavigationBarState:
    """Everything the action bar renders for the current step."""

    can_back: bool
    show_continue: bool
    can_continue: bool
    continue_label: str = DEFAULT_CONTINUE_LABEL
    badge: str | None = None
    badge_class: str = ""

    @property
    def visible(self) -> bool:
        return has_content(self.can_back, self.show_continue, self.badge)


def build_navigation_bar(
    *,
    can_back: bool,
    show_continue: bool,
    can_continue: bool,
    continue_label: str | None = None,
    badge: str | None = None,
    badge_class: str = "",
) -> NavigationBarState:
    """Assemble a :class:`NavigationBarState`.

    ``can_continue`` only matters when the continue control is shown; a hidden
    control is never reported as enabled.
    """

    normalized_badge = badge.strip() if isinstance(badge, str) and badge.strip() else None
    return NavigationBarState(
        can_back=can_back,
        show_continue=show_continue,
        can_continue=show_continue and can_continue,
        continue_label=continue_label or DEFAULT_CONTINUE_LABEL,
        badge=normalized_badge,
        badge_class=badge_class if normalized_badge else "",
    )


class StepStatus(StrEnum):
    DONE = "done"
    CURRENT = "current"
    UPCOMING = "upcoming"


@dataclass(frozen=True)
class StepIndicatorItem:
    """One entry of the step indicator."""

    id: str
    label: str
    step_number: int
    status: StepStatus


def build_step_indicator(state: WizardState) -> Sequence[StepIndicatorItem]:
    """Return indicator entries for the active steps of ``state``.

    Disabled steps are hidden entirely. Once the wizard is complete every
    entry is reported as done.
    """

    labels = {step.id: step.label for step in state.steps}
    numbers = step_numbers(state.steps)
    current_index = state.current_index
    items: list[StepIndicatorItem] = []
    for index, step_id in enumerate(state.active_sequence):
        if current_index is None or index < current_index:
            status = StepStatus.DONE
        elif index == current_index:
            status = StepStatus.CURRENT
        else:
            status = StepStatus.UPCOMING
        items.append(
            StepIndicatorItem(
                id=step_id,
                label=labels.get(step_id, step_id),
                step_number=numbers[step_id],
                status=status,
            )
        )
    return tuple(items)
