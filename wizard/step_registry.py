"""Active-step computation for wizard step lists."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from core.errors import DuplicateStepIdError, WizardConfigurationError
from wizard.types import WizardStepDef

logger = logging.getLogger(__name__)


def validate_steps(steps: Sequence[WizardStepDef]) -> None:
    """Reject step lists with blank or duplicated ids.

    Ids must be unique across the full list, disabled steps included, because
    a conditional step may become enabled later in the flow.
    """

    blank = [index for index, step in enumerate(steps) if not step.id]
    if blank:
        logger.warning("Rejecting wizard steps with blank ids at positions %s", blank)
        raise WizardConfigurationError(f"Wizard step ids must be non-empty (positions {blank})")
    counts = Counter(step.id for step in steps)
    duplicates = [step_id for step_id, count in counts.items() if count > 1]
    if duplicates:
        logger.warning("Rejecting wizard steps with duplicate ids %s", duplicates)
        raise DuplicateStepIdError(duplicates)


def step_ids(steps: Sequence[WizardStepDef]) -> tuple[str, ...]:
    """Return every step id in canonical order, disabled steps included."""

    return tuple(step.id for step in steps)


def active_sequence(steps: Sequence[WizardStepDef]) -> tuple[str, ...]:
    """Return the ids of enabled steps, preserving their original order.

    Always computed from the full list; callers recompute whenever any
    ``enabled`` flag changes.
    """

    validate_steps(steps)
    return tuple(step.id for step in steps if step.enabled)


def resolve_nearest_active_step_id(
    target_id: str,
    active_ids: Sequence[str],
    *,
    ordered_ids: Sequence[str],
) -> str | None:
    """Return ``target_id`` when active, else the nearest later active id.

    ``ordered_ids`` is the canonical order of all step ids. Returns ``None``
    when ``target_id`` is not part of it or no later active step exists.
    """

    if target_id in active_ids:
        return target_id
    if target_id not in ordered_ids:
        return None
    start_index = list(ordered_ids).index(target_id) + 1
    for step_id in list(ordered_ids)[start_index:]:
        if step_id in active_ids:
            return step_id
    return None


def step_numbers(steps: Sequence[WizardStepDef]) -> dict[str, int]:
    """Return 1-based display numbers for the active steps."""

    return {step_id: index for index, step_id in enumerate(active_sequence(steps), start=1)}


def get_step(steps: Sequence[WizardStepDef], step_id: str) -> WizardStepDef | None:
    """Lookup a step definition by id."""

    return next((step for step in steps if step.id == step_id), None)
