"""Pure wizard navigation state and transitions.

Every function here takes a :class:`WizardState` and returns a new one; none of
them touch session storage or rendering. :func:`reduce` dispatches a
:class:`WizardAction` to the matching transition.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from core.errors import EmptyWizardError
from wizard.step_registry import active_sequence, resolve_nearest_active_step_id, step_ids
from wizard.types import WizardStepDef


@dataclass(frozen=True)
class WizardState:
    """Snapshot of a wizard: full step list, active sequence and current step.

    ``active_step_id`` is ``None`` once the wizard is complete; otherwise it is
    always a member of ``active_sequence``.
    """

    steps: tuple[WizardStepDef, ...]
    active_sequence: tuple[str, ...]
    active_step_id: str | None

    @property
    def is_complete(self) -> bool:
        return self.active_step_id is None

    @property
    def current_index(self) -> int | None:
        if self.active_step_id is None:
            return None
        return self.active_sequence.index(self.active_step_id)

    @property
    def is_first(self) -> bool:
        return self.current_index == 0

    @property
    def is_last(self) -> bool:
        index = self.current_index
        return index is not None and index == len(self.active_sequence) - 1


@dataclass(frozen=True)
class Continue:
    allowed: bool


@dataclass(frozen=True)
class Back:
    allowed: bool


@dataclass(frozen=True)
class JumpTo:
    step_id: str


@dataclass(frozen=True)
class ReplaceSteps:
    steps: tuple[WizardStepDef, ...]


WizardAction = Continue | Back | JumpTo | ReplaceSteps


def initial_state(steps: Sequence[WizardStepDef]) -> WizardState:
    """Create the state for a freshly mounted wizard.

    An empty step list starts complete. A non-empty list whose steps are all
    disabled is a configuration fault.
    """

    frozen_steps = tuple(steps)
    sequence = active_sequence(frozen_steps)
    if not frozen_steps:
        return WizardState(steps=(), active_sequence=(), active_step_id=None)
    if not sequence:
        raise EmptyWizardError("Every wizard step is disabled; there is no entry step")
    return WizardState(steps=frozen_steps, active_sequence=sequence, active_step_id=sequence[0])


def continue_step(state: WizardState, *, allowed: bool) -> WizardState:
    """Advance to the next active step, or complete from the last one."""

    index = state.current_index
    if index is None or not allowed:
        return state
    if index + 1 >= len(state.active_sequence):
        return WizardState(steps=state.steps, active_sequence=state.active_sequence, active_step_id=None)
    return WizardState(
        steps=state.steps,
        active_sequence=state.active_sequence,
        active_step_id=state.active_sequence[index + 1],
    )


def back_step(state: WizardState, *, allowed: bool) -> WizardState:
    """Return to the previous active step; no-op on the first step."""

    index = state.current_index
    if index is None or index == 0 or not allowed:
        return state
    return WizardState(
        steps=state.steps,
        active_sequence=state.active_sequence,
        active_step_id=state.active_sequence[index - 1],
    )


def jump_to(state: WizardState, step_id: str) -> WizardState:
    """Move directly to ``step_id`` when it is an active step."""

    if state.is_complete or step_id not in state.active_sequence or step_id == state.active_step_id:
        return state
    return WizardState(steps=state.steps, active_sequence=state.active_sequence, active_step_id=step_id)


def replace_steps(state: WizardState, steps: Sequence[WizardStepDef]) -> WizardState:
    """Recompute the active sequence after an enablement change.

    The current step is kept when still active. Otherwise the wizard moves to
    the nearest enabled step after the former step's position in the original
    order, or completes when there is none. A complete wizard ignores the
    replacement.
    """

    frozen_steps = tuple(steps)
    sequence = active_sequence(frozen_steps)
    current = state.active_step_id
    if current is None:
        return state
    if current in sequence:
        return WizardState(steps=frozen_steps, active_sequence=sequence, active_step_id=current)

    new_ids = step_ids(frozen_steps)
    if current in new_ids:
        anchors: Sequence[str] = (current,)
    else:
        # The step vanished from the list; anchor on the steps that followed it.
        old_ids = step_ids(state.steps)
        anchors = old_ids[old_ids.index(current) + 1 :] if current in old_ids else ()
    target: str | None = None
    for anchor in anchors:
        if anchor not in new_ids:
            continue
        target = resolve_nearest_active_step_id(anchor, sequence, ordered_ids=new_ids)
        break
    return WizardState(steps=frozen_steps, active_sequence=sequence, active_step_id=target)


def reduce(state: WizardState, action: WizardAction) -> WizardState:
    """Apply ``action`` to ``state``."""

    match action:
        case Continue(allowed=allowed):
            return continue_step(state, allowed=allowed)
        case Back(allowed=allowed):
            return back_step(state, allowed=allowed)
        case JumpTo(step_id=step_id):
            return jump_to(state, step_id)
        case ReplaceSteps(steps=steps):
            return replace_steps(state, steps)
        case _:
            raise TypeError(f"Unsupported wizard action: {action!r}")
