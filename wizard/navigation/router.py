from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import cast

from core.errors import MissingNavigationPredicateError
from utils.logging_context import log_context
from wizard.navigation.keys import WizardSessionKeys
from wizard.navigation.state import (
    Back,
    Continue,
    JumpTo,
    ReplaceSteps,
    WizardAction,
    WizardState,
    initial_state,
    reduce,
)
from wizard.step_registry import active_sequence
from wizard.types import NavigationPredicate, WizardStepDef

logger = logging.getLogger(__name__)


class WizardEventKind(StrEnum):
    """Kinds of notifications emitted after a committed transition."""

    CONTINUE = "continue"
    BACK = "back"
    JUMP = "jump"
    SKIP = "skip"
    COMPLETE = "complete"


@dataclass(frozen=True)
class WizardEvent:
    """Notification describing a committed transition."""

    kind: WizardEventKind
    wizard_id: str
    from_step: str | None
    to_step: str | None
    state: WizardState


WizardListener = Callable[[WizardEvent], None]


def _validate_predicate(
    name: str,
    predicate: NavigationPredicate | None,
    steps: Sequence[WizardStepDef],
) -> None:
    if predicate is None:
        raise MissingNavigationPredicateError(name)
    if isinstance(predicate, Mapping):
        for step in steps:
            candidate = predicate.get(step.id)
            if candidate is None or not callable(candidate):
                raise MissingNavigationPredicateError(name, step.id)
        return
    if not callable(predicate):
        raise MissingNavigationPredicateError(name)


def _evaluate(predicate: NavigationPredicate, step_id: str) -> bool:
    if isinstance(predicate, Mapping):
        return bool(predicate[step_id]())
    return bool(predicate(step_id))


class NavigationController:
    """Own the navigation state of a single wizard instance.

    The controller validates configuration up front, applies transitions
    through the pure reducer in :mod:`wizard.navigation.state`, commits the
    resulting :class:`WizardState` in a single assignment and notifies
    listeners afterwards. Listeners passed at construction also observe the
    skip applied when a persisted state is restored against a changed step
    list. ``continue_step``/``back``/``jump_to`` never raise
    for disallowed moves; they return ``False`` and leave the state unchanged.
    """

    def __init__(
        self,
        steps: Sequence[WizardStepDef],
        *,
        can_continue: NavigationPredicate | None,
        can_back: NavigationPredicate | None,
        wizard_id: str = "default",
        session_state: MutableMapping[str, object] | None = None,
        listeners: Sequence[WizardListener] = (),
    ) -> None:
        frozen_steps = tuple(steps)
        active_sequence(frozen_steps)
        _validate_predicate("can_continue", can_continue, frozen_steps)
        _validate_predicate("can_back", can_back, frozen_steps)
        self._can_continue = cast(NavigationPredicate, can_continue)
        self._can_back = cast(NavigationPredicate, can_back)
        self._wizard_id = wizard_id
        self._session_keys = WizardSessionKeys(wizard_id=wizard_id)
        self._session_state: MutableMapping[str, object] = session_state if session_state is not None else {}
        self._listeners: list[WizardListener] = list(listeners)

        stored = self._session_state.get(self._session_keys.navigation_state)
        if isinstance(stored, WizardState):
            # Rerun with a persisted state: recompute against the current steps.
            self._apply(ReplaceSteps(frozen_steps), kind=WizardEventKind.SKIP)
        else:
            self._commit(initial_state(frozen_steps))

    @property
    def wizard_id(self) -> str:
        return self._wizard_id

    @property
    def session_keys(self) -> WizardSessionKeys:
        return self._session_keys

    @property
    def state(self) -> WizardState:
        return cast(WizardState, self._session_state[self._session_keys.navigation_state])

    @property
    def steps(self) -> tuple[WizardStepDef, ...]:
        return self.state.steps

    @property
    def active_step_id(self) -> str | None:
        return self.state.active_step_id

    @property
    def active_sequence(self) -> tuple[str, ...]:
        return self.state.active_sequence

    @property
    def is_complete(self) -> bool:
        return self.state.is_complete

    def can_continue(self) -> bool:
        """Return ``True`` when the host allows leaving the current step forwards."""

        current = self.active_step_id
        if current is None:
            return False
        return _evaluate(self._can_continue, current)

    def can_back(self) -> bool:
        """Return ``True`` when a previous step exists and the host allows going back."""

        state = self.state
        if state.active_step_id is None or state.is_first:
            return False
        return _evaluate(self._can_back, state.active_step_id)

    def subscribe(self, listener: WizardListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def continue_step(self) -> bool:
        """Advance when ``can_continue`` holds; return whether the state changed."""

        current = self.active_step_id
        if current is None:
            return False
        allowed = _evaluate(self._can_continue, current)
        return self._apply(Continue(allowed=allowed), kind=WizardEventKind.CONTINUE)

    def back(self) -> bool:
        """Step back when ``can_back`` holds; return whether the state changed."""

        current = self.active_step_id
        if current is None:
            return False
        allowed = _evaluate(self._can_back, current)
        return self._apply(Back(allowed=allowed), kind=WizardEventKind.BACK)

    def jump_to(self, step_id: str) -> bool:
        """Deep-link to ``step_id`` when it is part of the active sequence."""

        return self._apply(JumpTo(step_id), kind=WizardEventKind.JUMP)

    def replace_steps(self, steps: Sequence[WizardStepDef]) -> bool:
        """Swap in a new step list after an enablement change.

        Configuration faults are raised before anything is committed.
        """

        frozen_steps = tuple(steps)
        active_sequence(frozen_steps)
        _validate_predicate("can_continue", self._can_continue, frozen_steps)
        _validate_predicate("can_back", self._can_back, frozen_steps)
        return self._apply(ReplaceSteps(frozen_steps), kind=WizardEventKind.SKIP)

    def _commit(self, state: WizardState) -> None:
        self._session_state[self._session_keys.navigation_state] = state

    def _apply(self, action: WizardAction, *, kind: WizardEventKind | None = None) -> bool:
        previous = self.state
        updated = reduce(previous, action)
        if updated == previous:
            return False
        self._commit(updated)
        moved = updated.active_step_id != previous.active_step_id
        with log_context(wizard_id=self._wizard_id, wizard_step=updated.active_step_id or "complete"):
            if isinstance(action, ReplaceSteps):
                if moved:
                    logger.info(
                        "Step '%s' is no longer active; moved to %s",
                        previous.active_step_id,
                        updated.active_step_id or "completion",
                    )
                else:
                    logger.debug("Recomputed active sequence %s", updated.active_sequence)
            else:
                logger.debug("Wizard moved from '%s' to '%s'", previous.active_step_id, updated.active_step_id)
        if not moved or kind is None:
            return True
        if updated.is_complete:
            if not isinstance(action, ReplaceSteps):
                self._notify(kind, previous, updated)
            self._notify(WizardEventKind.COMPLETE, previous, updated)
        else:
            self._notify(kind, previous, updated)
        return True

    def _notify(self, kind: WizardEventKind, previous: WizardState, updated: WizardState) -> None:
        event = WizardEvent(
            kind=kind,
            wizard_id=self._wizard_id,
            from_step=previous.active_step_id,
            to_step=updated.active_step_id,
            state=updated,
        )
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Wizard listener failed for %s event", kind.value)
