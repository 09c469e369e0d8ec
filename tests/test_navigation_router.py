"""Tests for the session-backed wizard navigation controller."""

from __future__ import annotations

import logging

import pytest

from core.errors import DuplicateStepIdError, EmptyWizardError, MissingNavigationPredicateError
from wizard.navigation import NavigationController, WizardEvent, WizardEventKind, WizardState
from wizard.types import WizardStepDef


def _allow(_step_id: str) -> bool:
    return True


def _deny(_step_id: str) -> bool:
    return False


def _disable(steps: tuple[WizardStepDef, ...], *ids: str) -> tuple[WizardStepDef, ...]:
    return tuple(step.with_enabled(step.id not in ids) for step in steps)


def _controller(steps, session_state=None, **overrides) -> NavigationController:
    options = {"can_continue": _allow, "can_back": _allow, "wizard_id": "player"}
    options.update(overrides)
    return NavigationController(steps, session_state=session_state, **options)


def _record(controller: NavigationController) -> list[WizardEvent]:
    events: list[WizardEvent] = []
    controller.subscribe(events.append)
    return events


def test_controller_starts_on_first_active_step(four_steps) -> None:
    controller = _controller(_disable(four_steps, "a"))
    assert controller.active_step_id == "b"
    assert controller.active_sequence == ("b", "c", "d")
    assert not controller.can_back()


def test_missing_predicates_are_configuration_faults(four_steps) -> None:
    with pytest.raises(MissingNavigationPredicateError) as excinfo:
        _controller(four_steps, can_continue=None)
    assert excinfo.value.predicate == "can_continue"

    with pytest.raises(MissingNavigationPredicateError):
        _controller(four_steps, can_back="yes")


def test_predicate_map_must_cover_every_step(four_steps) -> None:
    partial = {"a": lambda: True, "b": lambda: True}
    with pytest.raises(MissingNavigationPredicateError) as excinfo:
        _controller(four_steps, can_continue=partial)
    assert excinfo.value.step_id == "c"


def test_predicate_map_is_evaluated_per_step(four_steps) -> None:
    gates = {step.id: (lambda step_id=step.id: step_id != "b") for step in four_steps}
    controller = _controller(four_steps, can_continue=gates)
    assert controller.continue_step()
    assert controller.active_step_id == "b"
    assert not controller.can_continue()
    assert not controller.continue_step()
    assert controller.active_step_id == "b"


def test_duplicate_ids_fail_at_construction(four_steps) -> None:
    with pytest.raises(DuplicateStepIdError):
        _controller((*four_steps, WizardStepDef(id="a", label="Again", enabled=False)))


def test_all_disabled_steps_fail_at_construction(four_steps) -> None:
    with pytest.raises(EmptyWizardError):
        _controller(_disable(four_steps, "a", "b", "c", "d"))


def test_empty_step_list_starts_complete() -> None:
    controller = _controller(())
    assert controller.is_complete
    assert not controller.can_continue()
    assert not controller.can_back()
    assert not controller.continue_step()
    assert not controller.back()


def test_blocked_continue_leaves_state_and_emits_nothing(four_steps) -> None:
    controller = _controller(four_steps, can_continue=_deny)
    events = _record(controller)
    before = controller.state
    assert not controller.continue_step()
    assert controller.state is before
    assert events == []


def test_back_on_first_step_is_a_no_op(four_steps) -> None:
    controller = _controller(four_steps)
    events = _record(controller)
    assert not controller.back()
    assert controller.active_step_id == "a"
    assert events == []


def test_continue_and_back_emit_events(four_steps) -> None:
    controller = _controller(four_steps)
    events = _record(controller)
    assert controller.continue_step()
    assert controller.back()
    assert [(event.kind, event.from_step, event.to_step) for event in events] == [
        (WizardEventKind.CONTINUE, "a", "b"),
        (WizardEventKind.BACK, "b", "a"),
    ]
    assert events[0].wizard_id == "player"
    assert events[0].state.active_step_id == "b"


def test_continue_from_last_step_emits_complete(four_steps) -> None:
    controller = _controller(four_steps)
    assert controller.jump_to("d")
    events = _record(controller)
    assert controller.continue_step()
    assert controller.is_complete
    assert [event.kind for event in events] == [WizardEventKind.CONTINUE, WizardEventKind.COMPLETE]
    assert events[-1].to_step is None


def test_can_back_respects_host_predicate(four_steps) -> None:
    controller = _controller(four_steps, can_back=lambda step_id: step_id != "c")
    controller.jump_to("c")
    assert not controller.can_back()
    assert not controller.back()
    assert controller.active_step_id == "c"


def test_jump_to_inactive_step_is_ignored(four_steps) -> None:
    controller = _controller(_disable(four_steps, "c"))
    events = _record(controller)
    assert not controller.jump_to("c")
    assert not controller.jump_to("unknown")
    assert controller.active_step_id == "a"
    assert events == []


def test_replace_steps_skips_forward_and_emits_skip(four_steps) -> None:
    controller = _controller(four_steps)
    controller.jump_to("b")
    events = _record(controller)
    assert controller.replace_steps(_disable(four_steps, "b", "c"))
    assert controller.active_step_id == "d"
    assert [(event.kind, event.from_step, event.to_step) for event in events] == [
        (WizardEventKind.SKIP, "b", "d"),
    ]


def test_replace_steps_without_later_step_completes(four_steps) -> None:
    controller = _controller(four_steps)
    controller.jump_to("d")
    events = _record(controller)
    assert controller.replace_steps(_disable(four_steps, "d"))
    assert controller.is_complete
    assert [event.kind for event in events] == [WizardEventKind.COMPLETE]


def test_replace_steps_keeping_current_step_emits_nothing(four_steps) -> None:
    controller = _controller(four_steps)
    controller.jump_to("c")
    events = _record(controller)
    assert controller.replace_steps(_disable(four_steps, "b"))
    assert controller.active_step_id == "c"
    assert controller.active_sequence == ("a", "c", "d")
    assert events == []


def test_replace_steps_validates_before_committing(four_steps) -> None:
    controller = _controller(four_steps)
    controller.jump_to("b")
    before = controller.state
    with pytest.raises(DuplicateStepIdError):
        controller.replace_steps((*four_steps, WizardStepDef(id="b", label="Dup")))
    assert controller.state is before


def test_replace_steps_checks_predicate_map_coverage(four_steps) -> None:
    gates = {step.id: (lambda: True) for step in four_steps}
    controller = _controller(four_steps, can_continue=gates)
    with pytest.raises(MissingNavigationPredicateError):
        controller.replace_steps((*four_steps, WizardStepDef(id="e", label="E")))
    assert controller.active_sequence == ("a", "b", "c", "d")


def test_listener_failure_does_not_undo_transition(four_steps, caplog: pytest.LogCaptureFixture) -> None:
    controller = _controller(four_steps)

    def _explode(_event: WizardEvent) -> None:
        raise RuntimeError("listener failed")

    controller.subscribe(_explode)
    events = _record(controller)
    with caplog.at_level(logging.ERROR, logger="wizard.navigation.router"):
        assert controller.continue_step()
    assert controller.active_step_id == "b"
    assert len(events) == 1
    assert "listener failed" in caplog.text


def test_unsubscribe_stops_notifications(four_steps) -> None:
    controller = _controller(four_steps)
    events: list[WizardEvent] = []
    unsubscribe = controller.subscribe(events.append)
    controller.continue_step()
    unsubscribe()
    controller.continue_step()
    assert len(events) == 1


def test_state_is_stored_under_namespaced_key(four_steps, session_state) -> None:
    controller = _controller(four_steps, session_state=session_state)
    key = controller.session_keys.navigation_state
    assert key == "wiz:player:navigation_state"
    assert isinstance(session_state[key], WizardState)
    controller.continue_step()
    assert session_state[key].active_step_id == "b"


def test_two_wizards_share_a_session_without_interference(four_steps, session_state) -> None:
    player = _controller(four_steps, session_state=session_state, wizard_id="player")
    team = _controller(four_steps, session_state=session_state, wizard_id="team")
    player.continue_step()
    player.continue_step()
    assert player.active_step_id == "c"
    assert team.active_step_id == "a"
    assert {"wiz:player:navigation_state", "wiz:team:navigation_state"} <= set(session_state)


def test_rerun_restores_state_and_applies_new_steps(four_steps, session_state) -> None:
    first = _controller(four_steps, session_state=session_state)
    first.jump_to("b")

    rerun = _controller(four_steps, session_state=session_state)
    assert rerun.active_step_id == "b"

    disabled = _controller(_disable(four_steps, "b"), session_state=session_state)
    assert disabled.active_step_id == "c"
    assert disabled.active_sequence == ("a", "c", "d")


def test_navigation_never_raises_for_disallowed_moves(four_steps) -> None:
    controller = _controller(four_steps, can_continue=_deny, can_back=_deny)
    controller.jump_to("c")
    for _ in range(3):
        assert not controller.continue_step()
        assert not controller.back()
    assert controller.active_step_id == "c"


def test_rerun_with_changed_steps_notifies_construction_listeners(four_steps, session_state) -> None:
    first = _controller(four_steps, session_state=session_state)
    first.jump_to("b")

    events: list[WizardEvent] = []
    rerun = _controller(_disable(four_steps, "b"), session_state=session_state, listeners=(events.append,))
    assert rerun.active_step_id == "c"
    assert [(event.kind, event.from_step, event.to_step) for event in events] == [
        (WizardEventKind.SKIP, "b", "c"),
    ]


def test_rerun_completing_the_wizard_notifies_complete(four_steps, session_state) -> None:
    first = _controller(four_steps, session_state=session_state)
    first.jump_to("d")

    events: list[WizardEvent] = []
    rerun = _controller(_disable(four_steps, "d"), session_state=session_state, listeners=(events.append,))
    assert rerun.is_complete
    assert [event.kind for event in events] == [WizardEventKind.COMPLETE]


def test_rerun_with_unchanged_steps_is_silent(four_steps, session_state) -> None:
    _controller(four_steps, session_state=session_state).jump_to("c")

    events: list[WizardEvent] = []
    rerun = _controller(four_steps, session_state=session_state, listeners=(events.append,))
    assert rerun.active_step_id == "c"
    assert events == []
