from __future__ import annotations

import streamlit as st

from components import stepper
from wizard.navigation import build_step_indicator, initial_state
from wizard.navigation.state import jump_to
from wizard.types import WizardStepDef


def _items():
    steps = (
        WizardStepDef(id="players", label="Players"),
        WizardStepDef(id="waivers", label="Waivers", enabled=False),
        WizardStepDef(id="review", label="Review & Pay"),
    )
    return build_step_indicator(jump_to(initial_state(steps), "review"))


def test_summary_segments_number_active_steps_only() -> None:
    segments = stepper.build_summary_segments(_items())
    assert segments == [
        "<span data-state='done'>✔︎ 1. Players</span>",
        "<span data-state='current'>➤ 2. Review &amp; Pay</span>",
    ]


def test_render_stepper_injects_styles_once(monkeypatch) -> None:
    rendered: list[str] = []
    monkeypatch.setattr(st, "markdown", lambda body, **_kwargs: rendered.append(body))

    stepper.render_stepper(_items())
    stepper.render_stepper(_items())

    styles = [body for body in rendered if "<style>" in body]
    summaries = [body for body in rendered if "workflow-stepper__summary'" in body]
    assert len(styles) == 1
    assert len(summaries) == 2


def test_render_stepper_skips_empty_indicator(monkeypatch) -> None:
    rendered: list[str] = []
    monkeypatch.setattr(st, "markdown", lambda body, **_kwargs: rendered.append(body))
    stepper.render_stepper(())
    assert rendered == []
