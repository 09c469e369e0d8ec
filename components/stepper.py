"""Step indicator for the registration wizards."""

from __future__ import annotations

import html
from typing import Sequence

import streamlit as st

from wizard.navigation.presentation import StepIndicatorItem, StepStatus


_STYLE_STATE_KEY = "_workflow_stepper_styles_v1"

_STATUS_ICONS: dict[StepStatus, str] = {
    StepStatus.DONE: "✔︎",
    StepStatus.CURRENT: "➤",
    StepStatus.UPCOMING: "•",
}


def _inject_workflow_styles() -> None:
    """Inject the step indicator styling once per session."""

    if st.session_state.get(_STYLE_STATE_KEY):
        return

    st.session_state[_STYLE_STATE_KEY] = True
    st.markdown(
        """
        <style>
        .workflow-stepper__summary {
            display: flex;
            flex-wrap: wrap;
            gap: 0.35rem;
            font-size: 0.85rem;
            color: var(--text-muted);
            margin: 0.25rem 0 0.75rem;
        }

        .workflow-stepper__summary span[data-state="current"] {
            color: var(--wizard-accent, var(--text-strong));
            font-weight: 600;
        }

        .workflow-stepper__summary span[data-state="done"] {
            color: var(--text-strong);
        }

        .workflow-stepper__summary span[aria-hidden="true"] {
            color: var(--border-strong);
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def build_summary_segments(items: Sequence[StepIndicatorItem]) -> list[str]:
    """Return HTML segments representing the wizard step summary."""

    segments: list[str] = []
    for item in items:
        annotated_label = f"{_STATUS_ICONS[item.status]} {item.step_number}. {item.label}"
        segments.append(f"<span data-state='{item.status.value}'>{html.escape(annotated_label)}</span>")
    return segments


def render_stepper(items: Sequence[StepIndicatorItem]) -> None:
    """Render the condensed step indicator above the step content."""

    if not items:
        return

    _inject_workflow_styles()
    arrow = "<span aria-hidden='true'>→</span>"
    st.markdown(
        "<div class='workflow-stepper__summary'>" + arrow.join(build_summary_segments(items)) + "</div>",
        unsafe_allow_html=True,
    )
