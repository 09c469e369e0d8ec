from __future__ import annotations

import html
from enum import Enum
from collections.abc import MutableMapping
from typing import Literal

import streamlit as st

from wizard.navigation.keys import WizardSessionKeys
from wizard.navigation.presentation import NavigationBarState
from wizard.types import WizardShellConfig


_NAVIGATION_STYLE = """
<style>
.wizard-nav-marker + div[data-testid="stHorizontalBlock"] {
    display: flex;
    justify-content: space-between;
    gap: var(--space-sm, 0.6rem);
    align-items: center;
    margin: 1.2rem auto 0.65rem;
    max-width: 640px;
}

.wizard-nav-marker + div[data-testid="stHorizontalBlock"] button {
    width: 100%;
    border-radius: 14px;
    min-height: 3rem;
}

.wizard-nav-marker + div[data-testid="stHorizontalBlock"] button:disabled {
    box-shadow: none;
    opacity: 0.55;
}

.wizard-nav-badge {
    display: inline-block;
    padding: 0.3rem 0.75rem;
    border-radius: 999px;
    font-weight: 600;
    font-size: 0.9rem;
    background: rgba(100, 116, 139, 0.18);
}

.wizard-nav-badge.badge-warning {
    background: rgba(251, 191, 36, 0.25);
}

.wizard-nav-badge.badge-danger {
    background: rgba(239, 68, 68, 0.22);
}

.wizard-shell--player { --wizard-accent: #2563eb; }
.wizard-shell--team { --wizard-accent: #059669; }
.wizard-shell--family { --wizard-accent: #9333ea; }

.wizard-shell-title {
    border-left: 4px solid var(--wizard-accent, #2563eb);
    padding-left: 0.6rem;
}

@media (max-width: 768px) {
    .wizard-nav-marker + div[data-testid="stHorizontalBlock"] {
        flex-direction: column;
    }
}
</style>
"""


class NavigationDirection(str, Enum):
    """Direction of a clicked navigation control."""

    BACK = "back"
    CONTINUE = "continue"


def inject_navigation_style() -> None:
    st.markdown(_NAVIGATION_STYLE, unsafe_allow_html=True)


def render_shell_header(config: WizardShellConfig) -> None:
    """Render the wizard title with its theme class."""

    title = html.escape(config.title)
    st.markdown(
        f"<div class='wizard-shell--{config.theme.value}'><h2 class='wizard-shell-title'>{title}</h2></div>",
        unsafe_allow_html=True,
    )


def render_navigation(
    bar: NavigationBarState,
    *,
    key: str,
    location: Literal["top", "bottom"] = "bottom",
) -> NavigationDirection | None:
    """Render the action bar for ``bar`` and return the clicked direction.

    Nothing at all is emitted when ``bar.visible`` is ``False``.
    """

    if not bar.visible:
        return None

    marker_class = f"wizard-nav-marker wizard-nav-marker--{location}"
    st.markdown(f"<div class='{marker_class}'></div>", unsafe_allow_html=True)
    back_col, badge_col, continue_col = st.columns((1, 1, 1), gap="small")
    clicked: NavigationDirection | None = None

    if bar.can_back:
        if back_col.button("◀ Back", key=f"{key}.back.{location}", use_container_width=True):
            clicked = NavigationDirection.BACK
    else:
        back_col.write("")

    if bar.badge:
        badge_class = html.escape(bar.badge_class)
        badge_col.markdown(
            f"<span class='wizard-nav-badge {badge_class}'>{html.escape(bar.badge)}</span>",
            unsafe_allow_html=True,
        )
    else:
        badge_col.write("")

    if bar.show_continue:
        if continue_col.button(
            f"{bar.continue_label} ▶",
            key=f"{key}.continue.{location}",
            type="primary",
            disabled=not bar.can_continue,
            use_container_width=True,
        ):
            clicked = NavigationDirection.CONTINUE
    else:
        continue_col.write("")

    return clicked


def request_scroll_to_top(keys: WizardSessionKeys, session_state: MutableMapping[str, object] | None = None) -> None:
    state = session_state if session_state is not None else st.session_state
    state[keys.scroll_to_top] = True


def maybe_scroll_to_top(keys: WizardSessionKeys) -> None:
    if not st.session_state.pop(keys.scroll_to_top, False):
        return
    st.markdown(
        """
        <script>
        (function() {
            const root = window;
            const target = root.document.querySelector('section.main');
            const scrollToTop = () => {
                if (!target) {
                    root.scrollTo({ top: 0, behavior: 'smooth' });
                    return;
                }
                target.scrollIntoView({ behavior: 'smooth', block: 'start' });
            };
            if ('requestAnimationFrame' in root) {
                root.requestAnimationFrame(scrollToTop);
            } else {
                scrollToTop();
            }
        })();
        </script>
        """,
        unsafe_allow_html=True,
    )


__all__ = [
    "NavigationDirection",
    "inject_navigation_style",
    "maybe_scroll_to_top",
    "render_navigation",
    "render_shell_header",
    "request_scroll_to_top",
]
