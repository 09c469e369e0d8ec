# app.py: League registration wizards (Streamlit host)
from __future__ import annotations

from pathlib import Path
import sys
import uuid
from typing import Final

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

from access import collect_role_names, is_admin_tier, is_superuser, is_team_member_tier, resolve  # noqa: E402
from components.stepper import render_stepper  # noqa: E402
from config import DEFAULT_WIZARD, LOG_LEVEL, SHOW_STEP_INDICATOR  # noqa: E402
from constants.keys import StateKeys, UIKeys  # noqa: E402
from constants.roles import RoleId, RoleNames  # noqa: E402
from constants.wizard_flows import WizardFlowKey  # noqa: E402
from utils.logging_context import configure_logging, set_session_id, set_wizard_id, set_wizard_step  # noqa: E402
from wizard.navigation import (  # noqa: E402
    NavigationController,
    WizardEvent,
    build_navigation_bar,
    build_step_indicator,
)
from wizard.navigation.ui import (  # noqa: E402
    NavigationDirection,
    inject_navigation_style,
    maybe_scroll_to_top,
    render_navigation,
    render_shell_header,
    request_scroll_to_top,
)
from wizard.step_registry import get_step  # noqa: E402
from wizard_pages import WIZARD_FLOWS, WizardFlow, get_flow  # noqa: E402
from wizard_pages.player import TEAM_CONSTRAINT_TYPE, WAIVER_DEFINITIONS  # noqa: E402

_MAX_EVENT_LOG: Final[int] = 25

configure_logging(level=LOG_LEVEL)

st.set_page_config(
    page_title="League Registration",
    page_icon="🏅",
    layout="wide",
    initial_sidebar_state="expanded",
)

if StateKeys.SESSION_ID not in st.session_state:
    st.session_state[StateKeys.SESSION_ID] = uuid.uuid4().hex[:12]
set_session_id(str(st.session_state[StateKeys.SESSION_ID]))


def render_session_sidebar() -> None:
    """Show how the current session's role is labelled and classified."""

    st.sidebar.header("Session role")
    role_id = st.sidebar.selectbox(
        "Role identifier",
        options=["", *(role.value for role in RoleId), "not-a-role"],
        key=UIKeys.ROLE_ID_INPUT,
    )
    st.sidebar.caption(f"Privilege: **{resolve(role_id or None)}**")

    known_names = [
        RoleNames.SUPERUSER,
        RoleNames.SUPER_DIRECTOR,
        RoleNames.DIRECTOR,
        RoleNames.CLUB_REP,
        RoleNames.STAFF,
        RoleNames.FAMILY,
        RoleNames.PLAYER,
    ]
    selected = st.sidebar.multiselect("Role names", options=known_names, key=UIKeys.ROLE_NAMES_INPUT)
    roles = collect_role_names(roles=selected)
    st.sidebar.write(
        {
            "admin tier": is_admin_tier(roles),
            "team member tier": is_team_member_tier(roles),
            "superuser": is_superuser(roles),
        }
    )


def _flow_context(flow: WizardFlow) -> dict[str, object]:
    if flow.key is not WizardFlowKey.PLAYER:
        return {}
    st.sidebar.header("Job settings")
    constrained = st.sidebar.toggle("Team constraint", key=UIKeys.TEAM_CONSTRAINT_TOGGLE)
    waivers = st.sidebar.toggle("Job has waivers", key=UIKeys.WAIVERS_TOGGLE)
    return {
        TEAM_CONSTRAINT_TYPE: "BYGRADYEAR" if constrained else None,
        WAIVER_DEFINITIONS: ["Liability waiver"] if waivers else [],
    }


def _ready_key(flow: WizardFlow, step_id: str) -> str:
    return f"{UIKeys.STEP_READY_TOGGLE}.{flow.key.value}.{step_id}"


def _record_event(event: WizardEvent) -> None:
    log = st.session_state.setdefault(StateKeys.EVENT_LOG, [])
    log.append(f"{event.wizard_id}: {event.kind.value} {event.from_step or '-'} → {event.to_step or 'complete'}")
    del log[:-_MAX_EVENT_LOG]


def _apply_deep_link(controller: NavigationController) -> None:
    applied_key = f"{StateKeys.DEEP_LINK_APPLIED}.{controller.wizard_id}"
    if st.session_state.get(applied_key):
        return
    st.session_state[applied_key] = True
    step_param = st.query_params.get("step")
    if isinstance(step_param, str) and step_param:
        controller.jump_to(step_param)


def run_wizard(flow: WizardFlow) -> None:
    """Render ``flow`` around a :class:`NavigationController`."""

    steps = flow.steps(_flow_context(flow))
    controller = NavigationController(
        steps,
        can_continue=lambda step_id: bool(st.session_state.get(_ready_key(flow, step_id), False)),
        can_back=lambda _step_id: True,
        wizard_id=flow.key.value,
        session_state=st.session_state,
        listeners=(_record_event,),
    )
    _apply_deep_link(controller)
    set_wizard_id(controller.wizard_id)
    set_wizard_step(controller.active_step_id or "complete")

    maybe_scroll_to_top(controller.session_keys)
    badge = st.sidebar.text_input("Badge", key=f"{UIKeys.BADGE_INPUT}.{flow.key.value}")
    shell = flow.shell_config(badge=badge)
    render_shell_header(shell)

    if SHOW_STEP_INDICATOR:
        render_stepper(build_step_indicator(controller.state))

    current = controller.active_step_id
    if current is None:
        st.success(f"{shell.title} complete.")
        if st.button("Start over", key=f"restart.{flow.key.value}"):
            st.session_state.pop(controller.session_keys.navigation_state, None)
            st.rerun()
        return

    step = get_step(controller.steps, current)
    label = step.label if step is not None else current
    with st.container(border=True):
        st.subheader(label)
        st.checkbox("This step is complete", key=_ready_key(flow, current))

    bar = build_navigation_bar(
        can_back=controller.can_back(),
        show_continue=flow.show_continue(current),
        can_continue=controller.can_continue(),
        continue_label=flow.continue_label(current),
        badge=shell.badge,
        badge_class="badge-warning",
    )
    clicked = render_navigation(bar, key=f"wizard.{flow.key.value}")
    moved = False
    if clicked is NavigationDirection.BACK:
        moved = controller.back()
    elif clicked is NavigationDirection.CONTINUE:
        moved = controller.continue_step()
    if moved:
        request_scroll_to_top(controller.session_keys)
        st.rerun()


inject_navigation_style()
render_session_sidebar()

flow_keys = [key.value for key in WIZARD_FLOWS]
active_key = st.sidebar.radio(
    "Wizard",
    options=flow_keys,
    index=flow_keys.index(DEFAULT_WIZARD.value),
    key=UIKeys.WIZARD_SELECT,
)
run_wizard(get_flow(active_key))

with st.expander("Navigation events"):
    for line in reversed(st.session_state.get(StateKeys.EVENT_LOG, [])):
        st.text(line)
