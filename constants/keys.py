class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    WIZARD_SELECT = "ui.wizard_select"
    ROLE_ID_INPUT = "ui.session.role_id"
    ROLE_NAMES_INPUT = "ui.session.role_names"
    TEAM_CONSTRAINT_TOGGLE = "ui.player.team_constraint"
    WAIVERS_TOGGLE = "ui.player.waivers"
    BADGE_INPUT = "ui.shell.badge"
    STEP_READY_TOGGLE = "ui.step_ready"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    SESSION_ID = "session_id"
    EVENT_LOG = "wizard.event_log"
    DEEP_LINK_APPLIED = "wizard.deep_link_applied"
