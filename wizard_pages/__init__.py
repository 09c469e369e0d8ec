"""Registration wizard catalog."""

from __future__ import annotations

from typing import Final, Mapping

from constants.wizard_flows import WizardFlowKey
from core.errors import UnknownWizardFlowError

from .base import FlowContext, WizardFlow, context_flag
from .family import FAMILY_FLOW
from .player import PLAYER_FLOW
from .team import TEAM_FLOW

WIZARD_FLOWS: Final[Mapping[WizardFlowKey, WizardFlow]] = {
    flow.key: flow for flow in (PLAYER_FLOW, FAMILY_FLOW, TEAM_FLOW)
}


def get_flow(key: str) -> WizardFlow:
    """Return the registered flow for ``key``."""

    try:
        return WIZARD_FLOWS[WizardFlowKey(key)]
    except ValueError as error:
        raise UnknownWizardFlowError(f"Unknown wizard flow '{key}'") from error


__all__ = [
    "FAMILY_FLOW",
    "FlowContext",
    "PLAYER_FLOW",
    "TEAM_FLOW",
    "WIZARD_FLOWS",
    "WizardFlow",
    "context_flag",
    "get_flow",
]
