"""Team registration flow for club representatives."""

from __future__ import annotations

from constants.wizard_flows import WizardFlowKey
from wizard.types import WizardStepDef, WizardTheme

from .base import FlowContext, WizardFlow


def build_team_steps(_context: FlowContext) -> tuple[WizardStepDef, ...]:
    return (
        WizardStepDef(id="login", label="Login"),
        WizardStepDef(id="teams", label="Teams"),
        WizardStepDef(id="payment", label="Payment"),
        WizardStepDef(id="review", label="Review"),
    )


TEAM_FLOW = WizardFlow(
    key=WizardFlowKey.TEAM,
    title="Team Registration",
    theme=WizardTheme.TEAM,
    build_steps=build_team_steps,
    hidden_continue=frozenset({"login"}),
    continue_labels={
        "teams": "Proceed to Payment",
        "payment": "Proceed to Review",
        "review": "Return Home",
    },
)
