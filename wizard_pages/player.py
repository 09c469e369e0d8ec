"""Player registration flow."""

from __future__ import annotations

from constants.wizard_flows import WizardFlowKey
from wizard.types import WizardStepDef, WizardTheme

from .base import FlowContext, WizardFlow, context_flag

# Context keys read by the conditional steps.
TEAM_CONSTRAINT_TYPE = "team_constraint_type"
WAIVER_DEFINITIONS = "waiver_definitions"


def build_player_steps(context: FlowContext) -> tuple[WizardStepDef, ...]:
    """Eligibility needs a team constraint; waivers need at least one waiver."""

    return (
        WizardStepDef(id="family-check", label="Account"),
        WizardStepDef(id="players", label="Players"),
        WizardStepDef(
            id="eligibility",
            label="Eligibility",
            enabled=context_flag(context, TEAM_CONSTRAINT_TYPE),
        ),
        WizardStepDef(id="teams", label="Teams"),
        WizardStepDef(id="forms", label="Forms"),
        WizardStepDef(
            id="waivers",
            label="Waivers",
            enabled=context_flag(context, WAIVER_DEFINITIONS),
        ),
        WizardStepDef(id="review", label="Review"),
        WizardStepDef(id="payment", label="Payment"),
        WizardStepDef(id="confirmation", label="Done"),
    )


PLAYER_FLOW = WizardFlow(
    key=WizardFlowKey.PLAYER,
    title="Player Registration",
    theme=WizardTheme.PLAYER,
    build_steps=build_player_steps,
    # These steps carry their own calls to action.
    hidden_continue=frozenset({"family-check", "payment", "confirmation"}),
    continue_labels={"review": "Submit"},
)
