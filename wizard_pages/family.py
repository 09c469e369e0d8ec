"""Family account flow."""

from __future__ import annotations

from constants.wizard_flows import WizardFlowKey
from wizard.types import WizardStepDef, WizardTheme

from .base import FlowContext, WizardFlow


def build_family_steps(_context: FlowContext) -> tuple[WizardStepDef, ...]:
    return (
        WizardStepDef(id="credentials", label="Account"),
        WizardStepDef(id="contacts", label="Contacts"),
        WizardStepDef(id="address", label="Address"),
        WizardStepDef(id="children", label="Children"),
        WizardStepDef(id="review", label="Review"),
    )


FAMILY_FLOW = WizardFlow(
    key=WizardFlowKey.FAMILY,
    title="Family Account",
    theme=WizardTheme.FAMILY,
    build_steps=build_family_steps,
    hidden_continue=frozenset({"review"}),
)
