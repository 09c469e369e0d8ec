from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from constants.wizard_flows import WizardFlowKey
from wizard.navigation.presentation import DEFAULT_CONTINUE_LABEL
from wizard.types import WizardShellConfig, WizardStepDef, WizardTheme

FlowContext = Mapping[str, object]
StepBuilder = Callable[[FlowContext], tuple[WizardStepDef, ...]]


@dataclass(frozen=True)
class WizardFlow:
    """Static description of a registration wizard.

    The flow keeps step construction separate from navigation so hosts can
    rebuild the step list whenever an answer toggles a conditional step and
    hand the result to :meth:`NavigationController.replace_steps`. Per-step
    affordances (whether the continue control is shown and its label) live
    here because they are fixed for a given flow.
    """

    key: WizardFlowKey
    title: str
    theme: WizardTheme
    build_steps: StepBuilder = field(repr=False, compare=False)
    hidden_continue: frozenset[str] = frozenset()
    continue_labels: Mapping[str, str] = field(default_factory=dict)

    def steps(self, context: FlowContext | None = None) -> tuple[WizardStepDef, ...]:
        """Return the full step list for ``context``."""

        return self.build_steps(context or {})

    def show_continue(self, step_id: str | None) -> bool:
        """Return whether the continue control is offered on ``step_id``."""

        if step_id is None:
            return False
        return step_id not in self.hidden_continue

    def continue_label(self, step_id: str | None) -> str:
        if step_id is None:
            return DEFAULT_CONTINUE_LABEL
        return self.continue_labels.get(step_id, DEFAULT_CONTINUE_LABEL)

    def shell_config(self, badge: str | None = None) -> WizardShellConfig:
        """Return the shell identity for this flow with an optional badge."""

        return WizardShellConfig(title=self.title, theme=self.theme, badge=badge)


def context_flag(context: FlowContext, key: str) -> bool:
    """Return ``True`` when ``context[key]`` is set to a non-empty value."""

    value = context.get(key)
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) > 0
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)
