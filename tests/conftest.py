from pathlib import Path
import sys
from dataclasses import dataclass

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wizard.types import WizardStepDef  # noqa: E402


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture
def session_state() -> dict[str, object]:
    """Return the session mapping installed for the current test."""

    return st.session_state  # type: ignore[return-value]


@pytest.fixture
def four_steps() -> tuple[WizardStepDef, ...]:
    return (
        WizardStepDef(id="a", label="A"),
        WizardStepDef(id="b", label="B"),
        WizardStepDef(id="c", label="C"),
        WizardStepDef(id="d", label="D"),
    )
