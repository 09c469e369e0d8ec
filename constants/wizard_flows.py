from __future__ import annotations

from enum import StrEnum


class WizardFlowKey(StrEnum):
    PLAYER = "player"
    FAMILY = "family"
    TEAM = "team"
