"""Central configuration for the league registration wizards.

Values are read from the environment (and a local ``.env`` file when
``python-dotenv`` is installed):

``LOG_LEVEL``
    Root logging level, ``INFO`` by default.
``DEFAULT_WIZARD``
    Flow opened when the app starts (``player`` | ``family`` | ``team``).
``SHOW_STEP_INDICATOR``
    Truthy flag controlling the step indicator above the wizard.
"""

import logging
import os

from constants.wizard_flows import WizardFlowKey

try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


logger = logging.getLogger(__name__)

_TRUTHY_ENV_VALUES: tuple[str, ...] = ("1", "true", "yes", "on")
_FALSY_ENV_VALUES: tuple[str, ...] = ("0", "false", "no", "off")


def _flag_with_default(value: str | None, *, default: bool) -> bool:
    """Return the boolean for an environment flag, or ``default`` when unset."""

    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY_ENV_VALUES:
        return True
    if normalized in _FALSY_ENV_VALUES:
        return False
    return default


def normalise_log_level(value: str | None, *, default: str = "INFO") -> str:
    """Return an upper-case logging level name understood by :mod:`logging`."""

    if not value:
        return default
    candidate = value.strip().upper()
    if isinstance(logging.getLevelName(candidate), int):
        return candidate
    logger.warning("Ignoring unknown LOG_LEVEL '%s'; using %s", value, default)
    return default


def normalise_wizard_key(value: str | None, *, default: WizardFlowKey = WizardFlowKey.PLAYER) -> WizardFlowKey:
    """Return a known :class:`WizardFlowKey` for ``value``."""

    if not value:
        return default
    try:
        return WizardFlowKey(value.strip().lower())
    except ValueError:
        logger.warning("Ignoring unknown DEFAULT_WIZARD '%s'; using %s", value, default.value)
        return default


LOG_LEVEL = normalise_log_level(os.getenv("LOG_LEVEL"))
DEFAULT_WIZARD = normalise_wizard_key(os.getenv("DEFAULT_WIZARD"))
SHOW_STEP_INDICATOR = _flag_with_default(os.getenv("SHOW_STEP_INDICATOR"), default=True)
