"""Resolve identity-provider role identifiers to display names.

The resolver only labels roles for display. It never grants or blocks access.
"""

from __future__ import annotations

from constants.roles import PrivilegeName, RoleId


def resolve_role_id(role_id: str | None) -> RoleId | None:
    """Return the known :class:`RoleId` for ``role_id`` or ``None``."""

    if not role_id:
        return None
    try:
        return RoleId(role_id)
    except ValueError:
        return None


def resolve(role_id: str | None) -> PrivilegeName:
    """Return the privilege name for ``role_id``.

    Unrecognised, empty or ``None`` identifiers resolve to
    :attr:`PrivilegeName.UNKNOWN`.
    """

    match resolve_role_id(role_id):
        case RoleId.PLAYER:
            return PrivilegeName.PLAYER
        case RoleId.STAFF:
            return PrivilegeName.STAFF
        case RoleId.CLUB_REP:
            return PrivilegeName.CLUB_REP
        case RoleId.DIRECTOR:
            return PrivilegeName.DIRECTOR
        case RoleId.SUPER_DIRECTOR:
            return PrivilegeName.SUPER_DIRECTOR
        case RoleId.SUPERUSER:
            return PrivilegeName.SUPERUSER
        case _:
            return PrivilegeName.UNKNOWN
