"""Coarse tier predicates over a user's role names."""

from __future__ import annotations

from typing import Iterable

from constants.roles import ADMIN_ROLE_NAMES, TEAM_MEMBER_ROLE_NAMES, RoleNames


def collect_role_names(role: str | None = None, roles: Iterable[str] | None = None) -> frozenset[str]:
    """Merge the single ``role`` claim and the ``roles`` list claim.

    The list claim wins when present; otherwise the single claim is used.
    Empty strings are dropped.
    """

    if roles is not None:
        collected = frozenset(name for name in roles if name)
        if collected:
            return collected
    return frozenset({role}) if role else frozenset()


def is_admin_tier(roles: Iterable[str]) -> bool:
    """Return ``True`` when ``roles`` contains an administrator-tier role."""

    return not ADMIN_ROLE_NAMES.isdisjoint(roles)


def is_team_member_tier(roles: Iterable[str]) -> bool:
    """Return ``True`` when ``roles`` contains a team-member-tier role."""

    return not TEAM_MEMBER_ROLE_NAMES.isdisjoint(roles)


def is_superuser(roles: Iterable[str]) -> bool:
    """Return ``True`` when ``roles`` contains the superuser role."""

    return RoleNames.SUPERUSER in frozenset(roles)
