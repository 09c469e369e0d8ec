"""Role labelling and role-set classification helpers."""

from __future__ import annotations

from .classification import collect_role_names, is_admin_tier, is_superuser, is_team_member_tier
from .privileges import resolve, resolve_role_id

__all__ = [
    "collect_role_names",
    "is_admin_tier",
    "is_superuser",
    "is_team_member_tier",
    "resolve",
    "resolve_role_id",
]
