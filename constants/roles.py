"""Known role identifiers, privilege names and role names."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class RoleId(StrEnum):
    """Role identifiers issued by the identity provider.

    Values are the provider's opaque role tokens; they are compared with exact,
    case-sensitive string equality.
    """

    PLAYER = "DAC0C570-94AA-4A88-8D73-6034F1F72F3A"
    STAFF = "1DB2EBF0-F12B-43DC-A960-CFC7DD4642FA"
    CLUB_REP = "6A26171F-4D94-4928-94FA-2FEFD42C3C3E"
    DIRECTOR = "FF4D1C27-F6DA-4745-98CC-D7E8121A5D06"
    SUPER_DIRECTOR = "7B9EB503-53C9-44FA-94A0-17760C512440"
    SUPERUSER = "CE2CB370-5880-4624-A43E-048379C64331"


class PrivilegeName(StrEnum):
    """Human-readable labels shown for a role identifier."""

    PLAYER = "Player"
    STAFF = "Staff"
    CLUB_REP = "Club Rep"
    DIRECTOR = "Director"
    SUPER_DIRECTOR = "Super Director"
    SUPERUSER = "Superuser"
    UNKNOWN = "Unknown"


class RoleNames:
    """Role names carried in session claims and used by role-set predicates."""

    SUPERUSER = "Superuser"
    SUPER_DIRECTOR = "SuperDirector"
    DIRECTOR = "Director"
    CLUB_REP = "ClubRep"
    STAFF = "Staff"
    FAMILY = "Family"
    PLAYER = "Player"


ADMIN_ROLE_NAMES: Final[frozenset[str]] = frozenset(
    {RoleNames.SUPERUSER, RoleNames.DIRECTOR, RoleNames.SUPER_DIRECTOR}
)
TEAM_MEMBER_ROLE_NAMES: Final[frozenset[str]] = frozenset(
    {RoleNames.STAFF, RoleNames.FAMILY, RoleNames.PLAYER}
)
