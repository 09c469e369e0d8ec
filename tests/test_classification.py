from __future__ import annotations

import pytest

from access import collect_role_names, is_admin_tier, is_superuser, is_team_member_tier
from constants.roles import RoleNames


@pytest.mark.parametrize("role", [RoleNames.SUPERUSER, RoleNames.DIRECTOR, RoleNames.SUPER_DIRECTOR])
def test_admin_tier_roles(role: str) -> None:
    assert is_admin_tier({role})
    assert not is_team_member_tier({role})


@pytest.mark.parametrize("role", [RoleNames.STAFF, RoleNames.FAMILY, RoleNames.PLAYER])
def test_team_member_tier_roles(role: str) -> None:
    assert is_team_member_tier({role})
    assert not is_admin_tier({role})


def test_empty_role_set_matches_no_tier() -> None:
    assert not is_admin_tier(set())
    assert not is_team_member_tier(set())
    assert not is_superuser(set())


def test_club_rep_belongs_to_neither_tier() -> None:
    roles = {RoleNames.CLUB_REP}
    assert not is_admin_tier(roles)
    assert not is_team_member_tier(roles)


def test_mixed_role_set_can_match_both_tiers() -> None:
    roles = [RoleNames.DIRECTOR, RoleNames.FAMILY]
    assert is_admin_tier(roles)
    assert is_team_member_tier(roles)


def test_tier_membership_is_order_independent() -> None:
    forward = [RoleNames.PLAYER, "Unrelated", RoleNames.SUPERUSER]
    assert is_admin_tier(forward) == is_admin_tier(list(reversed(forward)))
    assert is_team_member_tier(forward) == is_team_member_tier(list(reversed(forward)))


def test_role_names_are_case_sensitive() -> None:
    assert not is_admin_tier({"director"})
    assert not is_superuser({"superuser"})


def test_superuser_check() -> None:
    assert is_superuser([RoleNames.SUPERUSER, RoleNames.STAFF])
    assert not is_superuser([RoleNames.SUPER_DIRECTOR])


def test_collect_role_names_prefers_list_claim() -> None:
    assert collect_role_names(role="Player", roles=["Director", "Staff"]) == frozenset({"Director", "Staff"})


def test_collect_role_names_falls_back_to_single_claim() -> None:
    assert collect_role_names(role="Player", roles=[]) == frozenset({"Player"})
    assert collect_role_names(role="Family") == frozenset({"Family"})
    assert collect_role_names() == frozenset()
    assert collect_role_names(role="", roles=["", ""]) == frozenset()


def test_duplicate_roles_do_not_change_the_result() -> None:
    assert is_admin_tier([RoleNames.DIRECTOR, RoleNames.DIRECTOR]) is True
    assert is_team_member_tier([RoleNames.STAFF, RoleNames.STAFF]) is True
    assert is_admin_tier([RoleNames.STAFF, RoleNames.STAFF]) is False
    assert is_superuser([RoleNames.SUPERUSER, RoleNames.SUPERUSER]) is True


def test_predicates_accept_one_shot_iterators() -> None:
    assert is_admin_tier(iter([RoleNames.STAFF, RoleNames.STAFF])) is False
    assert is_admin_tier(iter([RoleNames.FAMILY, RoleNames.SUPER_DIRECTOR])) is True
    assert is_team_member_tier(iter([RoleNames.PLAYER, RoleNames.PLAYER])) is True
    assert is_superuser(iter([RoleNames.SUPERUSER])) is True
