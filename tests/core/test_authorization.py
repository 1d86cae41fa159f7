"""
Test suite for the authorization policy.

System role: Verification of capability checks
"""

from types import SimpleNamespace

import pytest

from orgsync.core.authorization import Action, CurrentUser, UserRole, authorize, is_allowed
from orgsync.core.exceptions import PermissionDeniedError

OWNER = CurrentUser(id=1, email="owner@acme.io", role=UserRole.USER)
STRANGER = CurrentUser(id=2, email="other@acme.io", role=UserRole.USER)
ADMIN = CurrentUser(id=3, email="admin@acme.io", role=UserRole.ADMIN)

ORGANIZATION = SimpleNamespace(id=10, owner_id=1)
ORPHAN_ORGANIZATION = SimpleNamespace(id=11, owner_id=None)


class TestOrganizationActions:
    """Organization capabilities follow ownership."""

    @pytest.mark.parametrize(
        "action",
        [
            Action.ORGANIZATION_READ,
            Action.ORGANIZATION_UPDATE,
            Action.ORGANIZATION_DELETE,
            Action.ORGANIZATION_ASSIGN,
            Action.CONTACT_REASSIGN,
        ],
    )
    def test_owner_allowed_stranger_denied(self, action: Action) -> None:
        assert is_allowed(OWNER, action, ORGANIZATION)
        assert not is_allowed(STRANGER, action, ORGANIZATION)

    def test_admin_does_not_bypass_ownership(self) -> None:
        assert not is_allowed(ADMIN, Action.ORGANIZATION_DELETE, ORGANIZATION)

    def test_ownerless_organization_denied(self) -> None:
        assert not is_allowed(OWNER, Action.ORGANIZATION_UPDATE, ORPHAN_ORGANIZATION)


class TestUserActions:
    """User administration capabilities."""

    def test_self_update_allowed(self) -> None:
        assert is_allowed(STRANGER, Action.USER_UPDATE, SimpleNamespace(id=2))

    def test_update_other_user_denied(self) -> None:
        assert not is_allowed(STRANGER, Action.USER_UPDATE, SimpleNamespace(id=1))

    def test_admin_updates_anyone(self) -> None:
        assert is_allowed(ADMIN, Action.USER_UPDATE, SimpleNamespace(id=1))

    @pytest.mark.parametrize("action", [Action.USER_DELETE, Action.USER_CHANGE_ROLE])
    def test_admin_only_actions(self, action: Action) -> None:
        target = SimpleNamespace(id=2)
        assert is_allowed(ADMIN, action, target)
        assert not is_allowed(STRANGER, action, target)


class TestAuthorize:
    """authorize() raises on denial."""

    def test_denial_raises_with_action(self) -> None:
        with pytest.raises(PermissionDeniedError) as exc_info:
            authorize(STRANGER, Action.ORGANIZATION_DELETE, ORGANIZATION)

        assert exc_info.value.action == "organization:delete"
        assert exc_info.value.details["actor_id"] == 2
        assert exc_info.value.details["resource_id"] == 10

    def test_allowed_returns_none(self) -> None:
        assert authorize(OWNER, Action.ORGANIZATION_READ, ORGANIZATION) is None
