"""
API tests for user administration and password changes.

Runs against the real application on an in-memory SQLite database.
Admin callers are simulated by overriding the current-user dependency.
"""

import pytest

from orgsync.api.deps.auth import get_current_user
from orgsync.core.authorization import CurrentUser, UserRole


@pytest.fixture
def ann(register_user, auth_headers) -> dict:
    body = register_user("ann@acme.io", name="Ann")
    return {"id": body["user"]["id"], "headers": auth_headers(body["token"])}


@pytest.fixture
def bob(register_user, auth_headers) -> dict:
    body = register_user("bob@acme.io", name="Bob")
    return {"id": body["user"]["id"], "headers": auth_headers(body["token"])}


@pytest.fixture
def as_admin(client):
    """Make every request run as an admin with the given id."""

    def _as_admin(user_id: int) -> None:
        client.app.dependency_overrides[get_current_user] = lambda: CurrentUser(
            id=user_id, email="admin@acme.io", role=UserRole.ADMIN
        )

    return _as_admin


class TestListAndGetUsers:
    """GET /api/users, GET /api/users/{id}"""

    def test_list_users_hides_password_hash(self, client, ann, bob) -> None:
        response = client.get("/api/users", headers=ann["headers"])

        assert response.status_code == 200
        body = response.json()
        assert [u["email"] for u in body] == ["ann@acme.io", "bob@acme.io"]
        for user in body:
            assert "password_hash" not in user
            assert "password" not in user
            assert user["organization"] is None

    def test_list_users_paginates(self, client, ann, bob) -> None:
        response = client.get("/api/users?limit=1&offset=1", headers=ann["headers"])

        assert [u["email"] for u in response.json()] == ["bob@acme.io"]

    def test_get_user_includes_organization(self, client, ann, bob, as_admin) -> None:
        org = client.post(
            "/api/organizations", json={"name": "Acme"}, headers=ann["headers"]
        ).json()
        as_admin(ann["id"])
        client.put(
            f"/api/users/{bob['id']}/organization",
            json={"organizationId": org["id"]},
        )

        response = client.get(f"/api/users/{bob['id']}")

        assert response.status_code == 200
        assert response.json()["organization"] == {"id": org["id"], "name": "Acme"}

    def test_get_missing_user_is_404(self, client, ann) -> None:
        response = client.get("/api/users/999", headers=ann["headers"])

        assert response.status_code == 404
        assert response.json() == {"detail": "User not found"}


class TestUpdateUser:
    """PUT /api/users/{id}"""

    def test_update_own_name(self, client, ann) -> None:
        response = client.put(
            f"/api/users/{ann['id']}", json={"name": "Annie"}, headers=ann["headers"]
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Annie"

    def test_update_other_user_is_403(self, client, ann, bob) -> None:
        response = client.put(
            f"/api/users/{bob['id']}", json={"name": "Robert"}, headers=ann["headers"]
        )

        assert response.status_code == 403

    def test_self_promotion_is_403(self, client, ann) -> None:
        response = client.put(
            f"/api/users/{ann['id']}", json={"role": "admin"}, headers=ann["headers"]
        )

        assert response.status_code == 403

    def test_email_taken_is_400(self, client, ann, bob) -> None:
        response = client.put(
            f"/api/users/{ann['id']}", json={"email": "bob@acme.io"}, headers=ann["headers"]
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Email already in use"}

    def test_admin_changes_role(self, client, ann, bob, as_admin) -> None:
        as_admin(ann["id"])

        response = client.put(f"/api/users/{bob['id']}", json={"role": "admin"})

        assert response.status_code == 200
        assert response.json()["role"] == "admin"


class TestDeleteUser:
    """DELETE /api/users/{id}"""

    def test_non_admin_delete_is_403(self, client, ann, bob) -> None:
        response = client.delete(f"/api/users/{bob['id']}", headers=ann["headers"])

        assert response.status_code == 403

    def test_admin_delete(self, client, ann, bob, as_admin) -> None:
        as_admin(ann["id"])

        response = client.delete(f"/api/users/{bob['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted successfully"}
        assert client.get(f"/api/users/{bob['id']}").status_code == 404

    def test_admin_cannot_delete_organization_owner(self, client, ann, bob, as_admin) -> None:
        org = client.post(
            "/api/organizations", json={"name": "Bobco"}, headers=bob["headers"]
        ).json()
        as_admin(ann["id"])

        response = client.delete(f"/api/users/{bob['id']}")

        assert response.status_code == 400
        assert response.json() == {"detail": "User still owns organizations; delete them first"}
        client.app.dependency_overrides.clear()
        assert client.get(
            f"/api/organizations/{org['id']}", headers=bob["headers"]
        ).status_code == 200

    def test_deleted_user_token_is_rejected(self, client, ann, bob, as_admin) -> None:
        as_admin(ann["id"])
        client.delete(f"/api/users/{bob['id']}")
        client.app.dependency_overrides.clear()

        response = client.get("/api/users", headers=bob["headers"])

        assert response.status_code == 401
        assert response.json() == {"detail": "Unauthorized: User not found"}


class TestChangePassword:
    """POST /api/users/change-password"""

    def test_change_password_then_login(self, client, ann) -> None:
        response = client.post(
            "/api/users/change-password",
            json={"currentPassword": "secret1", "newPassword": "secret2"},
            headers=ann["headers"],
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Password changed successfully"}
        assert client.post(
            "/api/auth/login", json={"email": "ann@acme.io", "password": "secret2"}
        ).status_code == 200
        assert client.post(
            "/api/auth/login", json={"email": "ann@acme.io", "password": "secret1"}
        ).status_code == 401

    def test_wrong_current_password_keeps_old_password(self, client, ann) -> None:
        response = client.post(
            "/api/users/change-password",
            json={"current_password": "wrong-one", "new_password": "secret2"},
            headers=ann["headers"],
        )

        assert response.status_code == 401
        assert response.json() == {"detail": "Current password is incorrect"}
        assert client.post(
            "/api/auth/login", json={"email": "ann@acme.io", "password": "secret1"}
        ).status_code == 200

    def test_missing_new_password_is_400(self, client, ann) -> None:
        response = client.post(
            "/api/users/change-password",
            json={"currentPassword": "secret1", "newPassword": ""},
            headers=ann["headers"],
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Current password and new password are required"}


class TestAssignUserOrganization:
    """PUT /api/users/{id}/organization"""

    def test_owner_assigns_self_to_own_organization(self, client, ann) -> None:
        org = client.post(
            "/api/organizations", json={"name": "Acme"}, headers=ann["headers"]
        ).json()

        response = client.put(
            f"/api/users/{ann['id']}/organization",
            json={"organizationId": org["id"]},
            headers=ann["headers"],
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User organization updated successfully"
        assert body["user"]["organization"] == {"id": org["id"], "name": "Acme"}

    def test_assign_to_foreign_organization_is_403(self, client, ann, bob) -> None:
        org = client.post(
            "/api/organizations", json={"name": "Bobco"}, headers=bob["headers"]
        ).json()

        response = client.put(
            f"/api/users/{ann['id']}/organization",
            json={"organization_id": org["id"]},
            headers=ann["headers"],
        )

        assert response.status_code == 403

    def test_assign_missing_organization_is_404(self, client, ann) -> None:
        response = client.put(
            f"/api/users/{ann['id']}/organization",
            json={"organization_id": 999},
            headers=ann["headers"],
        )

        assert response.status_code == 404

    def test_clear_organization(self, client, ann) -> None:
        org = client.post(
            "/api/organizations", json={"name": "Acme"}, headers=ann["headers"]
        ).json()
        client.put(
            f"/api/users/{ann['id']}/organization",
            json={"organization_id": org["id"]},
            headers=ann["headers"],
        )

        response = client.put(
            f"/api/users/{ann['id']}/organization",
            json={"organization_id": None},
            headers=ann["headers"],
        )

        assert response.status_code == 200
        assert response.json()["user"]["organization_id"] is None
