"""
API tests for organization CRUD.

Runs against the real application on an in-memory SQLite database.
"""

import pytest


@pytest.fixture
def owner(register_user, auth_headers) -> dict:
    body = register_user("owner@acme.io", name="Olive")
    return {"id": body["user"]["id"], "headers": auth_headers(body["token"])}


@pytest.fixture
def stranger(register_user, auth_headers) -> dict:
    body = register_user("stranger@acme.io", name="Sam")
    return {"id": body["user"]["id"], "headers": auth_headers(body["token"])}


class TestCreateOrganization:
    """POST /api/organizations"""

    def test_create_returns_201(self, client, owner) -> None:
        response = client.post(
            "/api/organizations",
            json={"name": "Acme", "description": "Widgets"},
            headers=owner["headers"],
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Acme"
        assert body["description"] == "Widgets"
        assert body["owner_id"] == owner["id"]
        assert body["members"] == []

    @pytest.mark.parametrize("second_name", ["Acme", "ACME", "acme"])
    def test_duplicate_name_ignoring_case_is_400(self, client, owner, second_name) -> None:
        first = client.post("/api/organizations", json={"name": "Acme"}, headers=owner["headers"])
        second = client.post(
            "/api/organizations", json={"name": second_name}, headers=owner["headers"]
        )

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json() == {"detail": "Organization name must be unique"}

    def test_same_name_allowed_for_different_owners(self, client, owner, stranger) -> None:
        first = client.post("/api/organizations", json={"name": "Acme"}, headers=owner["headers"])
        second = client.post(
            "/api/organizations", json={"name": "Acme"}, headers=stranger["headers"]
        )

        assert first.status_code == 201
        assert second.status_code == 201

    def test_empty_name_is_400(self, client, owner) -> None:
        response = client.post("/api/organizations", json={"name": "  "}, headers=owner["headers"])

        assert response.status_code == 400
        assert response.json() == {"detail": "Organization name is required"}

    def test_name_over_50_chars_is_400(self, client, owner) -> None:
        response = client.post(
            "/api/organizations", json={"name": "x" * 51}, headers=owner["headers"]
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Organization name cannot exceed 50 characters"}

    def test_name_of_exactly_50_chars_is_accepted(self, client, owner) -> None:
        response = client.post(
            "/api/organizations", json={"name": "x" * 50}, headers=owner["headers"]
        )

        assert response.status_code == 201


class TestReadOrganizations:
    """GET /api/organizations and /api/organizations/{id}"""

    def test_list_only_own_organizations_with_members(self, client, owner, stranger) -> None:
        created = client.post(
            "/api/organizations", json={"name": "Acme"}, headers=owner["headers"]
        ).json()
        client.post("/api/organizations", json={"name": "Other"}, headers=stranger["headers"])
        client.put(
            f"/api/users/{owner['id']}/organization",
            json={"organizationId": created["id"]},
            headers=owner["headers"],
        )

        response = client.get("/api/organizations", headers=owner["headers"])

        assert response.status_code == 200
        body = response.json()
        assert [o["name"] for o in body] == ["Acme"]
        assert body[0]["members"] == [
            {"id": owner["id"], "name": "Olive", "email": "owner@acme.io", "role": "user"}
        ]

    def test_get_missing_is_404(self, client, owner) -> None:
        response = client.get("/api/organizations/999", headers=owner["headers"])

        assert response.status_code == 404
        assert response.json() == {"detail": "Organization not found"}

    def test_get_foreign_is_403(self, client, owner, stranger) -> None:
        created = client.post(
            "/api/organizations", json={"name": "Acme"}, headers=owner["headers"]
        ).json()

        response = client.get(f"/api/organizations/{created['id']}", headers=stranger["headers"])

        assert response.status_code == 403
        assert response.json() == {"detail": "Permission denied"}


class TestUpdateDeleteOrganization:
    """PUT/DELETE /api/organizations/{id}"""

    def test_rename(self, client, owner) -> None:
        created = client.post(
            "/api/organizations", json={"name": "Acme"}, headers=owner["headers"]
        ).json()

        response = client.put(
            f"/api/organizations/{created['id']}",
            json={"name": "Acme Corp"},
            headers=owner["headers"],
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Acme Corp"

    def test_rename_to_same_name_different_case_is_allowed(self, client, owner) -> None:
        created = client.post(
            "/api/organizations", json={"name": "Acme"}, headers=owner["headers"]
        ).json()

        response = client.put(
            f"/api/organizations/{created['id']}",
            json={"name": "ACME"},
            headers=owner["headers"],
        )

        assert response.status_code == 200
        assert response.json()["name"] == "ACME"

    def test_rename_onto_sibling_is_400(self, client, owner) -> None:
        client.post("/api/organizations", json={"name": "Acme"}, headers=owner["headers"])
        other = client.post(
            "/api/organizations", json={"name": "Beta"}, headers=owner["headers"]
        ).json()

        response = client.put(
            f"/api/organizations/{other['id']}",
            json={"name": "acme"},
            headers=owner["headers"],
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Organization name must be unique"}

    def test_update_foreign_is_403(self, client, owner, stranger) -> None:
        created = client.post(
            "/api/organizations", json={"name": "Acme"}, headers=owner["headers"]
        ).json()

        response = client.put(
            f"/api/organizations/{created['id']}",
            json={"name": "Mine"},
            headers=stranger["headers"],
        )

        assert response.status_code == 403

    def test_delete_unassigns_members(self, client, owner) -> None:
        created = client.post(
            "/api/organizations", json={"name": "Acme"}, headers=owner["headers"]
        ).json()
        client.put(
            f"/api/users/{owner['id']}/organization",
            json={"organizationId": created["id"]},
            headers=owner["headers"],
        )

        response = client.delete(f"/api/organizations/{created['id']}", headers=owner["headers"])

        assert response.status_code == 200
        assert response.json() == {"message": "Organization deleted successfully"}
        user = client.get(f"/api/users/{owner['id']}", headers=owner["headers"]).json()
        assert user["organization_id"] is None
        assert user["organization"] is None
        assert client.get(
            f"/api/organizations/{created['id']}", headers=owner["headers"]
        ).status_code == 404

    def test_delete_foreign_is_403(self, client, owner, stranger) -> None:
        created = client.post(
            "/api/organizations", json={"name": "Acme"}, headers=owner["headers"]
        ).json()

        response = client.delete(
            f"/api/organizations/{created['id']}", headers=stranger["headers"]
        )

        assert response.status_code == 403
