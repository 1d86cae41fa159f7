"""
Integration tests for the model-specific CRUD classes on SQLite.

System role: Verification of queries, ordering and constraints
"""

import pytest
from sqlalchemy.exc import IntegrityError

from orgsync.boundary.db.CRUD import (
    integration_config_crud,
    organization_crud,
    user_crud,
    wealthbox_user_crud,
)


async def make_user(session, email: str, name: str = "User", **kwargs):
    return await user_crud.create(session, email=email, password_hash="x", name=name, **kwargs)


class TestUserCRUD:
    """Test suite for UserCRUD."""

    async def test_email_is_unique(self, test_async_db) -> None:
        await make_user(test_async_db, "a@acme.io")

        with pytest.raises(IntegrityError):
            await make_user(test_async_db, "a@acme.io")

    async def test_get_with_organization(self, test_async_db) -> None:
        owner = await make_user(test_async_db, "owner@acme.io")
        org = await organization_crud.create(test_async_db, name="Acme", owner_id=owner.id)
        member = await make_user(test_async_db, "m@acme.io", organization_id=org.id)

        loaded = await user_crud.get_with_organization(test_async_db, member.id)

        assert loaded.organization.name == "Acme"

    async def test_get_all_ordered_by_id(self, test_async_db) -> None:
        for email in ["c@acme.io", "a@acme.io", "b@acme.io"]:
            await make_user(test_async_db, email)

        users = await user_crud.get_all_with_organization(test_async_db, limit=2, offset=1)

        assert [u.email for u in users] == ["a@acme.io", "b@acme.io"]


class TestOrganizationCRUD:
    """Test suite for OrganizationCRUD."""

    async def test_find_by_name_ignores_case(self, test_async_db) -> None:
        owner = await make_user(test_async_db, "owner@acme.io")
        org = await organization_crud.create(test_async_db, name="Acme", owner_id=owner.id)

        assert (await organization_crud.find_by_name_for_owner(test_async_db, owner.id, "aCmE")).id == org.id
        assert await organization_crud.find_by_name_for_owner(
            test_async_db, owner.id, "ACME", exclude_id=org.id
        ) is None

    async def test_find_by_name_scoped_to_owner(self, test_async_db) -> None:
        owner = await make_user(test_async_db, "owner@acme.io")
        other = await make_user(test_async_db, "other@acme.io")
        await organization_crud.create(test_async_db, name="Acme", owner_id=owner.id)

        assert await organization_crud.find_by_name_for_owner(test_async_db, other.id, "Acme") is None

    async def test_get_all_for_owner_loads_members(self, test_async_db) -> None:
        owner = await make_user(test_async_db, "owner@acme.io")
        org = await organization_crud.create(test_async_db, name="Acme", owner_id=owner.id)
        await make_user(test_async_db, "m1@acme.io", organization_id=org.id)
        await make_user(test_async_db, "m2@acme.io", organization_id=org.id)

        orgs = await organization_crud.get_all_for_owner(test_async_db, owner.id)

        assert len(orgs) == 1
        assert [m.email for m in orgs[0].members] == ["m1@acme.io", "m2@acme.io"]

    async def test_owner_has_any(self, test_async_db) -> None:
        owner = await make_user(test_async_db, "owner@acme.io")
        other = await make_user(test_async_db, "other@acme.io")
        await organization_crud.create(test_async_db, name="Acme", owner_id=owner.id)

        assert await organization_crud.owner_has_any(test_async_db, owner.id) is True
        assert await organization_crud.owner_has_any(test_async_db, other.id) is False

    async def test_owner_delete_is_restricted(self, test_async_db) -> None:
        owner = await make_user(test_async_db, "owner@acme.io")
        await organization_crud.create(test_async_db, name="Acme", owner_id=owner.id)
        await test_async_db.commit()

        with pytest.raises(IntegrityError):
            await user_crud.delete_by_id(test_async_db, owner.id)

    async def test_delete_sets_member_organization_null(self, test_async_db) -> None:
        owner = await make_user(test_async_db, "owner@acme.io")
        org = await organization_crud.create(test_async_db, name="Acme", owner_id=owner.id)
        member = await make_user(test_async_db, "m@acme.io", organization_id=org.id)
        await test_async_db.commit()

        assert await organization_crud.delete_by_id(test_async_db, org.id) is True
        await test_async_db.commit()

        reloaded = await user_crud.get_with_organization(test_async_db, member.id)
        assert reloaded.organization_id is None


class TestIntegrationConfigCRUD:
    """Test suite for IntegrationConfigCRUD."""

    async def test_upsert_creates_then_updates(self, test_async_db) -> None:
        user = await make_user(test_async_db, "a@acme.io")

        first, created = await integration_config_crud.upsert_for_user(
            test_async_db, user.id, "wealthbox", "t1"
        )
        second, created_again = await integration_config_crud.upsert_for_user(
            test_async_db, user.id, "wealthbox", "t2"
        )

        assert created is True
        assert created_again is False
        assert first.id == second.id
        assert second.api_token == "t2"

    async def test_unique_per_user_and_type(self, test_async_db) -> None:
        user = await make_user(test_async_db, "a@acme.io")
        await integration_config_crud.create(
            test_async_db, user_id=user.id, integration_type="wealthbox", api_token="t1"
        )

        with pytest.raises(IntegrityError):
            await integration_config_crud.create(
                test_async_db, user_id=user.id, integration_type="wealthbox", api_token="t2"
            )


class TestWealthboxUserCRUD:
    """Test suite for WealthboxUserCRUD."""

    async def test_list_contacts_sorted_and_filtered(self, test_async_db) -> None:
        owner = await make_user(test_async_db, "owner@acme.io")
        org = await organization_crud.create(test_async_db, name="Acme", owner_id=owner.id)
        for wb_id, email, name, org_id in [
            ("1", "z@c.io", "Zed", org.id),
            ("2", "a@c.io", "Amy", None),
            ("3", "m@c.io", "Mo", org.id),
        ]:
            await wealthbox_user_crud.create(
                test_async_db, wealthbox_id=wb_id, email=email, name=name, organization_id=org_id
            )

        everyone = await wealthbox_user_crud.list_contacts(test_async_db)
        in_org = await wealthbox_user_crud.list_contacts(test_async_db, organization_id=org.id)

        assert [c.name for c in everyone] == ["Amy", "Mo", "Zed"]
        assert [c.name for c in in_org] == ["Mo", "Zed"]
        assert in_org[0].organization.name == "Acme"

    async def test_get_by_email_is_exact(self, test_async_db) -> None:
        await wealthbox_user_crud.create(test_async_db, wealthbox_id="1", email="a@c.io", name="A")

        assert await wealthbox_user_crud.get_by_email(test_async_db, "a@c.io") is not None
        assert await wealthbox_user_crud.get_by_email(test_async_db, "A@c.io") is None

    async def test_email_is_unique(self, test_async_db) -> None:
        await wealthbox_user_crud.create(test_async_db, wealthbox_id="1", email="a@c.io", name="A")

        with pytest.raises(IntegrityError):
            await wealthbox_user_crud.create(test_async_db, wealthbox_id="2", email="a@c.io", name="B")

    async def test_insert_if_new_skips_existing_email(self, test_async_db) -> None:
        first = await wealthbox_user_crud.insert_if_new(
            test_async_db, wealthbox_id="1", email="a@c.io", name="A"
        )
        second = await wealthbox_user_crud.insert_if_new(
            test_async_db, wealthbox_id="2", email="a@c.io", name="B"
        )

        assert (first, second) == (True, False)
        stored = await wealthbox_user_crud.get_by_email(test_async_db, "a@c.io")
        assert stored.name == "A"
