"""
Organization ORM model.

Represents a tenant. Organizations are owned by the user who created them;
other users join one by pointing their organization_id at it.

Dependencies: sqlalchemy, orgsync.boundary.db.base
System role: Tenant persistence
"""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orgsync.boundary.db.base import Base, IntegerIDMixin, TimestampMixin

ORGANIZATION_NAME_MAX_LENGTH = 50


class OrganizationModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Organization ORM model.

    Name uniqueness is case-insensitive and scoped to the owner; it is
    enforced by the organization service, not by a database constraint.

    Attributes:
        id: Integer primary key
        name: Organization name (50 char limit)
        description: Optional free text
        owner_id: Creating user; the user cannot be deleted while it owns any

    Relationships:
        members: One-to-many with UserModel via users.organization_id
    """

    __tablename__ = "organizations"

    name: Mapped[str] = mapped_column(
        String(ORGANIZATION_NAME_MAX_LENGTH),
        nullable=False,
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    owner_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT", use_alter=True, name="fk_organizations_owner_id"),
        nullable=True,
        default=None,
        index=True,
    )

    # Relationships
    members = relationship(
        "UserModel",
        back_populates="organization",
        foreign_keys="UserModel.organization_id",
        order_by="UserModel.id",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<OrganizationModel {self.name} ({self.id})>"
