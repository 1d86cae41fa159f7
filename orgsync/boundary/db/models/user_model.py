"""
User ORM model.

Represents an account that can authenticate against the API.
Stores the bcrypt hash only, never the raw password.

Dependencies: sqlalchemy, orgsync.boundary.db.base
System role: Identity persistence for authentication and administration
"""

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orgsync.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from orgsync.core.authorization import UserRole


class UserModel(Base, IntegerIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: Integer primary key
        email: Login email (unique across all users)
        password_hash: bcrypt hash of the password
        name: Display name
        role: UserRole (user/admin)
        organization_id: Organization the user belongs to (optional)
        created_at: Registration timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        organization: Many-to-one with OrganizationModel (SET NULL on organization deletion)
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole,
            name="user_role",
            values_callable=lambda e: [m.value for m in e],
            native_enum=False,
        ),
        nullable=False,
        default=UserRole.USER,
    )

    organization_id: Mapped[int | None] = mapped_column(
        ForeignKey("organizations.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
        index=True,
    )

    # Relationships
    organization = relationship(
        "OrganizationModel",
        back_populates="members",
        foreign_keys=[organization_id],
    )

    def __repr__(self) -> str:
        return f"<UserModel {self.email}>"
