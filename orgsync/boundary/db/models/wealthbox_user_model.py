"""
Synced Wealthbox contact ORM model.

A local copy of a user record pulled from the Wealthbox CRM. Rows are only
ever inserted by the sync; an existing email is never overwritten.

Dependencies: sqlalchemy, orgsync.boundary.db.base
System role: Persistence for synced external contacts
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orgsync.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class WealthboxUserModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Wealthbox contact ORM model.

    Attributes:
        id: Local integer primary key
        wealthbox_id: Id of the record in Wealthbox (stored as text)
        email: Contact email (unique, exact match)
        name: Contact name
        account: Wealthbox account number (optional)
        excluded_from_assignments: Wealthbox assignment exclusion flag
        organization_id: Organization the contact is assigned to (optional)

    Relationships:
        organization: Many-to-one with OrganizationModel (SET NULL on deletion)
    """

    __tablename__ = "wealthbox_users"

    wealthbox_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    account: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        default=None,
    )

    excluded_from_assignments: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    organization_id: Mapped[int | None] = mapped_column(
        ForeignKey("organizations.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
        index=True,
    )

    # Relationships
    organization = relationship("OrganizationModel")
