"""
Integration configuration ORM model.

Stores a per-user API token for a named external system.

Dependencies: sqlalchemy, orgsync.boundary.db.base
System role: Credential storage for third-party integrations
"""

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from orgsync.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class IntegrationConfigModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Integration configuration ORM model.

    Attributes:
        id: Integer primary key
        user_id: Owning user (CASCADE on user deletion)
        integration_type: External system name, e.g. "wealthbox"
        api_token: Token presented to the external system

    Constraints:
        (user_id, integration_type): UNIQUE; at most one config per pair
    """

    __tablename__ = "integration_configs"
    __table_args__ = (
        UniqueConstraint("user_id", "integration_type", name="uq_integration_configs_user_type"),
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    integration_type: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
    )

    api_token: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
