"""
Wealthbox API client.

Fetches the user list of the Wealthbox workspace an access token belongs to.
One httpx.AsyncClient is shared for the lifetime of the process.

Dependencies: httpx, pydantic, orgsync.configs
System role: External contact source for the contact sync
"""

import logging

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from orgsync.configs.integrations import WealthboxSettings
from orgsync.core.exceptions import WealthboxAPIError

logger = logging.getLogger(__name__)


class WealthboxContact(BaseModel):
    """A user record as returned by GET /users."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    email: str
    name: str
    account: int | None = None
    excluded_from_assignments: bool = False


class _UsersPage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    users: list[WealthboxContact]


class WealthboxClient:
    """
    Async client for the Wealthbox REST API.

    Every failure (transport error, non-2xx status, unparseable payload)
    surfaces as WealthboxAPIError. Calls are never retried.

    Attributes:
        base_url: API root, e.g. https://api.crmworkspace.com/v1
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = "https://api.crmworkspace.com/v1",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: WealthboxSettings) -> "WealthboxClient":
        """Build a client from Wealthbox settings."""
        return cls(base_url=settings.base_url, timeout=settings.timeout_seconds)

    async def fetch_users(self, api_token: str) -> list[WealthboxContact]:
        """
        Fetch all users visible to the given access token.

        Args:
            api_token: Wealthbox personal access token

        Returns:
            list[WealthboxContact]: Contacts in API order

        Raises:
            WealthboxAPIError: If the request fails or the payload is malformed
        """
        url = f"{self.base_url}/users"
        headers = {
            "ACCESS_TOKEN": api_token,
            "Accept": "application/json",
        }

        try:
            response = await self._client.get(url, headers=headers)
            response.raise_for_status()
            page = _UsersPage.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            logger.error(
                "Wealthbox returned an error status",
                extra={"status_code": e.response.status_code, "url": url},
            )
            raise WealthboxAPIError(details={"status_code": e.response.status_code}) from e
        except httpx.HTTPError as e:
            logger.error(
                "Wealthbox request failed",
                extra={"error_type": type(e).__name__, "url": url},
            )
            raise WealthboxAPIError(details={"reason": type(e).__name__}) from e
        except (ValueError, ValidationError) as e:
            logger.error("Wealthbox returned an unexpected payload", extra={"url": url})
            raise WealthboxAPIError(details={"reason": "invalid payload"}) from e

        logger.info("Fetched Wealthbox users", extra={"count": len(page.users)})
        return page.users

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()
