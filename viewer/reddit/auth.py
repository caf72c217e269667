"""Reddit OAuth client-credentials token exchange."""

import base64
import logging

import httpx

from viewer.config import Settings, get_settings
from viewer.errors import AuthError
from viewer.status import StatusReporter

logger = logging.getLogger(__name__)


def basic_auth_header(client_id: str, client_secret: str) -> str:
    """Build an HTTP Basic ``Authorization`` header value for ``id:secret``."""
    raw = f"{client_id}:{client_secret}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


class AuthClient:
    """Exchanges an application id/secret for a short-lived bearer token.

    Tokens are never cached; every call performs exactly one POST.
    """

    def __init__(self, status: StatusReporter, settings: Settings | None = None):
        self._status = status
        self._settings = settings or get_settings()

    async def request_token(self, client_id: str, client_secret: str) -> str:
        """Perform the client-credentials grant.

        Args:
            client_id: Reddit application id
            client_secret: Reddit application secret

        Returns:
            The bearer access token

        Raises:
            AuthError: If the provider reports an error or the exchange fails
        """
        headers = {
            "Authorization": basic_auth_header(client_id, client_secret),
            "User-Agent": self._settings.user_agent,
        }

        try:
            async with httpx.AsyncClient(timeout=self._settings.http_timeout_seconds) as client:
                r = await client.post(
                    self._settings.token_url,
                    headers=headers,
                    data={"grant_type": "client_credentials"},
                )
                data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            raise AuthError(str(e)) from e

        if not isinstance(data, dict):
            raise AuthError("Unexpected token response")
        if data.get("error"):
            raise AuthError(str(data["error"]))

        token = data.get("access_token")
        if not token:
            raise AuthError("No access token in response")
        return token

    async def get_token(self, client_id: str, client_secret: str) -> str | None:
        """Fetch a token, reporting progress and failure through the status slot.

        Returns:
            The bearer token, or None if the exchange failed
        """
        self._status.set_status("Fetching access token...")
        try:
            token = await self.request_token(client_id, client_secret)
        except AuthError as e:
            logger.warning(f"Token exchange failed: {e}")
            self._status.set_status(f"Error getting access token: {e}", is_error=True)
            return None

        self._status.set_status("Access token retrieved")
        return token
