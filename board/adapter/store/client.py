"""HTTP client for the managed store.

The store exposes three surfaces under one base URL:

- ``/rest/v1/<table>``: row access filtered PostgREST-style
  (``?id=eq.1``, ``?select=...``, ``?order=created_at.desc``)
- ``/rest/v1/rpc/<function>``: stored procedures, JSON arguments
- ``/auth/v1``: the auth service (``/user``, ``/admin/users/<id>``)

Every request carries the anon key as ``apikey``. Requests made on behalf
of a user carry that user's access token as the bearer token so that
row-level security applies; anonymous reads use the anon key instead.
"""

from typing import Any, Mapping, Optional

import httpx
import logfire

from board.adapter.error import ProviderError
from board.config import StoreSettings
from board.util.error import ConfigurationError


class StoreClient:
    """Thin async client over the store's REST, RPC and auth surfaces."""

    def __init__(
        self,
        settings: StoreSettings,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize store client.

        The underlying ``httpx.AsyncClient`` is created on first use so a
        missing configuration only fails the calls that need the store.

        Args:
            settings: Store settings
            http_client: Preconfigured client (tests, custom transports)
        """
        self.settings = settings
        self._client = http_client

    @property
    def is_configured(self) -> bool:
        return self.settings.is_configured

    @property
    def has_service_role(self) -> bool:
        return self.settings.has_service_role

    def _get_client(self) -> httpx.AsyncClient:
        if not self.settings.is_configured:
            raise ConfigurationError("Store URL or anon key is not configured")
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.settings.url.rstrip("/"),
                timeout=self.settings.timeout_seconds,
            )
        return self._client

    def _headers(self, bearer: Optional[str]) -> dict[str, str]:
        return {
            "apikey": self.settings.anon_key or "",
            "Authorization": f"Bearer {bearer or self.settings.anon_key}",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        operation: str,
        *,
        bearer: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        apikey: Optional[str] = None,
    ) -> httpx.Response:
        client = self._get_client()
        request_headers = self._headers(bearer)
        if apikey:
            request_headers["apikey"] = apikey
        if headers:
            request_headers.update(headers)

        try:
            response = await client.request(
                method, path, params=params, json=json, headers=request_headers
            )
        except httpx.HTTPError as e:
            logfire.error("Store request failed", operation=operation, error=str(e))
            raise ProviderError(f"{operation}: {e}") from e

        if response.is_error:
            detail = _error_detail(response)
            logfire.warn(
                "Store returned an error",
                operation=operation,
                status_code=response.status_code,
                detail=detail,
            )
            raise ProviderError(f"{operation}: {detail}", response.status_code)

        return response

    async def select(
        self,
        table: str,
        params: Mapping[str, Any],
        access_token: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """Read rows from a table.

        Args:
            table: Table name
            params: PostgREST query parameters (``select``, filters, ``order``)
            access_token: Acting user's token, anon when None

        Returns:
            Rows as dictionaries
        """
        response = await self._request(
            "GET",
            f"/rest/v1/{table}",
            f"select {table}",
            bearer=access_token,
            params=params,
        )
        return response.json()

    async def insert(
        self,
        table: str,
        row: Mapping[str, Any],
        access_token: str,
        on_conflict: Optional[str] = None,
        ignore_duplicates: bool = False,
    ) -> list[dict[str, Any]]:
        """Insert (or upsert, with ``on_conflict``) a row and return it.

        Args:
            table: Table name
            row: Column values
            access_token: Acting user's token
            on_conflict: Comma-separated unique columns to upsert on
            ignore_duplicates: Keep the existing row on conflict

        Returns:
            Stored rows
        """
        prefer = ["return=representation"]
        params: dict[str, Any] = {}
        if on_conflict:
            params["on_conflict"] = on_conflict
            prefer.append(
                "resolution=ignore-duplicates"
                if ignore_duplicates
                else "resolution=merge-duplicates"
            )

        response = await self._request(
            "POST",
            f"/rest/v1/{table}",
            f"insert {table}",
            bearer=access_token,
            params=params,
            json=dict(row),
            headers={"Prefer": ",".join(prefer)},
        )
        if not response.content:
            return []
        return response.json()

    async def delete(
        self, table: str, filters: Mapping[str, Any], access_token: str
    ) -> None:
        """Delete rows matching PostgREST filters."""
        await self._request(
            "DELETE",
            f"/rest/v1/{table}",
            f"delete {table}",
            bearer=access_token,
            params=filters,
        )

    async def rpc(
        self,
        function: str,
        args: Optional[Mapping[str, Any]] = None,
        access_token: Optional[str] = None,
    ) -> Any:
        """Call a stored procedure.

        Returns:
            Decoded JSON result, None for void procedures
        """
        response = await self._request(
            "POST",
            f"/rest/v1/rpc/{function}",
            f"rpc {function}",
            bearer=access_token,
            json=dict(args or {}),
        )
        if not response.content:
            return None
        return response.json()

    async def get_user(self, access_token: str) -> Optional[dict[str, Any]]:
        """Resolve the user behind an access token.

        Returns:
            User payload, or None when the auth service rejects the token
        """
        try:
            response = await self._request(
                "GET", "/auth/v1/user", "auth get_user", bearer=access_token
            )
        except ProviderError as e:
            if e.status_code in (401, 403, 404):
                return None
            raise
        return response.json()

    async def delete_user(self, user_id: str) -> None:
        """Delete an auth user. Requires the service-role key.

        Raises:
            ConfigurationError: If the service-role key is missing
            ProviderError: If the deletion failed
        """
        key = self.settings.service_role_key
        if not key:
            raise ConfigurationError("Store service-role key is not configured")
        await self._request(
            "DELETE",
            f"/auth/v1/admin/users/{user_id}",
            "auth delete_user",
            bearer=key,
            apikey=key,
        )

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def _error_detail(response: httpx.Response) -> str:
    """Best-effort error message from an error response."""
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict):
        for field in ("message", "msg", "error_description", "error"):
            if payload.get(field):
                return str(payload[field])
    return str(payload)
