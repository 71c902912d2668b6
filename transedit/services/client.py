"""HTTP client for the translations storage API."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from transedit.config import settings
from transedit.errors import LoadFailure, SaveFailure
from transedit.schemas.translations import FullSaveRequest, KeySaveRequest, LoadResponse

logger = logging.getLogger(__name__)

TRANSLATIONS_PATH = "/api/translations"
SAVE_PATH = "/api/save"
SAVE_KEY_PATH = "/api/save-key"


class TranslationsClient:
    """Thin async wrapper over the storage endpoints.

    Transport errors and non-2xx responses surface as LoadFailure or
    SaveFailure; retrying is left to the caller.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout or settings.request_timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "TranslationsClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch(self) -> LoadResponse:
        try:
            response = await self._client.get(TRANSLATIONS_PATH)
        except httpx.HTTPError as e:
            raise LoadFailure(f"Fetching translations failed: {e}") from e

        if not response.is_success:
            raise LoadFailure(
                f"Fetching translations failed with HTTP {response.status_code}",
                status_code=response.status_code,
            )
        try:
            return LoadResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise LoadFailure(f"Malformed translations response: {e}") from e

    async def save_all(self, translations: dict[str, dict[str, Any]]) -> None:
        body = FullSaveRequest(translations=translations)
        await self._post(SAVE_PATH, body.model_dump(), key=None)

    async def save_key(self, key: str, values: dict[str, Any]) -> None:
        body = KeySaveRequest(key=key, values=values)
        await self._post(SAVE_KEY_PATH, body.model_dump(), key=key)

    async def _post(self, path: str, body: dict[str, Any], key: str | None) -> None:
        what = f"key {key!r}" if key else "translations"
        try:
            response = await self._client.post(path, json=body)
        except httpx.HTTPError as e:
            raise SaveFailure(f"Saving {what} failed: {e}", key=key) from e

        if not response.is_success:
            raise SaveFailure(
                f"Saving {what} failed with HTTP {response.status_code}",
                key=key,
                status_code=response.status_code,
            )
        logger.debug("Saved %s via %s", what, path)
