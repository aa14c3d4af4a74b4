"""Cliente RPC del AUR (v5).

Endpoints usados (solo lectura, idempotentes):
- `GET /rpc/v5/info/<nombre>`: búsqueda exacta por nombre.
- `GET /rpc/v5/search/<fragmento>?by=name-desc`: búsqueda en nombre o descripción.

Nota:
- Ambos responden `{"type": ..., "results": [...]}`. Un fallo a nivel RPC
  llega como `type == "error"` con un mensaje en `error` (p.ej. cuando el
  término de búsqueda coincide con demasiados paquetes).
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from baur.adapters.http_client import build_client
from baur.core.config import AppSettings
from baur.core.domain.models import PackageRecord, RpcResponse
from baur.core.errors import DecodeError, NetworkError, NetworkTimeoutError, RemoteError
from baur.core.interfaces.repository import PackageRepository

logger = logging.getLogger(__name__)

_RPC_PREFIX = "/rpc/v5"


class AurClient(PackageRepository):
    """Implements `PackageRepository` against the AUR web API."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_client(self._settings)

    def __enter__(self) -> "AurClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def lookup_by_name(self, name: str) -> list[PackageRecord]:
        return self._query(f"{_RPC_PREFIX}/info/{quote(name, safe='')}")

    def search_by_fragment(self, fragment: str) -> list[PackageRecord]:
        return self._query(
            f"{_RPC_PREFIX}/search/{quote(fragment, safe='')}",
            params={"by": "name-desc"},
        )

    def _query(self, path: str, params: dict[str, str] | None = None) -> list[PackageRecord]:
        logger.debug("GET %s%s params=%s", self._settings.aur_base_url, path, params)
        try:
            resp = self._client.get(path, params=params)
        except httpx.TimeoutException as exc:
            raise NetworkTimeoutError(
                f"request to {self._settings.aur_base_url} timed out after "
                f"{self._settings.http_timeout_seconds:g}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"failed to reach {self._settings.aur_base_url}: {exc}") from exc

        if resp.status_code != 200:
            raise NetworkError(f"{resp.request.url} answered HTTP {resp.status_code}")

        try:
            payload = RpcResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            raise DecodeError(f"malformed response from {resp.request.url}: {exc.error_count()} error(s)") from exc

        if payload.type == "error":
            raise RemoteError(payload.error or "the AUR returned an unspecified error")

        logger.debug("%d result(s) for %s", len(payload.results), path)
        return payload.results
