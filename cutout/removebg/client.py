"""Async client for the remove.bg background-removal API."""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType

import httpx

from cutout.config.settings import REMOVE_BG_ACCOUNT_URL, REMOVE_BG_ENDPOINT, Settings, get_settings
from cutout.metrics.prometheus_exporter import cutout_requests_total
from cutout.removebg.decoder import decode_response
from cutout.removebg.errors import (
    EncodingError,
    MissingApiKeyError,
    TransportError,
)
from cutout.removebg.models import TransportResult
from cutout.removebg.multipart import ImageSource, UploadRequest, build_upload_request
from cutout.removebg.outcome import Failure, Outcome

logger = logging.getLogger(__name__)


class RemoveBgClient:
    """Sends a garment photo to remove.bg and returns the cutout.

    Each call builds its own request and boundary, so one instance can serve
    concurrent callers. Every call yields exactly one :data:`Outcome`; no
    retries are made.
    """

    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str = REMOVE_BG_ENDPOINT,
        account_url: str = REMOVE_BG_ACCOUNT_URL,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key:
            raise MissingApiKeyError()

        self._api_key = api_key
        self._endpoint = endpoint
        self._account_url = account_url
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout if timeout is not None else 60.0),
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> "RemoveBgClient":
        """Compose a client from configuration, failing fast without a key."""

        settings = settings or get_settings()
        return cls(
            settings.remove_bg_api_key,
            endpoint=settings.remove_bg_endpoint,
            account_url=settings.remove_bg_account_url,
            timeout=settings.request_timeout,
            http_client=http_client,
        )

    async def __aenter__(self) -> "RemoveBgClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""

        if self._owns_client:
            await self._client.aclose()

    def build_request(self, image: ImageSource) -> UploadRequest:
        """Encode ``image`` into a fresh upload request."""

        return build_upload_request(image, endpoint=self._endpoint, api_key=self._api_key)

    async def send(self, request: UploadRequest) -> TransportResult:
        """POST ``request`` once and capture whatever happened."""

        try:
            response = await self._client.post(
                request.endpoint,
                content=request.body,
                headers=request.headers,
            )
        except httpx.HTTPError as exc:
            logger.warning("remove.bg request failed: %s", exc)
            return TransportResult(error=exc)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("remove.bg responded with HTTP %s", response.status_code)
            return TransportResult(error=exc, status_code=response.status_code, body=response.content)

        return TransportResult(status_code=response.status_code, body=response.content)

    async def remove_background(self, image: ImageSource) -> Outcome:
        """Return the cutout for ``image`` as a ``Success`` or ``Failure``."""

        try:
            request = await asyncio.to_thread(self.build_request, image)
        except EncodingError as exc:
            logger.warning("Image could not be encoded for remove.bg: %s", exc)
            outcome: Outcome = Failure(exc)
        else:
            logger.debug("Uploading %s", request)
            result = await self.send(request)
            outcome = await asyncio.to_thread(decode_response, result)

        self._record(outcome)
        return outcome

    def schedule(self, image: ImageSource) -> asyncio.Task[Outcome]:
        """Start :meth:`remove_background` as a task the caller may cancel."""

        return asyncio.create_task(self.remove_background(image))

    async def ping(self) -> bool:
        """Return ``True`` when the account endpoint accepts the API key."""

        response = await self._client.get(self._account_url, headers={"X-Api-Key": self._api_key})
        return response.is_success

    @staticmethod
    def _record(outcome: Outcome) -> None:
        if outcome.ok:
            label = "success"
        elif isinstance(outcome.error, EncodingError):
            label = "encoding_error"
        elif isinstance(outcome.error, TransportError):
            label = "transport_error"
        else:
            label = "no_cutout"
        cutout_requests_total.labels(outcome=label).inc()
