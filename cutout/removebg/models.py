"""Structured payloads exchanged with remove.bg."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class RemoveBgErrorItem(BaseModel):
    """Single entry of the ``errors`` array returned on failure."""

    title: str
    code: str | None = None
    detail: str | None = None


class RemoveBgErrorPayload(BaseModel):
    """JSON body remove.bg sends with non-2xx responses."""

    errors: list[RemoveBgErrorItem]

    def summary(self) -> str:
        parts = []
        for item in self.errors:
            text = item.title
            if item.detail:
                text = f"{text} ({item.detail})"
            parts.append(text)
        return "; ".join(parts)


def parse_error_payload(body: bytes) -> RemoveBgErrorPayload | None:
    """Return the parsed error payload or ``None`` when the body is not one."""

    if not body:
        return None
    try:
        return RemoveBgErrorPayload.model_validate_json(body)
    except ValidationError:
        logger.debug("remove.bg error body is not a structured payload")
        return None


@dataclass(frozen=True, slots=True)
class TransportResult:
    """Raw outcome of one POST: either an error or a response body."""

    error: httpx.HTTPError | None = None
    status_code: int | None = None
    body: bytes | None = None
