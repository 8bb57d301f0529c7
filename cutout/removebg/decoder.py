"""Turn a raw transport result into an :data:`Outcome`."""

from __future__ import annotations

import logging
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from cutout.removebg.errors import NoCutoutReturned, TransportError
from cutout.removebg.models import TransportResult, parse_error_payload
from cutout.removebg.outcome import Failure, Outcome, Success

logger = logging.getLogger(__name__)


def decode_response(result: TransportResult) -> Outcome:
    """Classify ``result``; the first matching rule wins.

    1. transport error -> ``Failure(TransportError)``
    2. empty or undecodable body -> ``Failure(NoCutoutReturned)``
    3. otherwise -> ``Success``
    """

    if result.error is not None:
        return Failure(_transport_error(result))

    if not result.body:
        return Failure(NoCutoutReturned())

    try:
        image = _decode_image(result.body)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        logger.warning("remove.bg returned %d bytes that are not an image: %s", len(result.body), exc)
        return Failure(NoCutoutReturned())

    return Success(image=image, data=result.body)


def _decode_image(data: bytes) -> Image.Image:
    with Image.open(BytesIO(data)) as img:
        img.load()
        return img.copy()


def _transport_error(result: TransportResult) -> TransportError:
    error = result.error
    if result.status_code is None:
        return TransportError(f"remove.bg request failed: {error}", underlying=error)

    message = f"remove.bg returned HTTP {result.status_code}"
    payload = parse_error_payload(result.body or b"")
    if payload is not None:
        message = f"{message}: {payload.summary()}"
    return TransportError(message, underlying=error, status_code=result.status_code)
