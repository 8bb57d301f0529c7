"""Multipart/form-data encoding for remove.bg uploads.

The envelope carries a single ``image_file`` part. Boundaries are random per
request and the image bytes are not scanned for them; a collision with a
UUID4-derived token is accepted as a statistical risk.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from cutout.removebg.errors import EncodingError

ImageSource = Union[Image.Image, bytes, Path]

FILE_FIELD = "image_file"
FILE_NAME = "image.png"
FILE_MIME = "image/png"
CRLF = "\r\n"

PNG_MODES = ("1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA")
PREMULTIPLIED_MODES = {"La": "LA", "RGBa": "RGBA"}


def new_boundary() -> str:
    """Return a fresh boundary token."""

    return "----cutout-" + uuid.uuid4().hex


def encode_png(source: ImageSource) -> bytes:
    """Serialise ``source`` to PNG bytes or raise :class:`EncodingError`."""

    try:
        if isinstance(source, Image.Image):
            return _save_png(source)
        if isinstance(source, Path):
            with Image.open(source) as img:
                return _save_png(img)
        with Image.open(BytesIO(source)) as img:
            return _save_png(img)
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
        TypeError,
    ) as exc:
        raise EncodingError(f"Failed to encode image: {exc}") from exc


def _save_png(img: Image.Image) -> bytes:
    if img.mode in PREMULTIPLIED_MODES:
        img = img.convert(PREMULTIPLIED_MODES[img.mode])
    # PNG cannot store CMYK, YCbCr and friends.
    if img.mode not in PNG_MODES:
        img = img.convert("RGBA")
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def build_multipart_body(png_bytes: bytes, boundary: str) -> bytes:
    """Wrap ``png_bytes`` into a single-part multipart/form-data body."""

    head = (
        f"--{boundary}{CRLF}"
        f'Content-Disposition: form-data; name="{FILE_FIELD}"; filename="{FILE_NAME}"{CRLF}'
        f"Content-Type: {FILE_MIME}{CRLF}{CRLF}"
    ).encode("utf-8")
    tail = f"{CRLF}--{boundary}--{CRLF}".encode("utf-8")
    return b"".join((head, png_bytes, tail))


@dataclass(frozen=True, slots=True)
class UploadRequest:
    """Fully built upload, created once per call and never mutated."""

    endpoint: str
    api_key: str
    boundary: str
    body: bytes

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": self.content_type,
            "X-Api-Key": self.api_key,
        }

    def __repr__(self) -> str:
        return (
            f"UploadRequest(endpoint={self.endpoint!r}, boundary={self.boundary!r}, "
            f"body=<{len(self.body)} bytes>)"
        )


def build_upload_request(source: ImageSource, *, endpoint: str, api_key: str) -> UploadRequest:
    """Encode ``source`` and wrap it for upload with a fresh boundary."""

    png_bytes = encode_png(source)
    boundary = new_boundary()
    return UploadRequest(
        endpoint=endpoint,
        api_key=api_key,
        boundary=boundary,
        body=build_multipart_body(png_bytes, boundary),
    )
