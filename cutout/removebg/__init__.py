"""remove.bg client: multipart builder, transport and response decoder."""

from cutout.removebg.client import RemoveBgClient
from cutout.removebg.decoder import decode_response
from cutout.removebg.errors import (
    CutoutError,
    EncodingError,
    MissingApiKeyError,
    NoCutoutReturned,
    TransportError,
)
from cutout.removebg.models import TransportResult
from cutout.removebg.multipart import (
    UploadRequest,
    build_multipart_body,
    build_upload_request,
    encode_png,
    new_boundary,
)
from cutout.removebg.outcome import Failure, Outcome, Success

__all__ = [
    "CutoutError",
    "EncodingError",
    "Failure",
    "MissingApiKeyError",
    "NoCutoutReturned",
    "Outcome",
    "RemoveBgClient",
    "Success",
    "TransportError",
    "TransportResult",
    "UploadRequest",
    "build_multipart_body",
    "build_upload_request",
    "decode_response",
    "encode_png",
    "new_boundary",
]
