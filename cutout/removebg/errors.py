"""Error taxonomy for the background-removal client."""

from __future__ import annotations


class CutoutError(Exception):
    """Base class for per-request failures delivered through ``Failure``."""


class EncodingError(CutoutError):
    """Raised when the source image cannot be serialised to PNG."""


class TransportError(CutoutError):
    """Network failure or non-2xx response from remove.bg."""

    def __init__(
        self,
        message: str,
        *,
        underlying: BaseException | None = None,
        status_code: int | None = None,
    ) -> None:
        self.underlying = underlying
        self.status_code = status_code
        super().__init__(message)


class NoCutoutReturned(CutoutError):
    """The request went through but the body is not a usable image."""

    def __init__(self, message: str = "No cutout returned") -> None:
        super().__init__(message)


class MissingApiKeyError(RuntimeError):
    """remove.bg API key is not configured."""

    def __init__(self) -> None:
        super().__init__("remove.bg API key is not configured (set REMOVE_BG_API_KEY).")
