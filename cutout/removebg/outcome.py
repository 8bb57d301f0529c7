"""Per-request outcome of a background-removal call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from PIL import Image

from cutout.removebg.errors import CutoutError


@dataclass(frozen=True, slots=True)
class Success:
    """Decoded cutout together with the PNG bytes the service returned."""

    image: Image.Image
    data: bytes

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Image.Image:
        return self.image


@dataclass(frozen=True, slots=True)
class Failure:
    """Classified error for a request that produced no cutout."""

    error: CutoutError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Image.Image:
        """Re-raise the classified error."""

        raise self.error


Outcome = Union[Success, Failure]
