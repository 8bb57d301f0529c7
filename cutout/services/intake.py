"""Garment intake: swap a cropped photo for its cutout when possible."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PIL import Image

from cutout.removebg.client import RemoveBgClient
from cutout.removebg.errors import CutoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IntakeResult:
    """Image to store for a new garment and why the cutout was skipped, if it was."""

    image: Image.Image
    is_cutout: bool
    error: CutoutError | None = None


class CutoutIntakeService:
    """Coordinates background removal for newly added wardrobe items."""

    def __init__(self, client: RemoveBgClient) -> None:
        self._client = client

    async def prepare_garment(self, image: Image.Image) -> IntakeResult:
        """
        Return the cutout of ``image``, or ``image`` itself when removal fails.

        The failure is kept on the result so callers can tell the user.
        """

        outcome = await self._client.remove_background(image)
        if outcome.ok:
            return IntakeResult(image=outcome.image, is_cutout=True)

        logger.warning("Background removal failed, keeping original image: %s", outcome.error)
        return IntakeResult(image=image, is_cutout=False, error=outcome.error)
