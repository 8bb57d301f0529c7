"""Background-removal client for wardrobe garment photos."""

from cutout.removebg import (
    Failure,
    Outcome,
    RemoveBgClient,
    Success,
)

__all__ = ["Failure", "Outcome", "RemoveBgClient", "Success"]
