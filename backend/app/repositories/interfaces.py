"""Repository interface for parcel persistence implementations."""

from __future__ import annotations

from typing import List, Protocol

from backend.app.schemas.parcel import ParcelDTO


class ParcelRepository(Protocol):
    """Persistence operations for tracked parcels."""

    def add(self, parcel: ParcelDTO) -> int:
        """Insert ``parcel`` and return its newly assigned number."""

    def get(self, number: int) -> ParcelDTO:
        """Return the parcel stored under ``number`` or raise ``ParcelNotFoundError``."""

    def get_by_client(self, client: int) -> List[ParcelDTO]:
        """Return every parcel belonging to ``client``, in no particular order."""

    def set_status(self, number: int, status: str) -> None:
        """Overwrite the status without any precondition."""

    def set_address(self, number: int, address: str) -> None:
        """Change the address of a parcel that is still registered."""

    def delete(self, number: int) -> None:
        """Remove a parcel that is still registered; otherwise leave it in place."""
