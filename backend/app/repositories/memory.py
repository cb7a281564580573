"""
Dict-backed implementation of :class:`ParcelRepository`.

Used where a database is unavailable or unwanted, mostly in tests.
"""

import itertools
import threading
from typing import Dict, List

from backend.app.core.exceptions import ParcelNotFoundError, ParcelStatusError
from backend.app.core.observability import logger
from backend.app.models.parcel_enums import ParcelStatus, status_value
from backend.app.schemas.parcel import ParcelDTO


class InMemoryParcelStore:
    """
    Keeps parcels in a dict keyed by number.
    
    A single lock serializes all operations, which gives the status-gated
    methods the same all-or-nothing behaviour as a database transaction.
    Values handed in and out are copies.
    """

    def __init__(self) -> None:
        self._rows: Dict[int, ParcelDTO] = {}
        self._numbers = itertools.count(1)
        self._lock = threading.Lock()

    def add(self, parcel: ParcelDTO) -> int:
        with self._lock:
            number = next(self._numbers)
            self._rows[number] = parcel.model_copy(update={"number": number})

        logger.info("Parcel added", extra={"parcel_number": number, "client": parcel.client})
        return number

    def get(self, number: int) -> ParcelDTO:
        with self._lock:
            row = self._rows.get(number)
            if row is None:
                raise ParcelNotFoundError(number)
            return row.model_copy()

    def get_by_client(self, client: int) -> List[ParcelDTO]:
        with self._lock:
            return [row.model_copy() for row in self._rows.values() if row.client == client]

    def set_status(self, number: int, status: str) -> None:
        with self._lock:
            row = self._rows.get(number)
            if row is not None:
                self._rows[number] = row.model_copy(update={"status": status_value(status)})

    def set_address(self, number: int, address: str) -> None:
        with self._lock:
            row = self._registered_row(number)
            self._rows[number] = row.model_copy(update={"address": address})

    def delete(self, number: int) -> None:
        with self._lock:
            row = self._rows.get(number)
            if row is None:
                raise ParcelNotFoundError(number)
            if row.status != ParcelStatus.REGISTERED:
                logger.warning(
                    "Parcel delete skipped",
                    extra={"parcel_number": number, "status": row.status},
                )
                return
            del self._rows[number]

    def _registered_row(self, number: int) -> ParcelDTO:
        row = self._rows.get(number)
        if row is None:
            raise ParcelNotFoundError(number)
        if row.status != ParcelStatus.REGISTERED:
            raise ParcelStatusError(number, row.status)
        return row
