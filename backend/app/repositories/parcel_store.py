"""
SQLAlchemy implementation of :class:`ParcelRepository`.

Every public method opens its own session from the injected factory and
closes it before returning. ``set_address`` and ``delete`` read the current
status and act on it inside a single transaction; any exception raised in
that block rolls the transaction back and reaches the caller unchanged.
No row locks are taken, so the read-then-write pair is only as isolated
as the database's default transaction isolation.
"""

from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session, sessionmaker

from backend.app.core.exceptions import ParcelNotFoundError, ParcelStatusError
from backend.app.core.observability import logger
from backend.app.models.parcel import Parcel
from backend.app.models.parcel_enums import ParcelStatus, status_value
from backend.app.schemas.parcel import ParcelDTO


class ParcelStore:
    """Read and write the ``parcel`` table through a SQLAlchemy session factory."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def add(self, parcel: ParcelDTO) -> int:
        """
        Insert a parcel and return the number assigned by the database.
        
        ``parcel.number`` is ignored.
        """
        row = Parcel(
            client=parcel.client,
            status=status_value(parcel.status),
            address=parcel.address,
            created_at=parcel.created_at,
        )
        with self._session_factory.begin() as session:
            session.add(row)
            session.flush()
            number = row.number

        logger.info("Parcel added", extra={"parcel_number": number, "client": parcel.client})
        return number

    def get(self, number: int) -> ParcelDTO:
        with self._session_factory() as session:
            row = session.get(Parcel, number)
            if row is None:
                logger.debug("Parcel lookup missed", extra={"parcel_number": number})
                raise ParcelNotFoundError(number)
            return ParcelDTO.model_validate(row)

    def get_by_client(self, client: int) -> List[ParcelDTO]:
        with self._session_factory() as session:
            rows = session.scalars(select(Parcel).where(Parcel.client == client)).all()
            parcels = [ParcelDTO.model_validate(row) for row in rows]

        logger.debug("Parcels loaded for client", extra={"client": client, "count": len(parcels)})
        return parcels

    def set_status(self, number: int, status: str) -> None:
        """Overwrite the status. An unknown number updates nothing and is not an error."""
        with self._session_factory.begin() as session:
            session.execute(
                update(Parcel)
                .where(Parcel.number == number)
                .values(status=status_value(status))
            )

        logger.info("Parcel status set", extra={"parcel_number": number, "status": status_value(status)})

    def set_address(self, number: int, address: str) -> None:
        """
        Change the delivery address of a registered parcel.
        
        Raises:
            ParcelNotFoundError: no parcel has this number.
            ParcelStatusError: the parcel is no longer registered; nothing is written.
        """
        with self._session_factory.begin() as session:
            status = self._current_status(session, number)
            if status != ParcelStatus.REGISTERED:
                logger.warning(
                    "Parcel address change rejected",
                    extra={"parcel_number": number, "status": status},
                )
                raise ParcelStatusError(number, status)

            session.execute(
                update(Parcel)
                .where(Parcel.number == number)
                .values(address=address)
            )

        logger.info("Parcel address set", extra={"parcel_number": number})

    def delete(self, number: int) -> None:
        """
        Delete a registered parcel.
        
        A parcel in any other status is left in place and no error is raised.
        A missing parcel raises ``ParcelNotFoundError``.
        """
        with self._session_factory.begin() as session:
            status = self._current_status(session, number)
            if status != ParcelStatus.REGISTERED:
                logger.warning(
                    "Parcel delete skipped",
                    extra={"parcel_number": number, "status": status},
                )
                return

            session.execute(delete(Parcel).where(Parcel.number == number))

        logger.info("Parcel deleted", extra={"parcel_number": number})

    @staticmethod
    def _current_status(session: Session, number: int) -> str:
        status = session.execute(
            select(Parcel.status).where(Parcel.number == number)
        ).scalar_one_or_none()
        if status is None:
            raise ParcelNotFoundError(number)
        return status
