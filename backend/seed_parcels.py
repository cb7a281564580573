"""
Database seeding script for demo parcels.

Creates the schema and registers a few parcels for one client so the
tracker has something to show during development.
"""

import sys
from pathlib import Path
from typing import Iterable, List

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from backend.app.core.config import settings
from backend.app.core.observability import configure_logging
from backend.app.db.session import SessionLocal, init_db
from backend.app.repositories.interfaces import ParcelRepository
from backend.app.repositories.parcel_store import ParcelStore
from backend.app.schemas.parcel import ParcelDTO, rfc3339_now

DEMO_CLIENT = 1
DEMO_ADDRESSES = (
    "12 Harbour Road, Portsmouth",
    "4 Mill Lane, Leeds",
    "77 King Street, Bristol",
)


def seed_parcels(store: ParcelRepository, client: int, addresses: Iterable[str]) -> List[int]:
    """
    Register one parcel per address for ``client``.
    
    Returns the assigned parcel numbers in insertion order.
    """
    numbers = []
    for address in addresses:
        parcel = ParcelDTO(client=client, address=address, created_at=rfc3339_now())
        numbers.append(store.add(parcel))
    return numbers


def main() -> None:
    configure_logging()
    init_db()
    
    print(f"🌱 Starting parcel seeding for {settings.app_name}...")
    store = ParcelStore(SessionLocal)
    for number in seed_parcels(store, DEMO_CLIENT, DEMO_ADDRESSES):
        print(f"✅ Registered parcel {number} for client {DEMO_CLIENT}")


if __name__ == "__main__":
    main()
