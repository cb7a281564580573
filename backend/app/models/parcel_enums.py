"""
Parcel Status Enumeration.
"""

import enum


class ParcelStatus(str, enum.Enum):
    """
    Known parcel statuses.
    
    Status flow:
        REGISTERED → SENT → DELIVERED
    
    Only REGISTERED is special to the store: address changes and deletion
    are allowed in that state alone. The status column itself is free text,
    so values outside this enum remain storable.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"


def status_value(status) -> str:
    """Return the plain string stored for ``status``."""
    if isinstance(status, ParcelStatus):
        return status.value
    return status
