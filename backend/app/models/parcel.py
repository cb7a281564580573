"""
Parcel database model.

One row per tracked shipment.
"""

from sqlalchemy import Column, Integer, String
from backend.app.db.session import Base


class Parcel(Base):
    """
    Parcel model for the tracker.
    
    ``number`` is assigned by the database and never reused.
    ``created_at`` holds the caller-supplied RFC3339 timestamp as text.
    """
    __tablename__ = "parcel"
    __table_args__ = {"sqlite_autoincrement": True}
    
    number = Column(Integer, primary_key=True, autoincrement=True)
    
    # Opaque client reference, not a foreign key
    client = Column(Integer, nullable=False, index=True)
    
    status = Column(String, nullable=False)
    address = Column(String, nullable=False)
    created_at = Column(String, nullable=False)
    
    def __repr__(self):
        return f"<Parcel(number={self.number}, client={self.client}, status='{self.status}')>"
