"""
Modelo de Habitación
Cada habitación pertenece a un único alojamiento (accommodation_code)
"""

from sqlalchemy import Column, Integer, String, Numeric, DateTime, Index
from sqlalchemy.orm import relationship
from database.conexion import Base
from datetime import datetime


class Room(Base):
    __tablename__ = "rooms"
    __table_args__ = (
        Index('idx_room_accommodation', 'accommodation_code'),
        Index('idx_room_capacity', 'capacity'),
    )

    id = Column(Integer, primary_key=True, index=True)
    accommodation_code = Column(String(50), nullable=False)

    # Descriptivos (editables)
    room_name = Column(String(100), nullable=False)
    room_type = Column(String(50), nullable=True)
    capacity = Column(Integer, nullable=True)
    floor = Column(Integer, nullable=True)
    price = Column(Numeric(10, 2), nullable=True)

    creado_en = Column(DateTime, default=datetime.utcnow)

    assignments = relationship("RoomAssignment", back_populates="room", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Room(id={self.id}, accommodation_code='{self.accommodation_code}', room_name='{self.room_name}')>"
