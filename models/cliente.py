"""
Huéspedes, vehículos y links de registro asociados a una solicitud de alojamiento
"""

from sqlalchemy import Column, Integer, String, ForeignKey, Date, DateTime, Boolean, Index
from sqlalchemy.orm import relationship
from database.conexion import Base
from datetime import datetime


class Guest(Base):
    __tablename__ = "guests"
    __table_args__ = (
        Index('idx_guest_request', 'request_id'),
    )

    id = Column(Integer, primary_key=True, index=True)
    request_id = Column(Integer, ForeignKey("accommodation_requests.id", ondelete="CASCADE"), nullable=False)

    role = Column(String(10), nullable=True)
    first_name = Column(String(100), nullable=True)
    last_name1 = Column(String(100), nullable=True)
    last_name2 = Column(String(100), nullable=True)
    document_type = Column(String(10), nullable=True)
    document_number = Column(String(30), nullable=True)
    birth_date = Column(Date, nullable=True)
    country = Column(String(3), nullable=True)
    phone = Column(String(30), nullable=True)
    email = Column(String(150), nullable=True)
    main_guest = Column(Boolean, default=False)

    creado_en = Column(DateTime, default=datetime.utcnow)

    accommodation_request = relationship("AccommodationRequest", back_populates="guests")

    def __repr__(self):
        return f"<Guest(id={self.id}, request_id={self.request_id})>"


class Vehicle(Base):
    __tablename__ = "vehicles"
    __table_args__ = (
        Index('idx_vehicle_request', 'request_id'),
    )

    id = Column(Integer, primary_key=True, index=True)
    request_id = Column(Integer, ForeignKey("accommodation_requests.id", ondelete="CASCADE"), nullable=False)
    license_plate = Column(String(20), nullable=False)
    sent = Column(Boolean, default=False)

    accommodation_request = relationship("AccommodationRequest", back_populates="vehicles")

    def __repr__(self):
        return f"<Vehicle(id={self.id}, license_plate='{self.license_plate}')>"


class Link(Base):
    """Link de auto-registro enviado al huésped (fuente del email de contacto)"""
    __tablename__ = "links"
    __table_args__ = (
        Index('idx_link_request', 'accommodation_request_id'),
    )

    id = Column(Integer, primary_key=True, index=True)
    url = Column(String(500), nullable=False)
    email = Column(String(150), nullable=True)
    accommodation_code = Column(String(50), nullable=True)
    accommodation_request_id = Column(
        Integer, ForeignKey("accommodation_requests.id", ondelete="SET NULL"), nullable=True
    )
    exp_date = Column(DateTime, nullable=True)
    one_use = Column(Boolean, default=False)
    used = Column(Boolean, default=False)

    accommodation_request = relationship("AccommodationRequest", back_populates="links")

    def __repr__(self):
        return f"<Link(id={self.id}, accommodation_request_id={self.accommodation_request_id})>"
