"""
Modelos de Solicitud de Alojamiento (reserva) y Asignación de Habitación
"""

from sqlalchemy import (
    Column, Integer, String, ForeignKey, Date, DateTime, Boolean,
    Index, CheckConstraint
)
from sqlalchemy.orm import relationship
from database.conexion import Base
from datetime import datetime


# ----------- SOLICITUD DE ALOJAMIENTO -----------
class AccommodationRequest(Base):
    __tablename__ = "accommodation_requests"
    __table_args__ = (
        Index('idx_acc_req_establishment', 'establishment_code'),
        Index('idx_acc_req_fechas', 'check_in', 'check_out'),
    )

    id = Column(Integer, primary_key=True, index=True)
    establishment_code = Column(String(50), nullable=False)

    # Fechas: solo la parte de fecha cuenta para ocupación
    check_in = Column(DateTime, nullable=False)
    check_out = Column(DateTime, nullable=False)

    num_guests = Column(Integer, default=1)
    num_rooms = Column(Integer, default=1)
    contract_reference = Column(String(100), nullable=True)
    payment_type = Column(String(30), nullable=True)

    # to check in | checked out | ok | format_error | send_error
    status = Column(String(20), nullable=False, default="to check in")
    sent = Column(Boolean, default=False)

    creado_en = Column(DateTime, default=datetime.utcnow)

    guests = relationship("Guest", back_populates="accommodation_request", cascade="all, delete-orphan")
    vehicles = relationship("Vehicle", back_populates="accommodation_request", cascade="all, delete-orphan")
    links = relationship("Link", back_populates="accommodation_request")
    assignments = relationship("RoomAssignment", back_populates="accommodation_request", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<AccommodationRequest(id={self.id}, establishment_code='{self.establishment_code}', status='{self.status}')>"


# ----------- ASIGNACION DE HABITACION -----------
class RoomAssignment(Base):
    __tablename__ = "room_assignments"
    __table_args__ = (
        Index('idx_room_assign_room', 'room_id'),
        Index('idx_room_assign_request', 'accommodation_request_id'),
        Index('idx_room_assign_fechas', 'room_id', 'check_in_date', 'check_out_date'),
        CheckConstraint('check_out_date >= check_in_date', name='ck_room_assign_rango'),
    )

    id = Column(Integer, primary_key=True, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False)
    accommodation_request_id = Column(
        Integer, ForeignKey("accommodation_requests.id", ondelete="CASCADE"), nullable=False
    )
    check_in_date = Column(Date, nullable=False)
    check_out_date = Column(Date, nullable=False)

    creado_en = Column(DateTime, default=datetime.utcnow)

    room = relationship("Room", back_populates="assignments")
    accommodation_request = relationship("AccommodationRequest", back_populates="assignments")

    def __repr__(self):
        return (
            f"<RoomAssignment(id={self.id}, room_id={self.room_id}, "
            f"{self.check_in_date} -> {self.check_out_date})>"
        )
