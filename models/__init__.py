"""
Archivo de inicialización del paquete models.
Expone todas las clases para que SQLAlchemy (Base.metadata) las detecte
al importar 'models'.
"""

# 1. Habitaciones (desde habitacion.py)
from .habitacion import Room

# 2. Solicitudes de alojamiento y asignaciones (desde reserva.py)
from .reserva import AccommodationRequest, RoomAssignment

# 3. Huéspedes, vehículos y links (desde cliente.py)
from .cliente import Guest, Vehicle, Link

__all__ = [
    "Room",
    "AccommodationRequest", "RoomAssignment",
    "Guest", "Vehicle", "Link",
]
