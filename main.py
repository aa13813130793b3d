from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from config import CORS_ORIGINS
from database.conexion import Base, engine
import models  # noqa: F401  asegura que todos los modelos estén registrados
from utils.logging_utils import log_event

try:
    Base.metadata.create_all(bind=engine)
    log_event("startup", "sistema", "Tablas creadas (o ya existian)")
except SQLAlchemyError as e:
    log_event("startup", "sistema", "Error creando tablas", f"error={str(e)}")

app = FastAPI(title="Alojamientos - Disponibilidad y Timeline")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from endpoints import room_assignments, room_timeline, daily_operations  # noqa: E402
app.include_router(room_assignments.router)
app.include_router(room_timeline.router)
app.include_router(daily_operations.router)


@app.get("/")
def read_root():
    return {"message": "Motor de disponibilidad de habitaciones"}
