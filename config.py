"""
Configuración del motor de disponibilidad y timeline de habitaciones
"""
import os

from dotenv import load_dotenv

load_dotenv()

# Database
DB_USER = os.getenv("DB_USER", "postgres")
DB_PASSWORD = os.getenv("DB_PASSWORD", "postgres")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "alojamientos")

# DATABASE_URL tiene prioridad sobre las variables sueltas (tests usan sqlite)
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql+psycopg://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)

# Logging
LOG_FILE = os.getenv("LOG_FILE", "alojamientos_logs.txt")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", "1000000"))
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "3"))

# Zona horaria del establecimiento (para "hoy" en el timeline)
HOTEL_TIMEZONE = os.getenv("HOTEL_TIMEZONE", "Europe/Madrid")

# CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
    if origin.strip()
]

# Timeline
TIMELINE_DEFAULT_DAYS = int(os.getenv("TIMELINE_DEFAULT_DAYS", "7"))
TIMELINE_MAX_DAYS = 365
