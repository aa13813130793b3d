"""
Log de eventos del motor de asignaciones

Una línea por evento: AREA | Usuario | Accion | Detalle. Las escrituras
exitosas van en INFO, los rechazos de validación en WARNING y las fallas
del almacenamiento en ERROR.
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from config import LOG_BACKUP_COUNT, LOG_FILE, LOG_LEVEL, LOG_MAX_BYTES

_LOGGER_NAME = "alojamientos"


def _configure_logger() -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))
    logger.propagate = False

    try:
        handler = RotatingFileHandler(
            Path(LOG_FILE), maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        )
    except OSError:
        # Directorio de logs no escribible: a stderr
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter("%(asctime)s | %(name)s | %(levelname)s | %(message)s"))
    logger.addHandler(handler)
    return logger


_logger = _configure_logger()


def log_event(area: str, usuario: str, accion: str, detalle: str = "", nivel: int = logging.INFO) -> None:
    partes = [area.upper(), f"Usuario: {usuario}", f"Accion: {accion}"]
    if detalle:
        partes.append(f"Detalle: {detalle}")
    _logger.log(nivel, " | ".join(partes))


def log_rechazo(area: str, usuario: str, accion: str, detalle: str = "") -> None:
    """Validación rechazada antes de escribir"""
    log_event(area, usuario, accion, detalle, nivel=logging.WARNING)
