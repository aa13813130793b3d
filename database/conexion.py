from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from config import DATABASE_URL


def _engine_kwargs(url: str) -> dict:
    # sqlite en memoria: una sola conexión compartida entre hilos (TestClient)
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {"pool_pre_ping": True}


# Engine síncrono (psycopg en PostgreSQL)
engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))

# Una sesión por request vía get_db
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base declarativa de los modelos
Base = declarative_base()

# NO llamar create_all aquí: main.py lo hace luego de importar los modelos


# Dependencia de FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
