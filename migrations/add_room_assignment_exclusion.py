"""
Constraint de exclusión sobre room_assignments (solo PostgreSQL)

Impide a nivel base dos asignaciones de la misma habitación con rangos
solapados bajo la regla semiabierta: daterange(check_in, check_out, '[)').
Cubre la carrera entre procesos que el lock por habitación no alcanza.

Límite: daterange(d, d, '[)') es vacío en PostgreSQL y no se solapa con
nada, así que una asignación de cero noches no la bloquea este constraint.
Esa asignación solo la rechaza la verificación de la aplicación cuando cae
estrictamente dentro de otra estadía.
"""
from sqlalchemy import text
from database.conexion import SessionLocal

CONSTRAINT_NAME = "ex_room_assignments_sin_solape"


def migrate():
    db = SessionLocal()
    try:
        print("Migrating: Adding exclusion constraint to room_assignments...")
        result = db.execute(
            text("SELECT 1 FROM pg_constraint WHERE conname = :name"),
            {"name": CONSTRAINT_NAME},
        )
        if result.fetchone():
            print(f"Constraint '{CONSTRAINT_NAME}' already exists. Skipping.")
            return

        db.execute(text("CREATE EXTENSION IF NOT EXISTS btree_gist"))
        db.execute(text(
            f"ALTER TABLE room_assignments ADD CONSTRAINT {CONSTRAINT_NAME} "
            "EXCLUDE USING gist (room_id WITH =, daterange(check_in_date, check_out_date, '[)') WITH &&)"
        ))
        db.commit()
        print(f"Migration successful: Added '{CONSTRAINT_NAME}'.")

    except Exception as e:
        db.rollback()
        print(f"Migration failed: {e}")
    finally:
        db.close()


if __name__ == "__main__":
    migrate()
