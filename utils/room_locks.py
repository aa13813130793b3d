"""
Locks por habitación

Verificar disponibilidad e insertar son dos operaciones separadas contra la
base; dos requests concurrentes podrían ver la habitación libre e insertar
ambos. El lock serializa ese par de operaciones dentro del proceso. Entre
procesos la garantía la da el constraint de exclusión de PostgreSQL
(migrations/add_room_assignment_exclusion.py).
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator


class RoomLockRegistry:

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[int, threading.Lock] = {}

    def lock_for(self, room_id: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(room_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[room_id] = lock
            return lock

    @contextmanager
    def hold(self, room_id: int) -> Iterator[None]:
        lock = self.lock_for(room_id)
        with lock:
            yield


room_locks = RoomLockRegistry()
