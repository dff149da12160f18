"""
Repository for smart meter readings.

Readings live in memory for the lifetime of the process. Each meter id owns
its own lock, so appends for one meter serialize while appends for different
meters proceed independently. Reads hand out tuple snapshots, which later
appends cannot change.
"""

import threading
from typing import Dict, Iterable, List, Optional, Tuple

from .base_repository import BaseRepository
from ..models import ElectricityReading


class MeterReadingRepository(BaseRepository):
    """In-memory reading log keyed by smart meter id."""

    def __init__(self):
        self._readings: Dict[str, List[ElectricityReading]] = {}
        self._locks: Dict[str, threading.Lock] = {}
        # guards creation of per-meter entries in the two dicts above
        self._registry_lock = threading.Lock()

    def _lock_for(self, smart_meter_id: str) -> threading.Lock:
        lock = self._locks.get(smart_meter_id)
        if lock is None:
            with self._registry_lock:
                lock = self._locks.setdefault(smart_meter_id, threading.Lock())
        return lock

    def append(self, smart_meter_id: str, readings: Iterable[ElectricityReading]) -> int:
        """
        Append readings to a meter's log, creating the log on first use.

        Returns:
            int: Number of readings now held for the meter.
        """
        batch = list(readings)
        with self._lock_for(smart_meter_id):
            log = self._readings.get(smart_meter_id)
            if log is None:
                with self._registry_lock:
                    log = self._readings.setdefault(smart_meter_id, [])
            log.extend(batch)
            return len(log)

    def find_by_id(self, smart_meter_id: str) -> Optional[Tuple[ElectricityReading, ...]]:
        """Snapshot of a meter's readings in append order, or None if unknown."""
        lock = self._locks.get(smart_meter_id)
        if lock is None:
            return None
        with lock:
            log = self._readings.get(smart_meter_id)
            return tuple(log) if log is not None else None

    def find_all(self) -> Dict[str, Tuple[ElectricityReading, ...]]:
        """Snapshot of every meter's readings."""
        with self._registry_lock:
            meter_ids = list(self._readings)
        snapshot = {}
        for smart_meter_id in meter_ids:
            readings = self.find_by_id(smart_meter_id)
            if readings is not None:
                snapshot[smart_meter_id] = readings
        return snapshot

    def count(self) -> int:
        """Number of meters with at least one stored batch."""
        with self._registry_lock:
            return len(self._readings)


# Process-wide store shared by every request
meter_reading_repository = MeterReadingRepository()
