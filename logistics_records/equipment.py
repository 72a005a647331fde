"""Equipment desk: a reduced record table for rentable equipment.

Unlike the other tables the desk has no update, delete or query operations.
Besides add and rent it only answers presence checks for returns, drone
deliveries and drone pickups.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, List, Union

from .domain import Equipment
from .logger import get_logger
from .repository import InvalidFieldError, NotFound, ValidationError

logger = get_logger(__name__)

NOT_IN_SYSTEM = "This equipment is not in our system! Please try again."


@dataclass(frozen=True, slots=True)
class Notice:
    """Outcome of a presence check, ready to show to an operator."""

    ok: bool
    message: str


class EquipmentDesk:
    """Keeps equipment names by integer id behind a per-instance lock."""

    key_field = "id"

    def __init__(self) -> None:
        self._items: Dict[int, Equipment] = {}
        self._lock = threading.RLock()

    def __contains__(self, equipment_id: object) -> bool:
        with self._lock:
            return equipment_id in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def list(self) -> List[Equipment]:
        with self._lock:
            return list(self._items.values())

    def add(self, equipment_id: int, name: str) -> Union[Equipment, ValidationError]:
        """Store ``name`` under ``equipment_id``, replacing any earlier entry."""
        try:
            item = Equipment(id=equipment_id, name=name)
        except InvalidFieldError as exc:
            logger.info("Rejected equipment: %s", exc)
            return ValidationError.from_error(exc)
        with self._lock:
            self._items[equipment_id] = item
        logger.debug("Stored equipment %s (%s)", equipment_id, name)
        return item

    def rent(self, equipment_id: int) -> Union[str, NotFound]:
        with self._lock:
            item = self._items.get(equipment_id)
        if item is None:
            logger.info("Rent refused, equipment %s unknown", equipment_id)
            return NotFound(field=self.key_field, value=str(equipment_id))
        return item.name

    def return_equipment(self, equipment_id: int) -> Notice:
        if equipment_id in self:
            return self._notice(True, "Equipment returned.")
        return self._notice(False, NOT_IN_SYSTEM)

    def deliver(self, equipment_id: int, drone_id: int, date: str) -> Notice:
        if equipment_id in self:
            return self._notice(
                True, f"Equipment delivered by drone {drone_id} on {date}"
            )
        return self._notice(False, NOT_IN_SYSTEM)

    def pickup(self, equipment_id: int, drone_id: int, date: str) -> Notice:
        if equipment_id in self:
            return self._notice(
                True,
                f"Equipment scheduled to be picked up by drone {drone_id} on {date}",
            )
        return self._notice(False, NOT_IN_SYSTEM)

    def _notice(self, ok: bool, message: str) -> Notice:
        logger.info(message)
        return Notice(ok=ok, message=message)


__all__ = ["EquipmentDesk", "Notice", "NOT_IN_SYSTEM"]
