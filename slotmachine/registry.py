"""Lazily built, memoized slots keyed by name."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import structlog

from slotmachine.errors import NoSuchSlot
from slotmachine.models import SlotMachineConfig
from slotmachine.slots import Slot

logger = structlog.get_logger()


class SlotRegistry:
    """Holds one factory per configured slot and the slots built so far.

    A slot is constructed the first time it is asked for and the same instance
    is returned afterwards. Counting only looks at slots already built.
    """

    def __init__(self, config: SlotMachineConfig) -> None:
        self._factories: dict[str, Callable[[], Slot]] = {
            name: (lambda slot_config=slot_config: Slot.from_config(slot_config))
            for name, slot_config in config.slots.items()
        }
        self._slots: dict[str, Slot] = {}

    def get(self, name: str) -> Slot:
        if (slot := self._slots.get(name)) is not None:
            return slot
        if name not in self._factories:
            raise NoSuchSlot(name)
        slot = self._slots[name] = self._factories[name]()
        logger.debug("slot_realized", slot=name)
        return slot

    def names(self) -> list[str]:
        """Configured slot names, in configuration order."""
        return list(self._factories)

    def realized(self) -> list[str]:
        return list(self._slots)

    def count(self) -> int:
        """Number of slots built so far; never builds any."""
        return len(self._slots)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)
