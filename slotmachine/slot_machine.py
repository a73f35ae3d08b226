"""Picks the card each slot shows for a request and composes nested slots."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from slotmachine.interpolation import DEFAULT_DELIMITERS, interpolate
from slotmachine.models import SlotMachineConfig
from slotmachine.parameters import ParameterSource, QueryParameters
from slotmachine.registry import SlotRegistry
from slotmachine.slots import Card, Slot

logger = structlog.get_logger()


class SlotMachine:
    """Dynamic page content container.

    Binds a registry of slots to a source of request parameters. Machines
    derived through ``with_parameters`` share the registry, so each slot is
    built once no matter how many requests are served.
    """

    def __init__(
        self,
        config: SlotMachineConfig | Mapping[str, Any],
        parameters: ParameterSource | None = None,
        delimiters: Sequence[str] = DEFAULT_DELIMITERS,
        *,
        registry: SlotRegistry | None = None,
    ) -> None:
        if not isinstance(config, SlotMachineConfig):
            config = SlotMachineConfig.model_validate(config)
        self._config = config
        self._registry = registry if registry is not None else SlotRegistry(config)
        self._parameters = parameters if parameters is not None else QueryParameters()
        self._delimiters = tuple(delimiters)

    @property
    def config(self) -> SlotMachineConfig:
        return self._config

    @property
    def parameters(self) -> ParameterSource:
        return self._parameters

    @property
    def registry(self) -> SlotRegistry:
        return self._registry

    def with_parameters(self, parameters: ParameterSource) -> SlotMachine:
        """Return a machine reading ``parameters`` and sharing this machine's slots."""
        return SlotMachine(self._config, parameters, self._delimiters, registry=self._registry)

    def render(self, slot_name: str, default: int = 0) -> Card:
        """Return the card selected for a slot, with its nested slots filled in.

        A slot without nested slots returns its card untouched. Otherwise each
        nested slot's selected card replaces its ``{name}`` token in the
        parent card.
        """
        slot = self._registry.get(slot_name)

        if not slot.nested:
            return slot.get_card(self.resolve_index(slot_name, default))

        nested_cards = {
            name: self._registry.get(name).get_card(self.resolve_index(name, default))
            for name in slot.nested
        }
        card = slot.get_card(self.resolve_index(slot_name, default))
        logger.debug("slot_rendered", slot=slot_name, nested=list(nested_cards))
        return interpolate(card, nested_cards, self._delimiters)

    def resolve_index(self, slot_name: str, default: int = 0) -> int:
        """Return the card index the request parameters select for a slot.

        The first of the slot's keys set to a scalar parameter is read; with
        none set, the primary key is. Presence and the integer read are
        separate lookups: a key that is set but not numeric resolves to
        ``default`` instead of falling through to the next key.
        """
        slot = self._registry.get(slot_name)
        active = next((key for key in slot.keys if self._parameters.has_scalar(key)), slot.key)
        return self._parameters.get_int(active, default)

    def __getitem__(self, slot_name: str) -> Slot:
        return self._registry.get(slot_name)

    def __contains__(self, slot_name: object) -> bool:
        return slot_name in self._registry

    def __len__(self) -> int:
        """Number of slots built so far, see ``SlotRegistry.count``."""
        return self._registry.count()
