"""Configuration records the slot machine is built from."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, NonNegativeInt, model_validator

from slotmachine.slots import UndefinedCardPolicy


class ReelConfig(BaseModel):
    """A reel of cards plus the aliases naming some of its indices."""

    cards: dict[NonNegativeInt, Any] = Field(default_factory=dict)
    aliases: dict[str, int] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}


class SlotConfig(BaseModel):
    """One slot as written in configuration.

    ``reel`` is either an inline reel or the name of a shared reel declared
    under ``SlotMachineConfig.reels``.
    """

    name: str | None = None
    keys: list[str] = Field(min_length=1)
    reel: ReelConfig | str
    nested: list[str] = Field(default_factory=list)
    undefined_card: UndefinedCardPolicy = UndefinedCardPolicy.NO_CARD_FOUND

    model_config = {"extra": "forbid"}


class SlotMachineConfig(BaseModel):
    slots: dict[str, SlotConfig] = Field(default_factory=dict)
    reels: dict[str, ReelConfig] = Field(default_factory=dict)

    @model_validator(mode="after")
    def link_slots(self) -> SlotMachineConfig:
        """Name every slot after its key and swap shared reel names for the reels."""
        for name, slot in self.slots.items():
            slot.name = name

            if isinstance(slot.reel, str):
                if slot.reel not in self.reels:
                    raise ValueError(f"Slot `{name}` uses the undefined reel `{slot.reel}`.")
                slot.reel = self.reels[slot.reel]

            unknown = [n for n in slot.nested if n not in self.slots]
            if unknown:
                raise ValueError(f"Slot `{name}` nests undefined slots: {', '.join(unknown)}.")
        return self
