"""Slot definitions for dynamic page content.

Each slot knows
    • its public name
    • which request parameters may pick its card
    • the reel of cards it can show, and the aliases naming some of them
    • which other slots its cards embed as placeholders
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias

import structlog

from slotmachine.errors import NoCardFound, NoSuchAlias

if TYPE_CHECKING:
    from slotmachine.models import SlotConfig

logger = structlog.get_logger()

Card: TypeAlias = Any  # cards are opaque, usually strings with placeholder tokens

DEFAULT_ALIAS = "_default"


class UndefinedCardPolicy(Enum):
    """What a slot does when asked for an index it holds no card for."""

    NO_CARD_FOUND = "no_card_found"
    DEFAULT_CARD = "default_card"


@dataclass(frozen=True, slots=True)
class Slot:
    name: str
    keys: Sequence[str]
    cards: Mapping[int, Card]
    aliases: Mapping[str, int] = field(default_factory=dict)
    nested: Sequence[str] = ()
    undefined_card: UndefinedCardPolicy = UndefinedCardPolicy.NO_CARD_FOUND

    def __post_init__(self) -> None:
        keys = (self.keys,) if isinstance(self.keys, str) else tuple(self.keys)
        if not keys:
            raise ValueError(f"Slot `{self.name}` needs at least one key.")
        object.__setattr__(self, "keys", keys)
        object.__setattr__(self, "nested", tuple(self.nested))
        object.__setattr__(self, "cards", MappingProxyType(dict(self.cards)))
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))

    @classmethod
    def from_config(cls, config: SlotConfig) -> Slot:
        """Build a slot from a validated configuration record."""
        reel = config.reel
        if isinstance(reel, str):
            raise ValueError(f"Reel `{reel}` of slot `{config.name}` has not been resolved.")
        return cls(
            name=config.name,
            keys=config.keys,
            cards=reel.cards,
            aliases=reel.aliases,
            nested=config.nested,
            undefined_card=config.undefined_card,
        )

    @property
    def key(self) -> str:
        """The primary request parameter, used when none of the keys is set."""
        return self.keys[0]

    def get_card(self, index: int = 0) -> Card:
        """Return the card at ``index``.

        A missing index either raises or falls back to the default card,
        depending on the slot's ``undefined_card`` policy.

        Raises:
            NoCardFound: the index holds no card and the policy is NO_CARD_FOUND.
        """
        if index in self.cards:
            return self.cards[index]
        if self.undefined_card is UndefinedCardPolicy.DEFAULT_CARD:
            logger.debug("undefined_card_defaulted", slot=self.name, index=index)
            return self.get_default_card()
        raise NoCardFound(self.name, index)

    def get_card_by_alias(self, alias: str) -> Card:
        """Return the card an alias points at.

        Raises:
            NoSuchAlias: the alias is not assigned on this slot.
        """
        if alias not in self.aliases:
            raise NoSuchAlias(self.name, alias)
        return self.get_card(self.aliases[alias])

    def get_default_card(self) -> Card:
        """Return the card of the ``_default`` alias, or the first card without one.

        The default card is not subject to the undefined card policy; a
        missing default always raises NoCardFound.
        """
        index = self.get_default_index()
        if index is None:
            index = 0
        if index not in self.cards:
            raise NoCardFound(self.name, index)
        return self.cards[index]

    def get_default_index(self) -> int | None:
        return self.aliases.get(DEFAULT_ALIAS)

    def __str__(self) -> str:
        return str(self.get_card())
