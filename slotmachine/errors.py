"""Errors raised while looking up slots, cards and aliases."""


class SlotMachineError(Exception):
    """Base class for every slot machine failure."""


class NoSuchSlot(SlotMachineError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Slot `{name}` has not been configured.")


class NoCardFound(SlotMachineError):
    """The requested card index is missing and the slot does not fall back."""

    def __init__(self, slot: str, index: int) -> None:
        self.slot = slot
        self.index = index
        super().__init__(f"Card of index {index} was not found in the slot `{slot}`.")


class NoSuchAlias(SlotMachineError):
    def __init__(self, slot: str, alias: str) -> None:
        self.slot = slot
        self.alias = alias
        super().__init__(f'Alias "{alias}" has not been assigned to any cards in the slot `{slot}`.')


class BadDelimiterCount(SlotMachineError, ValueError):
    """Interpolation needs an opening and a closing delimiter."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Number of delimiter tokens too short ({count}). Interpolation requires exactly 2."
        )
