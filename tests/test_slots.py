import pytest

from slotmachine.errors import NoCardFound, NoSuchAlias
from slotmachine.models import SlotConfig
from slotmachine.slots import Slot, UndefinedCardPolicy


@pytest.fixture
def strict_slot():
    """Slot that raises for missing cards, with sparse indices and a default alias."""
    return Slot(
        name="headline",
        keys=["h", "headline"],
        cards={0: "Welcome", 2: "Last chance", 5: "Sparse"},
        aliases={"_default": 2, "urgent": 2, "broken": 9},
    )


@pytest.fixture
def lenient_slot():
    """Slot that falls back to its default card for missing cards."""
    return Slot(
        name="banner",
        keys=["b"],
        cards={0: "Spring", 1: "Summer"},
        aliases={"_default": 1},
        undefined_card=UndefinedCardPolicy.DEFAULT_CARD,
    )


def test_get_card_returns_card_at_index(strict_slot):
    assert strict_slot.get_card(0) == "Welcome"
    assert strict_slot.get_card(5) == "Sparse"
    assert strict_slot.get_card() == "Welcome"


@pytest.mark.parametrize("index", [1, 3, 4, 6, -1])
def test_missing_card_raises_under_strict_policy(strict_slot, index):
    with pytest.raises(NoCardFound) as exc_info:
        strict_slot.get_card(index)
    assert exc_info.value.index == index
    assert exc_info.value.slot == "headline"
    assert "headline" in str(exc_info.value)


@pytest.mark.parametrize("index", [2, 3, 42, -1])
def test_missing_card_uses_default_card_under_lenient_policy(lenient_slot, index):
    assert lenient_slot.get_card(index) == lenient_slot.get_default_card() == "Summer"


def test_get_card_by_alias(strict_slot):
    assert strict_slot.get_card_by_alias("urgent") == "Last chance"


def test_alias_to_missing_card_follows_policy(strict_slot):
    with pytest.raises(NoCardFound):
        strict_slot.get_card_by_alias("broken")


@pytest.mark.parametrize("fixture", ["strict_slot", "lenient_slot"])
def test_unknown_alias_always_raises(request, fixture):
    slot = request.getfixturevalue(fixture)
    with pytest.raises(NoSuchAlias) as exc_info:
        slot.get_card_by_alias("nope")
    assert exc_info.value.alias == "nope"
    assert exc_info.value.slot == slot.name


def test_default_card_follows_default_alias(strict_slot):
    assert strict_slot.get_default_index() == 2
    assert strict_slot.get_default_card() == strict_slot.get_card_by_alias("_default")


def test_default_card_with_missing_default_index_raises():
    slot = Slot(name="dangling", keys=["d"], cards={0: "zero"}, aliases={"_default": 4})
    with pytest.raises(NoCardFound) as default_info:
        slot.get_default_card()
    with pytest.raises(NoCardFound) as alias_info:
        slot.get_card_by_alias("_default")
    assert default_info.value.index == alias_info.value.index == 4


def test_default_card_without_alias_is_first_card():
    slot = Slot(name="plain", keys=["p"], cards={0: "zero", 1: "one"})
    assert slot.get_default_index() is None
    assert slot.get_default_card() == slot.get_card() == "zero"


def test_missing_default_card_raises_instead_of_looping():
    slot = Slot(
        name="empty",
        keys=["e"],
        cards={3: "three"},
        undefined_card=UndefinedCardPolicy.DEFAULT_CARD,
    )
    with pytest.raises(NoCardFound) as exc_info:
        slot.get_card(7)
    assert exc_info.value.index == 0


def test_keys_and_nested(strict_slot):
    assert strict_slot.key == "h"
    assert strict_slot.keys == ("h", "headline")
    assert strict_slot.nested == ()


def test_single_string_key_is_one_key():
    slot = Slot(name="s", keys="only", cards={0: "x"})
    assert slot.keys == ("only",)


def test_slot_needs_a_key():
    with pytest.raises(ValueError):
        Slot(name="keyless", keys=[], cards={0: "x"})


def test_str_renders_first_card(strict_slot):
    assert str(strict_slot) == "Welcome"
    assert str(Slot(name="n", keys=["n"], cards={0: 42})) == "42"


def test_slot_is_read_only(strict_slot):
    with pytest.raises(AttributeError):
        strict_slot.name = "other"
    with pytest.raises(TypeError):
        strict_slot.cards[9] = "injected"


def test_construction_copies_cards():
    cards = {0: "a"}
    slot = Slot(name="copy", keys=["c"], cards=cards)
    cards[1] = "b"
    assert 1 not in slot.cards


def test_from_config():
    config = SlotConfig.model_validate({
        "name": "banner",
        "keys": ["b"],
        "reel": {"cards": {"0": "Spring", "1": "Summer"}, "aliases": {"_default": 1}},
        "nested": ["user"],
        "undefined_card": "default_card",
    })
    slot = Slot.from_config(config)

    assert slot.name == "banner"
    assert slot.cards == {0: "Spring", 1: "Summer"}
    assert slot.nested == ("user",)
    assert slot.undefined_card is UndefinedCardPolicy.DEFAULT_CARD
    assert slot.get_card(8) == "Summer"


def test_from_config_with_unresolved_reel_name():
    config = SlotConfig(name="banner", keys=["b"], reel="seasons")
    with pytest.raises(ValueError):
        Slot.from_config(config)
