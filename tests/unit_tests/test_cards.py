from collections import Counter

import pytest

from infinite_klondike.cards import Card, RandomCardSource, Suit


def c(rank: int, suit: Suit) -> Card:
    """Card by face value, 1 = Ace ... 13 = King."""
    return Card(suit, rank - 1)


def test_colour_and_ace_queries() -> None:
    assert c(1, Suit.HEART).is_ace()
    assert not c(2, Suit.HEART).is_ace()
    assert c(5, Suit.DIAMOND).is_red()
    assert c(5, Suit.HEART).is_red()
    assert not c(5, Suit.CLUB).is_red()
    assert not c(5, Suit.SPADE).is_red()


def test_same_suit_and_next_card() -> None:
    assert c(3, Suit.CLUB).same_suit(c(9, Suit.CLUB))
    assert not c(3, Suit.CLUB).same_suit(c(3, Suit.SPADE))
    assert c(8, Suit.DIAMOND).is_next_card_of(c(7, Suit.SPADE))
    assert not c(7, Suit.SPADE).is_next_card_of(c(8, Suit.DIAMOND))
    assert not c(9, Suit.DIAMOND).is_next_card_of(c(7, Suit.SPADE))


@pytest.mark.parametrize(
    "moving, target, expected",
    [
        (c(7, Suit.SPADE), c(8, Suit.DIAMOND), True),
        (c(7, Suit.HEART), c(8, Suit.CLUB), True),
        (c(7, Suit.SPADE), c(8, Suit.CLUB), False),
        (c(7, Suit.HEART), c(8, Suit.DIAMOND), False),
        (c(7, Suit.SPADE), c(9, Suit.DIAMOND), False),
        (c(8, Suit.DIAMOND), c(7, Suit.SPADE), False),
    ],
)
def test_can_drop_on(moving: Card, target: Card, expected: bool) -> None:
    assert moving.can_drop_on(target) is expected


@pytest.mark.parametrize("rank", [-1, 13, 100])
def test_rank_out_of_range_is_rejected(rank: int) -> None:
    with pytest.raises(ValueError):
        Card(Suit.SPADE, rank)


def test_unknown_suit_is_rejected() -> None:
    with pytest.raises(ValueError):
        Card(4, 0)


def test_plain_int_suit_is_normalised() -> None:
    card = Card(2, 0)
    assert card.suit is Suit.HEART
    assert card == c(1, Suit.HEART)
    assert hash(card) == hash(c(1, Suit.HEART))


def test_compact_code() -> None:
    assert c(1, Suit.CLUB).code == 0
    assert c(13, Suit.SPADE).code == 51
    assert Card.from_code(27) == c(2, Suit.HEART)
    with pytest.raises(ValueError):
        Card.from_code(52)


def test_labels() -> None:
    assert str(c(7, Suit.SPADE)) == "7♠"
    assert str(c(10, Suit.HEART)) == "10♥"
    assert str(c(1, Suit.DIAMOND)) == "A♦"
    assert str(c(13, Suit.CLUB)) == "K♣"


def test_cards_are_immutable() -> None:
    card = c(4, Suit.CLUB)
    with pytest.raises(AttributeError):
        card.rank = 5


def test_seeded_source_is_deterministic() -> None:
    a = RandomCardSource(seed=5)
    b = RandomCardSource(seed=5)
    assert [a.draw() for _ in range(20)] == [b.draw() for _ in range(20)]


def test_random_source_covers_every_suit_and_rank() -> None:
    source = RandomCardSource(seed=1)
    cards = [source.draw() for _ in range(2000)]
    assert set(Counter(card.suit for card in cards)) == set(Suit)
    assert {card.rank for card in cards} == set(range(13))
