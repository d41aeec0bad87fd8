import pytest

from eulertools.poker import Card, Hand, count_player_one_wins, player_one_wins

EXAMPLES = [
    ("5H 5C 6S 7S KD 2C 3S 8S 8D TD", False),
    ("5D 8C 9S JS AC 2C 5C 7D 8S QH", True),
    ("2D 9C AS AH AC 3D 6D 7D TD QD", False),
    ("4D 6S 9H QH QC 3D 6D 7H QD QS", True),
    ("2H 2D 4C 4D 4S 3C 3D 3S 9S 9D", True),
]


def test_card_parse_ten():
    card = Card.parse("TS")
    assert (card.num, card.suit) == (10, "S")


def test_card_parse_ace():
    assert Card.parse("AC").num == 14


@pytest.mark.parametrize("text", ["2H", "9D", "TS", "JC", "QH", "KD", "AS"])
def test_card_round_trip(text):
    assert str(Card.parse(text)) == text


@pytest.mark.parametrize("text", ["1H", "ZS", "T", "TSX", "TX"])
def test_card_parse_rejects_bad_text(text):
    with pytest.raises(ValueError):
        Card.parse(text)


def test_hand_sorted_by_rank():
    assert str(Hand.parse("KD 2C 5H 7S 5C")).split()[0] == "2C"
    assert str(Hand.parse("KD 2C 5H 7S 5C")).split()[-1] == "KD"


def test_hand_wrong_size():
    with pytest.raises(ValueError):
        Hand.parse("2C 3C 4C 5C")


@pytest.mark.parametrize("line,expected", EXAMPLES)
def test_worked_examples(line, expected):
    assert player_one_wins(line) is expected


def test_count_examples():
    assert count_player_one_wins(line for line, _ in EXAMPLES) == 3


def test_high_card_ace_beats_king():
    assert player_one_wins("8C TS KC 9H 4S 7D 2S 5D 3S AC") is False


@pytest.mark.parametrize("line,_", EXAMPLES)
def test_comparison_is_antisymmetric(line, _):
    tokens = line.split()
    left = Hand.parse(" ".join(tokens[:5]))
    right = Hand.parse(" ".join(tokens[5:]))
    assert not (left > right and right > left)
    assert (left > right) == (right < left)


def test_hand_not_greater_than_itself():
    hand = Hand.parse("2H 2D 4C 4D 4S")
    assert not hand > Hand.parse("2H 2D 4C 4D 4S")


def test_ace_low_straight():
    hand = Hand.parse("AH 2D 3C 4S 5H")
    assert hand.is_straight
    assert not hand.is_flush


def test_straight_beats_three_of_a_kind():
    assert Hand.parse("4H 5D 6C 7S 8H") > Hand.parse("AH AD AC 3S 9H")


def test_flush_beats_straight():
    assert Hand.parse("2H 5H 7H 9H JH") > Hand.parse("4H 5D 6C 7S 8H")


def test_two_pair_beats_high_pair():
    assert Hand.parse("2H 2D 3C 3S 9H") > Hand.parse("KH KD 4C 7S 9D")


def test_four_of_a_kind_beats_full_house():
    assert Hand.parse("2H 2D 2C 2S 9H") > Hand.parse("AH AD AC KS KD")


def test_deal_wrong_size():
    with pytest.raises(ValueError):
        player_one_wins("2H 2D 4C 4D 4S 3C 3D 3S 9S")