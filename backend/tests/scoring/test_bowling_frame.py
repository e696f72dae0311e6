import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from tenpin.scoring.bowling import (
    Frame,
    InvalidInput,
    InvalidOperation,
    InvalidState,
    Roll,
)


def _frame(rolls, last=False):
    frame = Frame(last=last)
    for pins in rolls:
        frame.add_roll(pins)
    return frame


def test_roll_points_start_at_pins():
    roll = Roll(7)
    assert roll.pins == 7
    assert roll.points == 7
    assert roll.bonus is False


def test_bonus_roll_has_no_points_of_its_own():
    roll = Roll(7, bonus=True)
    assert roll.pins == 7
    assert roll.points == 0


def test_roll_add_points_accumulates():
    roll = Roll(10)
    roll.add_points(10)
    roll.add_points(4)
    assert roll.points == 24
    assert roll.pins == 10


def test_roll_pins_are_read_only():
    roll = Roll(3)
    with pytest.raises(AttributeError):
        roll.pins = 4


def test_roll_points_only_change_through_add_points():
    roll = Roll(3)
    with pytest.raises(AttributeError):
        roll.points = 30
    roll.add_points(5)
    assert roll.points == 8


@pytest.mark.parametrize("pins", [-1, 11, 2.0, "5", None, False])
def test_roll_rejects_invalid_pins(pins):
    with pytest.raises(InvalidInput):
        Roll(pins)


def test_regular_frame_open():
    frame = _frame([3, 4])
    assert frame.is_done()
    assert not frame.is_strike()
    assert not frame.is_spare()
    assert frame.points() == 7
    assert frame.pins() == 7


def test_regular_frame_spare():
    frame = _frame([0, 10])
    assert frame.is_spare()
    assert not frame.is_strike()
    assert frame.is_done()


def test_regular_frame_strike_is_done_after_one_roll():
    frame = _frame([10])
    assert frame.is_strike()
    assert not frame.is_spare()
    assert frame.is_done()
    assert frame.available_rolls == 2
    assert not frame.can_roll(0)
    with pytest.raises(InvalidOperation):
        frame.add_roll(0)


def test_regular_frame_rejects_more_than_ten_pins():
    frame = _frame([7])
    assert frame.can_roll(3)
    assert not frame.can_roll(4)
    with pytest.raises(InvalidOperation):
        frame.add_roll(7)
    assert len(frame.rolls) == 1
    assert frame.available_pins == 3


def test_regular_frame_rejects_third_roll():
    frame = _frame([1, 1])
    with pytest.raises(InvalidOperation, match="no rolls left"):
        frame.add_roll(1)


def test_regular_frame_cannot_grant_bonus_rolls():
    frame = Frame()
    with pytest.raises(InvalidOperation):
        frame.add_bonus_rolls(1)
    assert frame.available_rolls == 2


def test_current_roll():
    frame = Frame()
    with pytest.raises(InvalidState):
        frame.current_roll()
    frame.add_roll(4)
    frame.add_roll(5)
    assert frame.current_roll().pins == 5


def test_last_frame_open_has_two_rolls():
    frame = _frame([3, 4], last=True)
    assert frame.is_done()
    assert not frame.is_bonus()
    assert frame.available_rolls == 2


def test_last_frame_strike_grants_two_more_rolls():
    frame = _frame([10], last=True)
    assert frame.is_strike()
    assert frame.is_bonus()
    assert not frame.is_done()
    assert frame.available_rolls == 3
    assert frame.available_pins == 10

    frame.add_roll(10)
    frame.add_roll(10)
    assert frame.is_done()
    assert [r.bonus for r in frame.rolls] == [False, True, True]
    assert frame.points() == 10
    assert frame.pins() == 30


def test_last_frame_spare_grants_one_more_roll():
    frame = _frame([6, 4], last=True)
    assert frame.is_spare()
    assert not frame.is_done()
    assert frame.available_pins == 10
    frame.add_roll(10)
    assert frame.is_done()
    assert frame.current_roll().bonus


def test_last_frame_does_not_grant_past_three_rolls():
    frame = _frame([10, 10, 10], last=True)
    assert frame.available_rolls == 3
    with pytest.raises(InvalidOperation):
        frame.add_roll(0)


def test_last_frame_strike_then_partial_rack():
    frame = _frame([10, 3], last=True)
    assert not frame.is_spare()
    assert frame.available_pins == 7
    with pytest.raises(InvalidOperation):
        frame.add_roll(8)
    frame.add_roll(7)
    assert frame.is_done()


def test_last_frame_add_bonus_rolls():
    frame = Frame(last=True)
    frame.add_bonus_rolls(1)
    assert frame.available_rolls == 3
    assert frame.is_bonus()
