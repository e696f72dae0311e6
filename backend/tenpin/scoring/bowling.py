"""Ten-pin bowling scoring engine.

Rolls are grouped into ten frames.  Strikes and spares owe their bonus to
rolls that have not happened yet, so the game keeps up to two pending
references into already recorded rolls and credits them as later rolls come
in.  The tenth frame grants extra rolls after a strike or spare; those rolls
only feed pending bonuses and carry no points of their own.
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

MAX_PINS = 10
FRAMES = 10
BASE_ROLLS = 2
MAX_FRAME_ROLLS = 3
MAX_ROLLS = (FRAMES - 1) * BASE_ROLLS + MAX_FRAME_ROLLS
MAX_SCORE = 300

# (frame index, roll index) of a roll still owed bonus pins
RollRef = Tuple[int, int]


class BowlingError(ValueError):
    """Base class for rejected bowling rolls."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidInput(BowlingError):
    """The pin count is not an integer between 0 and 10."""


class InvalidOperation(BowlingError):
    """The roll is not legal for the current frame or game."""


class InvalidState(BowlingError):
    """The frame has no roll to report yet."""


def _validate_pins(pins) -> int:
    # bool is a subclass of int
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise InvalidInput(f"pins must be an integer, got {pins!r}")
    if not 0 <= pins <= MAX_PINS:
        raise InvalidInput(f"pins must be between 0 and {MAX_PINS}, got {pins}")
    return pins


class Roll:
    """Pins knocked down by one ball plus the points credited to it."""

    __slots__ = ("_pins", "_bonus", "_points")

    def __init__(self, pins: int, bonus: bool = False) -> None:
        self._pins = _validate_pins(pins)
        self._bonus = bonus
        self._points = 0 if bonus else pins

    @property
    def pins(self) -> int:
        return self._pins

    @property
    def bonus(self) -> bool:
        return self._bonus

    @property
    def points(self) -> int:
        return self._points

    def add_points(self, points: int) -> None:
        self._points += points

    def __repr__(self) -> str:
        kind = "BonusRoll" if self._bonus else "Roll"
        return f"{kind}(pins={self._pins}, points={self._points})"


class Frame:
    """Up to two rolls, or up to three when ``last`` is set.

    The last frame grants one extra roll after a strike or spare and racks a
    fresh set of pins whenever all ten are down.  Rolls made after that grant
    are bonus rolls.
    """

    def __init__(self, last: bool = False) -> None:
        self.last = last
        self.rolls: List[Roll] = []
        self.available_rolls = BASE_ROLLS
        self.available_pins = MAX_PINS

    def is_bonus(self) -> bool:
        return self.last and self.available_rolls > BASE_ROLLS

    def is_strike(self) -> bool:
        return len(self.rolls) == 1 and self.rolls[0].pins == MAX_PINS

    def is_spare(self) -> bool:
        if len(self.rolls) != 2 or self.rolls[0].pins == MAX_PINS:
            return False
        return self.rolls[0].pins + self.rolls[1].pins == MAX_PINS

    def is_done(self) -> bool:
        if not self.last and self.is_strike():
            return True
        return len(self.rolls) >= self.available_rolls

    def can_roll(self, pins: int) -> bool:
        return not self.is_done() and pins <= self.available_pins

    def add_roll(self, pins: int) -> Roll:
        roll = Roll(pins, bonus=self.is_bonus())
        if not self.can_roll(roll.pins):
            if self.is_done():
                raise InvalidOperation("no rolls left in this frame")
            raise InvalidOperation(
                f"cannot knock down {roll.pins} pins, only {self.available_pins} standing"
            )
        self.rolls.append(roll)
        self._update_available_rolls()
        self._update_available_pins(roll.pins)
        return roll

    def add_bonus_rolls(self, count: int) -> None:
        if not self.last:
            raise InvalidOperation("only the last frame can grant bonus rolls")
        self.available_rolls += count

    def current_roll(self) -> Roll:
        if not self.rolls:
            raise InvalidState("no rolls have been made in this frame")
        return self.rolls[-1]

    def points(self) -> int:
        return sum(r.points for r in self.rolls)

    def pins(self) -> int:
        return sum(r.pins for r in self.rolls)

    def _update_available_rolls(self) -> None:
        if self.last and not self.is_bonus() and (self.is_strike() or self.is_spare()):
            self.add_bonus_rolls(1)

    def _update_available_pins(self, pins: int) -> None:
        self.available_pins -= pins
        # New rack in the last frame once every pin is down.
        if self.last and self.available_pins == 0:
            self.available_pins = MAX_PINS

    def __repr__(self) -> str:
        return f"Frame(last={self.last}, rolls={self.rolls!r})"


class BowlingGame:
    """One game: ten frames and the bonuses still owed to earlier rolls."""

    def __init__(self) -> None:
        self._frames = tuple(Frame(last=i == FRAMES - 1) for i in range(FRAMES))
        self._current = 0
        self._one_roll_bonus: Optional[RollRef] = None
        self._two_rolls_bonus: Optional[RollRef] = None

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return self._frames

    @property
    def current_frame(self) -> int:
        """Zero-based index of the frame the last roll went into."""
        return self._current

    def is_complete(self) -> bool:
        return self._frames[-1].is_done()

    def _next_frame_index(self) -> int:
        """Index of the frame that would receive the next roll.

        Raises ``InvalidOperation`` once the last frame is done.
        """
        if not self._frames[self._current].is_done():
            return self._current
        if self._current == FRAMES - 1:
            raise InvalidOperation("the game is over, no rolls left")
        return self._current + 1

    def can_roll(self, pins) -> bool:
        try:
            pins = _validate_pins(pins)
            index = self._next_frame_index()
        except BowlingError:
            return False
        return self._frames[index].can_roll(pins)

    def roll(self, pins) -> None:
        pins = _validate_pins(pins)
        index = self._next_frame_index()
        frame = self._frames[index]
        if not frame.can_roll(pins):
            raise InvalidOperation(
                f"cannot knock down {pins} pins in frame {index + 1}, "
                f"only {frame.available_pins} standing"
            )

        if index != self._current:
            logger.debug("Advancing to frame %d", index + 1)
            self._current = index
        roll = frame.add_roll(pins)
        ref = (index, len(frame.rolls) - 1)

        # Settle what earlier strikes and spares are owed before this roll
        # can become a creditor itself.
        if self._one_roll_bonus is not None:
            self._roll_at(self._one_roll_bonus).add_points(pins)
            self._one_roll_bonus = None
        if self._two_rolls_bonus is not None:
            self._roll_at(self._two_rolls_bonus).add_points(pins)
            self._one_roll_bonus = self._two_rolls_bonus
            self._two_rolls_bonus = None

        if not roll.bonus:
            if frame.is_strike():
                logger.debug("Strike in frame %d", index + 1)
                self._two_rolls_bonus = ref
            elif frame.is_spare():
                logger.debug("Spare in frame %d", index + 1)
                self._one_roll_bonus = ref

        if self.is_complete():
            logger.debug("Game complete with score %d", self.score())

    def score(self) -> int:
        return sum(f.points() for f in self._frames)

    def _roll_at(self, ref: RollRef) -> Roll:
        frame_index, roll_index = ref
        return self._frames[frame_index].rolls[roll_index]


def _coerce_pins(raw) -> int:
    if isinstance(raw, bool):
        raise InvalidInput("pins must be an integer (not a boolean)")
    if isinstance(raw, float) and not raw.is_integer():
        raise InvalidInput(f"pins must be a whole number, got {raw!r}")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InvalidInput(f"pins must be an integer, got {raw!r}")


def init_state(config: Dict) -> Dict:
    """Start a fresh game.

    Bowling rules are fixed, so ``config`` is kept only so summaries and
    stored match details look like every other engine's.
    """

    return {"config": dict(config or {}), "game": BowlingGame()}


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "ROLL":
        raise ValueError("invalid bowling event")
    if "pins" not in event:
        raise InvalidInput("ROLL event is missing pins")
    state["game"].roll(_coerce_pins(event["pins"]))
    return state


def summary(state: Dict) -> Dict:
    game: BowlingGame = state["game"]
    return {
        "frames": [[r.pins for r in f.rolls] for f in game.frames],
        "total": game.score(),
        "complete": game.is_complete(),
    }


def record_rolls(rolls: Iterable[int], state: Optional[Dict] = None):
    """Replay ``rolls`` as ROLL events.

    Returns the generated events and the resulting state, stopping at the
    first rejected roll by letting its error propagate.
    """

    state = state or init_state({})
    events = []
    for pins in rolls:
        ev = {"type": "ROLL", "pins": pins}
        state = apply(ev, state)
        events.append(ev)
    return events, state
