from __future__ import annotations

import logging

from fastapi import APIRouter

from ..exceptions import RollRejected
from ..schemas import BowlingScoreOut, BowlingScoreRequest
from ..scoring import bowling

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bowling", tags=["bowling"])


# POST /api/v0/bowling/score
@router.post("/score", response_model=BowlingScoreOut)
def score_game(body: BowlingScoreRequest) -> BowlingScoreOut:
    """Score a single game from its rolls; nothing is stored."""
    state = bowling.init_state({})
    for position, pins in enumerate(body.rolls, start=1):
        try:
            state = bowling.apply({"type": "ROLL", "pins": pins}, state)
        except bowling.InvalidInput as exc:
            logger.info("Rejected roll #%d (%r): %s", position, pins, exc.detail)
            raise RollRejected(position, exc.detail, code="bowling_invalid_pins")
        except bowling.InvalidOperation as exc:
            logger.info("Rejected roll #%d (%r): %s", position, pins, exc.detail)
            raise RollRejected(position, exc.detail, code="bowling_illegal_roll")

    return BowlingScoreOut(**bowling.summary(state))
