"""Score bookkeeping."""

from __future__ import annotations

import logging

from snake_controller.events import Event, LooseInd, ScoreInd

logger = logging.getLogger(__name__)


class ScoreKeeper:
    """Score port counting eaten food and recording a lost round."""

    def __init__(self) -> None:
        self.score = 0
        self.lost = False

    def send(self, event: Event) -> None:
        if isinstance(event, ScoreInd):
            self.score += 1
        elif isinstance(event, LooseInd):
            if not self.lost:
                logger.info("Round lost with score %d.", self.score)
            self.lost = True
        else:
            raise TypeError(
                f"Score keeper cannot handle {type(event).__name__}.",
            )

    def reset(self) -> None:
        self.score = 0
        self.lost = False

    def to_dict(self) -> dict:
        return {"score": self.score, "lost": self.lost}
