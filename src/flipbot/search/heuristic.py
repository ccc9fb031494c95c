from __future__ import annotations

from flipbot.config import SearchConfig
from flipbot.othello.board import CORNERS, Board, Color, check_color, opponent
from flipbot.othello.rules import Move


class Heuristic:
    """
    Scores a position right after `mover` played `move`.

    Scores are always from the perspective of the searching bot: positive
    values favour the bot, negative values favour its opponent. Positions
    further from the root are divided by `ply ** depth_exponent`.
    """

    def __init__(self, config: SearchConfig, bot_color: Color) -> None:
        check_color(bot_color)

        self.corner_bonus = config.corner_bonus
        self.depth_exponent = config.depth_exponent
        self.zero_disc_bonus = config.zero_disc_bonus
        self.bot_color = bot_color

    def evaluate(self, board: Board, move: Move, mover: Color, ply: int) -> float:
        if ply < 1:
            raise ValueError(f"Ply must be at least 1, got {ply}")

        own = board.count(mover)
        opp = board.count(opponent(mover))

        score = float(own - opp)

        if move.index in CORNERS:
            score += self.corner_bonus

        if opp == 0:
            score += self.zero_disc_bonus

        if mover != self.bot_color:
            score = -score

        return score / (ply**self.depth_exponent)
