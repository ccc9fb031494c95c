from __future__ import annotations

from flipbot.othello.board import BLACK, Color, check_color, opponent


class Player:
    def __init__(self, color: Color, automated: bool) -> None:
        check_color(color)

        self.color = color
        self.automated = automated

    @classmethod
    def bot(cls, color: Color) -> Player:
        return Player(color, True)

    @classmethod
    def human(cls, color: Color) -> Player:
        return Player(color, False)

    def __repr__(self) -> str:
        return f"Player({self.color}, automated={self.automated})"

    def opponent_color(self) -> Color:
        return opponent(self.color)

    def name(self) -> str:
        if self.color == BLACK:
            return "Black"
        return "White"
