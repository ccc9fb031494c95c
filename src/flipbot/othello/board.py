from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

CORNERS = (0, 7, 56, 63)


class InvalidColor(Exception):
    pass


class Color(Enum):
    BLACK = "X"
    WHITE = "O"
    EMPTY = "-"


BLACK = Color.BLACK
WHITE = Color.WHITE
EMPTY = Color.EMPTY


def opponent(color: Color) -> Color:
    if color == BLACK:
        return WHITE
    if color == WHITE:
        return BLACK
    raise InvalidColor(f"No opponent for {color!r}")


def check_color(color: Color) -> None:
    if color not in (BLACK, WHITE):
        raise InvalidColor(f"Expected BLACK or WHITE, got {color!r}")


class Board:
    """
    Board stores the 64 squares of an othello board in row-major order.
    It does not store whose turn it is, the game loop keeps track of that.
    """

    def __init__(self, squares: list[Color]) -> None:
        if len(squares) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(squares)}")

        self.squares = squares

    @classmethod
    def start(cls) -> Board:
        board = cls.empty()
        board.squares[27] = WHITE
        board.squares[28] = BLACK
        board.squares[35] = BLACK
        board.squares[36] = WHITE
        return board

    @classmethod
    def empty(cls) -> Board:
        return Board([EMPTY] * 64)

    @classmethod
    def from_string(cls, string: str) -> Board:
        string = "".join(string.split()).replace(".", "-")

        if len(string) != 64:
            raise ValueError(f"Board string must be 64 characters, got {len(string)}")

        squares: list[Color] = []
        for char in string.upper():
            try:
                squares.append(Color(char))
            except ValueError:
                raise ValueError(f'Invalid square "{char}"') from None

        return Board(squares)

    def to_string(self) -> str:
        return "".join(square.value for square in self.squares)

    def __repr__(self) -> str:
        return f"Board({self.to_string()})"

    def copy(self) -> Board:
        return Board(list(self.squares))

    def get_square(self, index: int) -> Color:
        if index not in range(64):
            raise ValueError(f"Invalid index {index}")
        return self.squares[index]

    def set_square(self, index: int, color: Color) -> None:
        if index not in range(64):
            raise ValueError(f"Invalid index {index}")
        self.squares[index] = color

    def tally(self) -> tuple[int, int]:
        black = 0
        white = 0
        for square in self.squares:
            if square == BLACK:
                black += 1
            elif square == WHITE:
                white += 1
        return black, white

    def count(self, color: Color) -> int:
        return self.squares.count(color)

    def count_discs(self) -> int:
        return 64 - self.count_empties()

    def count_empties(self) -> int:
        return self.count(EMPTY)

    def show(self, moves: Optional[Iterable[int]] = None) -> None:
        marked = set(moves or [])

        print("+-a-b-c-d-e-f-g-h-+")
        for y in range(8):
            print("{} ".format(y + 1), end="")

            for x in range(8):
                index = (y * 8) + x
                square = self.squares[index]

                if square == BLACK:
                    print("○ ", end="")
                elif square == WHITE:
                    print("● ", end="")
                elif index in marked:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    @classmethod
    def index_to_field(cls, index: int) -> str:
        if index not in range(64):
            raise ValueError
        return "abcdefgh"[index % 8] + "12345678"[index // 8]

    @classmethod
    def indexes_to_fields(cls, indexes: Iterable[int]) -> str:
        return " ".join(cls.index_to_field(index) for index in indexes)

    @classmethod
    def field_to_index(cls, field: str) -> int:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        x = ord(field[0]) - ord("a")
        y = ord(field[1]) - ord("1")
        return y * 8 + x

    def as_tuple(self) -> tuple[Color, ...]:
        return tuple(self.squares)

    def __hash__(self) -> int:  # pragma: nocover
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()
