from __future__ import annotations

from flipbot.othello.board import (
    BLACK,
    EMPTY,
    WHITE,
    Board,
    Color,
    check_color,
    opponent,
)

DIRECTIONS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]


class InvalidMove(Exception):
    pass


class Move:
    """
    Move is a legal target square together with the runs of opponent discs
    it captures, one run per direction.
    """

    def __init__(self, index: int, flip_lines: list[list[int]]) -> None:
        if index not in range(64):
            raise ValueError(f"Invalid index {index}")

        if not flip_lines or not all(flip_lines):
            raise InvalidMove(f"Move on {index} does not flip any discs")

        self.index = index
        self.flip_lines = flip_lines

    def __repr__(self) -> str:
        return f"Move({Board.index_to_field(self.index)}, {self.flip_lines})"

    def flipped(self) -> list[int]:
        return [index for line in self.flip_lines for index in line]

    def flip_count(self) -> int:
        return sum(len(line) for line in self.flip_lines)

    def as_tuple(self) -> tuple[int, tuple[tuple[int, ...], ...]]:
        return (self.index, tuple(tuple(line) for line in self.flip_lines))

    def __hash__(self) -> int:  # pragma: nocover
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            raise TypeError(f"Cannot compare Move with {type(other)}")

        return self.as_tuple() == other.as_tuple()


def get_flip_line(
    board: Board, index: int, dx: int, dy: int, color: Color
) -> list[int]:
    opp = opponent(color)
    line: list[int] = []

    x = index % 8 + dx
    y = index // 8 + dy

    while 0 <= x < 8 and 0 <= y < 8:
        square = board.squares[8 * y + x]

        if square == opp:
            line.append(8 * y + x)
        elif square == color:
            return line
        else:
            return []

        x += dx
        y += dy

    # Ran off the board without finding an own disc.
    return []


def get_flip_lines(board: Board, index: int, color: Color) -> list[list[int]]:
    flip_lines: list[list[int]] = []

    for dx, dy in DIRECTIONS:
        line = get_flip_line(board, index, dx, dy, color)
        if line:
            flip_lines.append(line)

    return flip_lines


def enumerate_legal_moves(board: Board, color: Color) -> list[Move]:
    check_color(color)

    moves: list[Move] = []

    for index in range(64):
        if board.squares[index] != EMPTY:
            continue

        flip_lines = get_flip_lines(board, index, color)
        if flip_lines:
            moves.append(Move(index, flip_lines))

    return moves


def apply_move(board: Board, move: Move, color: Color) -> Board:
    check_color(color)

    if board.squares[move.index] != EMPTY:
        raise InvalidMove(f"Square {Board.index_to_field(move.index)} is occupied")

    board.squares[move.index] = color
    for index in move.flipped():
        board.squares[index] = color

    return board


def tally(board: Board) -> tuple[int, int]:
    return board.tally()


def has_moves(board: Board, color: Color) -> bool:
    check_color(color)

    for index in range(64):
        if board.squares[index] == EMPTY and get_flip_lines(board, index, color):
            return True
    return False


def is_game_end(board: Board) -> bool:
    return not (has_moves(board, BLACK) or has_moves(board, WHITE))
