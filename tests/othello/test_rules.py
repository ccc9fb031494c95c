import pytest

from flipbot.othello.board import BLACK, EMPTY, WHITE, Board, Color, InvalidColor
from flipbot.othello.rules import (
    InvalidMove,
    Move,
    apply_move,
    enumerate_legal_moves,
    has_moves,
    is_game_end,
    tally,
)

EMPTY_ROWS = "--------" * 5

# Black on a1 captures in three directions at once.
BOARD_MULTI_LINE = Board.from_string("-OX-----" "OO------" "X-X-----" + EMPTY_ROWS)

# Only move for black is f4, only move for white is c4.
BOARD_SINGLE_MOVE = Board.from_string("-" * 27 + "XO" + "-" * 35)

# A run of white discs on a2, black on b2: black on h1 would only capture by
# wrapping around the edge of the board.
BOARD_WRAP_AROUND = Board.from_string("--------" "OX------" + "--------" * 6)

# White run ending in an empty square.
BOARD_RUN_TO_EMPTY = Board.from_string("-OO-X---" + "--------" * 7)

# White run ending at the edge of the board.
BOARD_RUN_TO_EDGE = Board.from_string("-OOOOOOO" "X-------" + "--------" * 6)


def get_move(moves: list[Move], index: int) -> Move:
    for move in moves:
        if move.index == index:
            return move
    raise KeyError(index)


@pytest.mark.parametrize(
    ["board", "color", "expected"],
    [
        pytest.param(Board.start(), BLACK, [19, 26, 37, 44], id="start-black"),
        pytest.param(Board.start(), WHITE, [20, 29, 34, 43], id="start-white"),
        pytest.param(
            apply_move(Board.start(), Move(19, [[27]]), BLACK),
            WHITE,
            [18, 20, 34],
            id="after-one-move",
        ),
        pytest.param(BOARD_SINGLE_MOVE, BLACK, [29], id="single-move-black"),
        pytest.param(BOARD_SINGLE_MOVE, WHITE, [26], id="single-move-white"),
        pytest.param(Board.empty(), BLACK, [], id="empty"),
        pytest.param(Board.from_string("X" * 64), WHITE, [], id="full"),
        pytest.param(BOARD_WRAP_AROUND, BLACK, [], id="no-wrap-around"),
        pytest.param(BOARD_RUN_TO_EMPTY, BLACK, [], id="run-to-empty"),
        pytest.param(BOARD_RUN_TO_EDGE, BLACK, [], id="run-to-edge"),
    ],
)
def test_enumerate_legal_moves(board: Board, color: Color, expected: list[int]) -> None:
    moves = enumerate_legal_moves(board, color)
    assert [move.index for move in moves] == expected


def test_start_moves_flip_one_disc() -> None:
    moves = enumerate_legal_moves(Board.start(), BLACK)

    assert [move.flip_count() for move in moves] == [1, 1, 1, 1]
    assert get_move(moves, 19).flipped() == [27]
    assert get_move(moves, 26).flipped() == [27]
    assert get_move(moves, 37).flipped() == [36]
    assert get_move(moves, 44).flipped() == [36]


def test_multi_line_move() -> None:
    moves = enumerate_legal_moves(BOARD_MULTI_LINE, BLACK)
    move = get_move(moves, 0)

    assert len(move.flip_lines) == 3
    assert sorted(move.flipped()) == [1, 8, 9]


def test_long_flip_line() -> None:
    board = Board.from_string("-OOOOOOX" + "--------" * 7)
    moves = enumerate_legal_moves(board, BLACK)

    assert len(moves) == 1
    assert moves[0].flip_lines == [[1, 2, 3, 4, 5, 6]]


@pytest.mark.parametrize(
    ["board", "color"],
    [
        pytest.param(Board.start(), BLACK, id="start-black"),
        pytest.param(Board.start(), WHITE, id="start-white"),
        pytest.param(BOARD_MULTI_LINE, BLACK, id="multi-line-black"),
        pytest.param(BOARD_MULTI_LINE, WHITE, id="multi-line-white"),
    ],
)
def test_moves_are_on_empty_squares_and_flip(board: Board, color: Color) -> None:
    for move in enumerate_legal_moves(board, color):
        assert board.get_square(move.index) == EMPTY
        assert move.flip_lines
        assert all(move.flip_lines)


def test_enumerate_legal_moves_empty_color() -> None:
    with pytest.raises(InvalidColor):
        enumerate_legal_moves(Board.start(), EMPTY)


@pytest.mark.parametrize(
    ["board", "color"],
    [
        pytest.param(Board.start(), BLACK, id="start-black"),
        pytest.param(Board.start(), WHITE, id="start-white"),
        pytest.param(BOARD_MULTI_LINE, BLACK, id="multi-line-black"),
        pytest.param(BOARD_SINGLE_MOVE, WHITE, id="single-move-white"),
    ],
)
def test_apply_move_tally(board: Board, color: Color) -> None:
    old_black, old_white = tally(board)

    for move in enumerate_legal_moves(board, color):
        child = apply_move(board.copy(), move, color)
        new_black, new_white = tally(child)

        flipped = move.flip_count()
        if color == BLACK:
            assert new_black == old_black + 1 + flipped
            assert new_white == old_white - flipped
        else:
            assert new_white == old_white + 1 + flipped
            assert new_black == old_black - flipped


def test_apply_move_sets_squares() -> None:
    board = BOARD_MULTI_LINE.copy()
    move = get_move(enumerate_legal_moves(board, BLACK), 0)

    result = apply_move(board, move, BLACK)

    # The board is mutated in place.
    assert result is board
    for index in [0, 1, 2, 8, 9, 16, 18]:
        assert board.get_square(index) == BLACK
    assert board.tally() == (7, 0)


def test_apply_move_deterministic() -> None:
    move = enumerate_legal_moves(Board.start(), BLACK)[0]

    first = apply_move(Board.start(), move, BLACK)
    second = apply_move(Board.start(), move, BLACK)

    assert first == second


def test_apply_move_occupied() -> None:
    with pytest.raises(InvalidMove):
        apply_move(Board.start(), Move(27, [[28]]), BLACK)


def test_apply_move_empty_color() -> None:
    move = enumerate_legal_moves(Board.start(), BLACK)[0]

    with pytest.raises(InvalidColor):
        apply_move(Board.start(), move, EMPTY)


@pytest.mark.parametrize(
    ["flip_lines"],
    [
        pytest.param([], id="no-lines"),
        pytest.param([[]], id="empty-line"),
    ],
)
def test_move_without_flips(flip_lines: list[list[int]]) -> None:
    with pytest.raises(InvalidMove):
        Move(19, flip_lines)


def test_move_invalid_index() -> None:
    with pytest.raises(ValueError):
        Move(64, [[1]])


def test_move_equality() -> None:
    assert Move(19, [[27]]) == Move(19, [[27]])
    assert Move(19, [[27]]) != Move(26, [[27]])

    with pytest.raises(TypeError):
        Move(19, [[27]]) == 19


def test_has_moves() -> None:
    assert has_moves(Board.start(), BLACK)
    assert not has_moves(Board.empty(), WHITE)


def test_game_end() -> None:
    assert is_game_end(Board.empty())
    assert is_game_end(Board.from_string("X" * 64))
    assert not is_game_end(Board.start())


def test_game_end_one_side_can_move() -> None:
    # Black has no moves, but white can still play c1.
    board = Board.from_string("OX------" + "--------" * 7)

    assert not has_moves(board, BLACK)
    assert has_moves(board, WHITE)
    assert not is_game_end(board)
