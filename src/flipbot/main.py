import logging
import typer
from typing import Annotated, Optional

from flipbot.arguments import Arguments, PlayerArguments, SearchArguments
from flipbot.config import get_search_config, get_verbose
from flipbot.game import Game
from flipbot.othello.board import BLACK, WHITE, Board
from flipbot.othello.player import Player
from flipbot.othello.rules import enumerate_legal_moves
from flipbot.search.engine import SearchEngine

app = typer.Typer(pretty_exceptions_enable=False)


@app.callback()
def setup_logging() -> None:
    if get_verbose():
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level, format="[%(asctime)s] %(name)s: %(message)s", datefmt="%H:%M:%S"
    )


@app.command()
def play(
    human_black: Annotated[bool, typer.Option("--human-black", "-b")] = False,
    human_white: Annotated[bool, typer.Option("--human-white", "-w")] = False,
    depth: Annotated[Optional[int], typer.Option("--depth", "-d", min=0)] = None,
) -> None:
    players = PlayerArguments(human_black, human_white)
    search = SearchArguments(depth)
    args = Arguments(players, search)

    Game.from_arguments(args).run()


@app.command()
def suggest(
    board_string: Annotated[str, typer.Argument()],
    white_turn: Annotated[bool, typer.Option("--white", "-w")] = False,
    depth: Annotated[Optional[int], typer.Option("--depth", "-d", min=0)] = None,
) -> None:
    try:
        board = Board.from_string(board_string)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    if white_turn:
        player = Player.bot(WHITE)
    else:
        player = Player.bot(BLACK)

    moves = enumerate_legal_moves(board, player.color)
    board.show(move.index for move in moves)

    engine = SearchEngine(get_search_config(depth=depth))
    move = engine.select_move(board, player)

    if move is None:
        print("pass")
    else:
        print(Board.index_to_field(move.index))


if __name__ == "__main__":
    app()
