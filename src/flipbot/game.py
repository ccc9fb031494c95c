from __future__ import annotations

import typer
from typing import Any, Callable, Optional

from flipbot.arguments import Arguments
from flipbot.config import get_search_config
from flipbot.othello.board import BLACK, EMPTY, WHITE, Board, Color, opponent
from flipbot.othello.player import Player
from flipbot.othello.rules import (
    Move,
    apply_move,
    enumerate_legal_moves,
    is_game_end,
    tally,
)
from flipbot.search.engine import SearchEngine


class Game:
    def __init__(
        self,
        black: Player,
        white: Player,
        engine: SearchEngine,
        prompt: Callable[[str], Any] = typer.prompt,
        board: Optional[Board] = None,
    ) -> None:
        if black.color != BLACK or white.color != WHITE:
            raise ValueError("Players must be passed as black, white")

        self.players = {BLACK: black, WHITE: white}
        self.engine = engine
        self.prompt = prompt
        self.board = board or Board.start()
        self.turn = BLACK

        # Moves played so far, None is a pass.
        self.moves: list[Optional[Move]] = []

    @classmethod
    def from_arguments(cls, args: Arguments) -> Game:
        config = get_search_config(depth=args.search.depth)
        engine = SearchEngine(config)

        black = Player(BLACK, not args.players.human_black)
        white = Player(WHITE, not args.players.human_white)
        return Game(black, white, engine)

    def current_player(self) -> Player:
        return self.players[self.turn]

    def is_over(self) -> bool:
        return is_game_end(self.board)

    def play_turn(self) -> Optional[Move]:
        player = self.current_player()
        moves = enumerate_legal_moves(self.board, player.color)

        move: Optional[Move]
        if not moves:
            move = None
        elif player.automated:
            move = self.engine.select_move(self.board, player)
        else:
            move = self.ask_move(player, moves)

        if move is None:
            print(f"{player.name()} passes")
        else:
            apply_move(self.board, move, player.color)
            print(f"{player.name()} plays {Board.index_to_field(move.index)}")

        self.moves.append(move)
        self.turn = opponent(self.turn)
        return move

    def ask_move(self, player: Player, moves: list[Move]) -> Move:
        moves_by_index = {move.index: move for move in moves}

        while True:
            self.board.show(moves_by_index.keys())
            print(f"Valid moves: {Board.indexes_to_fields(moves_by_index.keys())}")

            answer = str(self.prompt(f"{player.name()} to move")).strip()

            try:
                index = self.parse_move(answer)
            except ValueError as e:
                print(f"Error: {e}")
                continue

            try:
                return moves_by_index[index]
            except KeyError:
                print(f'Invalid move "{answer}"')

    @staticmethod
    def parse_move(answer: str) -> int:
        if answer.isdigit():
            index = int(answer)
            if index not in range(64):
                raise ValueError(f"Index {index} is not on the board")
            return index

        return Board.field_to_index(answer)

    def winner(self) -> Color:
        black, white = tally(self.board)

        if black > white:
            return BLACK
        if white > black:
            return WHITE
        return EMPTY

    def run(self) -> Color:
        self.board.show()

        while not self.is_over():
            self.play_turn()
            self.board.show()

        black, white = tally(self.board)
        winner = self.winner()

        print(f"Game over: black {black}, white {white}")
        if winner == EMPTY:
            print("Draw!")
        else:
            print(f"{self.players[winner].name()} wins!")

        return winner
