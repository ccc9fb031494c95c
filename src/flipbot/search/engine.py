from __future__ import annotations

import logging
import random
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import Optional

from flipbot.config import ExecutorKind, SearchConfig, TieBreak
from flipbot.othello.board import CORNERS, Board, Color, opponent
from flipbot.othello.player import Player
from flipbot.othello.rules import Move, apply_move, enumerate_legal_moves
from flipbot.search.heuristic import Heuristic
from flipbot.search.node import Node

logger = logging.getLogger(__name__)

EXECUTORS: dict[ExecutorKind, type[Executor]] = {
    ExecutorKind.PROCESS: ProcessPoolExecutor,
    ExecutorKind.THREAD: ThreadPoolExecutor,
}


class SearchError(Exception):
    pass


def recurse(
    board: Board,
    color: Color,
    depth: int,
    bound: int,
    node: Node,
    heuristic: Heuristic,
) -> Node:
    """
    Expands every legal reply of `color` below `node` until `depth` exceeds
    `bound`. The score of `node` becomes its own score plus the summed scores
    of all its children. Nothing is pruned and nothing is cached.
    """

    if depth > bound:
        return node

    moves = enumerate_legal_moves(board, color)

    # No replies, this branch collapses into its current score.
    if not moves:
        return node

    for move in moves:
        child_board = apply_move(board.copy(), move, color)
        child = Node(move, heuristic.evaluate(child_board, move, color, depth + 1))
        node.add_child(
            recurse(child_board, opponent(color), depth + 1, bound, child, heuristic)
        )

    for child in node.children:
        node.score += child.score

    return node


def explore_root_move(
    board: Board, move: Move, color: Color, config: SearchConfig
) -> Node:
    # Runs inside an executor worker, so it only touches its own board copy.
    heuristic = Heuristic(config, color)
    child_board = apply_move(board.copy(), move, color)
    node = Node(move, heuristic.evaluate(child_board, move, color, 1))
    return recurse(child_board, opponent(color), 1, config.depth, node, heuristic)


class SearchEngine:
    def __init__(
        self,
        config: SearchConfig,
        executor_class: Optional[type[Executor]] = None,
    ) -> None:
        self.config = config
        self.executor_class = executor_class or EXECUTORS[config.executor]
        self.random = random.Random(config.seed)

    def select_move(self, board: Board, player: Player) -> Optional[Move]:
        moves = enumerate_legal_moves(board, player.color)

        if not moves:
            logger.info(f"{player.name()} has no moves and has to pass")
            return None

        root = self.search(board, player.color, moves)
        best = self.pick(root.children)

        assert best.move is not None
        logger.info(
            f"{player.name()} plays {Board.index_to_field(best.move.index)}"
            f" with score {best.score}"
        )
        return best.move

    def search(self, board: Board, color: Color, moves: list[Move]) -> Node:
        logger.info(
            f"Searching {len(moves)} root moves to depth {self.config.depth}"
        )

        root = Node(None)

        with self.executor_class(max_workers=self.config.max_workers) as executor:
            futures = [
                executor.submit(explore_root_move, board, move, color, self.config)
                for move in moves
            ]

            # Collect in submission order, so ties resolve in enumeration order.
            for move, future in zip(moves, futures):
                field = Board.index_to_field(move.index)
                try:
                    child = future.result()
                except Exception as e:
                    raise SearchError(f"Search for move {field} failed") from e

                logger.debug(
                    f"Move {field}: score {child.score}, {child.count_nodes()} nodes"
                )
                root.add_child(child)

        return root

    def pick(self, children: list[Node]) -> Node:
        if not children:
            raise ValueError("Cannot pick from zero children")

        if self.config.corner_shortcut:
            for child in children:
                assert child.move is not None
                if child.move.index in CORNERS:
                    return child

        best = children[0]

        for child in children[1:]:
            if child.score > best.score:
                best = child
            elif (
                child.score == best.score
                and self.config.tie_break == TieBreak.RANDOM
                and self.random.random() < 0.5
            ):
                best = child

        return best
