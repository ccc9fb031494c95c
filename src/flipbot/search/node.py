from __future__ import annotations

from typing import Optional

from flipbot.othello.rules import Move


class Node:
    def __init__(self, move: Optional[Move], score: float = 0) -> None:
        # Move that led to this node, None for the root.
        self.move = move
        self.score = score
        self.children: list[Node] = []

    def __repr__(self) -> str:
        return f"Node({self.move}, {self.score}, children={len(self.children)})"

    def add_child(self, child: Node) -> None:
        self.children.append(child)

    def count_nodes(self) -> int:
        return 1 + sum(child.count_nodes() for child in self.children)
