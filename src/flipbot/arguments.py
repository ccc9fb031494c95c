from __future__ import annotations

from typing import Optional


class PlayerArguments:
    def __init__(self, human_black: bool, human_white: bool) -> None:
        self.human_black = human_black
        self.human_white = human_white


class SearchArguments:
    def __init__(self, depth: Optional[int]) -> None:
        self.depth = depth


class Arguments:
    def __init__(self, players: PlayerArguments, search: SearchArguments) -> None:
        self.players = players
        self.search = search

    @classmethod
    def empty(cls) -> Arguments:
        return Arguments(
            PlayerArguments(False, False),
            SearchArguments(None),
        )
