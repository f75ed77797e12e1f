"""The two sides of an Othello game"""

from enum import Enum


class Player(Enum):
    BLACK = "b"
    WHITE = "w"

    @property
    def opponent(self) -> "Player":
        return Player.WHITE if self == Player.BLACK else Player.BLACK

    @classmethod
    def from_notation(cls, character: str) -> "Player":
        return cls(character.lower())

    def to_notation(self) -> str:
        return self.value
