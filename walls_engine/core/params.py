from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

class Difficulty(Enum):
    EASY = ("Easy", "e")
    TRICKY = ("Tricky", "t")
    HARD = ("Hard", "h")

    def __init__(self, title: str, char: str):
        self.title = title
        self.char = char

    @classmethod
    def from_char(cls, char: str) -> "Difficulty":
        for diff in cls:
            if diff.char == char:
                return diff
        raise ValueError(f"Unknown difficulty level {char!r}")

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        for diff in cls:
            if name.lower() in (diff.title.lower(), diff.char):
                return diff
        raise ValueError(f"Unknown difficulty level {name!r}")

@dataclass(frozen=True)
class GameParams:
    width: int = 5
    height: int = 4
    difficulty: Difficulty = Difficulty.EASY

    @classmethod
    def decode(cls, string: str) -> "GameParams":
        """
        Parses "W", "WxH" or "WxHd<c>". A lone number is a square board;
        an unrecognised difficulty letter falls back to EASY.
        """
        width, rest = _take_int(string)
        height = width
        if rest.startswith("x"):
            height, rest = _take_int(rest[1:])

        difficulty = Difficulty.EASY
        if rest.startswith("d") and len(rest) > 1:
            try:
                difficulty = Difficulty.from_char(rest[1])
            except ValueError:
                # Unknown letters keep the default
                pass
        return cls(width, height, difficulty)

    def encode(self, full: bool = True) -> str:
        s = f"{self.width}x{self.height}"
        if full:
            s += f"d{self.difficulty.char}"
        return s

    def validate(self):
        if self.width < 2:
            raise ValueError("Width must be at least two")
        if self.height < 2:
            raise ValueError("Height must be at least two")
        if not isinstance(self.difficulty, Difficulty):
            raise ValueError("Unknown difficulty level")
        return self

    @property
    def name(self) -> str:
        return f"{self.width}x{self.height} {self.difficulty.title}"

PRESETS: Tuple[GameParams, ...] = (
    GameParams(5, 4, Difficulty.EASY),
    GameParams(4, 5, Difficulty.EASY),
)
DEFAULT_PRESET = 0

def default_params() -> GameParams:
    return PRESETS[DEFAULT_PRESET]

def preset_names() -> List[str]:
    return [p.name for p in PRESETS]

def _take_int(s: str) -> Tuple[int, str]:
    # atoi-style: leading digits, 0 when there are none
    i = 0
    while i < len(s) and s[i] in "0123456789":
        i += 1
    return (int(s[:i]) if i else 0), s[i:]
