"""
Run-length text form of a wall layout.

A decimal number is a run of present walls. A letter 'a'..'z' is a run of
1..26 absent walls; every letter except 'z' also stands for one present
wall right after the run, unless the descriptor ends there.
"""
from itertools import groupby
from typing import List, Sequence

class DescriptorError(ValueError):
    pass

DIGITS = "0123456789"
MAX_LETTER_RUN = 26

def encode_walls(walls: Sequence[bool]) -> str:
    out = []
    absorbed = False  # previous letter already stands for one present wall
    for present, group in groupby(bool(w) for w in walls):
        run = sum(1 for _ in group)
        if present:
            if absorbed:
                run -= 1
            if run > 0:
                out.append(str(run))
            absorbed = False
        else:
            full, rest = divmod(run, MAX_LETTER_RUN)
            out.append("z" * full)
            if rest:
                out.append(chr(ord("a") + rest - 1))
            absorbed = rest > 0
    return "".join(out)

def count_walls(desc: str, wall_count: int) -> int:
    """
    Number of wall segments `desc` describes, as used by validation.

    A non-'z' letter counts its implied present wall; when that letter is
    the last character and the total is exactly one over `wall_count`,
    the implied wall is not counted.
    """
    total = 0
    i = 0
    while i < len(desc):
        c = desc[i]
        if c in DIGITS:
            j = i
            while j < len(desc) and desc[j] in DIGITS:
                j += 1
            total += int(desc[i:j])
            i = j
        elif "a" <= c <= "z":
            total += ord(c) - ord("a") + 1 + (1 if c != "z" else 0)
            i += 1
            if i == len(desc) and total == wall_count + 1:
                total -= 1
        else:
            raise DescriptorError("Faulty game description")
    return total

def validate_descriptor(desc: str, wall_count: int):
    total = count_walls(desc, wall_count)
    if total < wall_count:
        raise DescriptorError("Too few walls in game description")
    if total > wall_count:
        raise DescriptorError("Too many walls in game description")

def decode_walls(desc: str, wall_count: int) -> List[bool]:
    """Validates `desc` and expands it to one bool per wall segment."""
    validate_descriptor(desc, wall_count)

    walls: List[bool] = []
    i = 0
    while i < len(desc):
        c = desc[i]
        if c in DIGITS:
            j = i
            while j < len(desc) and desc[j] in DIGITS:
                j += 1
            walls.extend([True] * int(desc[i:j]))
            i = j
        else:
            walls.extend([False] * (ord(c) - ord("a") + 1))
            if c != "z" and len(walls) < wall_count:
                walls.append(True)
            i += 1
    return walls
