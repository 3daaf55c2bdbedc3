"""Reincarnation simulator: a weighted draw of country and gender."""

from __future__ import annotations

import bisect
import json
import random
from itertools import accumulate
from pathlib import Path
from typing import Generic, Iterable, Tuple, TypeVar, Union

T = TypeVar("T")

WEIGHT_SCALE = 1e9
FAILURE_LIMIT = 1 << 27
FAILURE_TEXT = "投胎失败！\n您没能活到出生，祝您下次好运！"


class WeightedChooser(Generic[T]):
    """Draws items with probability proportional to their integer weights."""

    def __init__(self, choices: Iterable[Tuple[T, int]]) -> None:
        pairs = [(item, int(weight)) for item, weight in choices]
        if any(weight < 0 for _, weight in pairs):
            raise ValueError("weights must not be negative")
        self._items = [item for item, _ in pairs]
        self._totals = list(accumulate(weight for _, weight in pairs))
        if not self._totals or self._totals[-1] <= 0:
            raise ValueError("no choices with positive weight")

    def pick(self, rng: random.Random) -> T:
        """Draw one item."""
        r = rng.randint(1, self._totals[-1])
        return self._items[bisect.bisect_left(self._totals, r)]


GENDERS: WeightedChooser[str] = WeightedChooser(
    [("男孩子", 50707), ("女孩子", 48292), ("雌雄同体", 1001)]
)


def load_rates(path: Union[str, Path]) -> list[tuple[str, int]]:
    """Read ``[{"name": ..., "weight": ...}]`` and return weights scaled to integers."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return [(entry["name"], int(entry["weight"] * WEIGHT_SCALE)) for entry in data]


def reborn(countries: WeightedChooser[str], rng: random.Random) -> str:
    """Roll a new life and describe it."""
    if rng.randrange(1 << 31) > FAILURE_LIMIT:
        country = countries.pick(rng)
        gender = GENDERS.pick(rng)
        return f"投胎成功！\n您出生在 {country}, 是 {gender}。"
    return FAILURE_TEXT