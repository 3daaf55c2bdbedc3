"""Tarot deck: single and multiple draws, card lookup and spreads."""

from __future__ import annotations

import json
import random
from dataclasses import dataclass, field
from typing import Mapping, Optional, Union

IMAGE_BASE = "https://gitcode.net/shudorcl/zbp-tarot/-/raw/master/"
REVERSE_DIR = "Reverse/"
MAJOR_COUNT = 22
MINOR_COUNT = 55
ALL_COUNT = 77
MAX_DRAW = 20
POSITIONS = ("『正位』", "『逆位』")
REASONS = ("您抽到的是~\n", "锵锵锵，塔罗牌的预言是~\n", "诶，让我看看您抽到了~\n")
MINOR_HINT = "[圣杯|星币|宝剑|权杖] [0-10|侍从|骑士|王后|国王]"

JsonText = Union[str, bytes]


@dataclass(frozen=True)
class Card:
    """One tarot card with its upright and reversed meanings."""

    name: str
    description: str = ""
    reverse_description: str = ""
    img_url: str = ""


@dataclass(frozen=True)
class Formation:
    """A spread: how many cards and what each position represents."""

    cards_num: int
    is_cut: bool = False
    represent: list[list[str]] = field(default_factory=list)


@dataclass(frozen=True)
class Draw:
    """A drawn card, upright or reversed."""

    card: Card
    reversed: bool

    @property
    def position(self) -> str:
        """Label of the card's orientation."""
        return POSITIONS[int(self.reversed)]

    @property
    def description(self) -> str:
        """Meaning that applies to the card's orientation."""
        return self.card.reverse_description if self.reversed else self.card.description

    @property
    def image_url(self) -> str:
        """Where the picture of the card in this orientation lives."""
        prefix = REVERSE_DIR if self.reversed else ""
        return IMAGE_BASE + prefix + self.card.img_url

    @property
    def image_name(self) -> str:
        """Cache name of the card's picture in this orientation."""
        return ("Reverse" + self.card.name) if self.reversed else self.card.name

    @property
    def text(self) -> str:
        """Orientation, name and meaning, as shown to the user."""
        return f"{self.position}的『{self.card.name}』\n其释义为: {self.description}"


def _range_of(kind: str, allow_mixed: bool) -> tuple[int, int]:
    if "小" in kind:
        return MAJOR_COUNT, MINOR_COUNT
    if allow_mixed and kind == "混合":
        return 0, ALL_COUNT
    return 0, MAJOR_COUNT


class TarotDeck:
    """Cards keyed by their index as a string ("0".."76") and named spreads."""

    def __init__(
        self, cards: Mapping[str, Card], formations: Mapping[str, Formation]
    ) -> None:
        self.cards = dict(cards)
        self.formations = dict(formations)
        self._by_name = {card.name: card for card in self.cards.values()}

    @classmethod
    def from_json(cls, cards_json: JsonText, formations_json: JsonText) -> "TarotDeck":
        """Build a deck from the card and formation JSON documents."""
        raw_cards = json.loads(cards_json)
        raw_formations = json.loads(formations_json)
        cards = {}
        for key, entry in raw_cards.items():
            info = entry.get("info", {})
            cards[key] = Card(
                name=entry.get("name", ""),
                description=info.get("description", ""),
                reverse_description=info.get("reverseDescription", ""),
                img_url=info.get("imgUrl", ""),
            )
        formations = {
            name: Formation(
                cards_num=int(entry.get("cards_num", 0)),
                is_cut=bool(entry.get("is_cut", False)),
                represent=[list(row) for row in entry.get("represent", [])],
            )
            for name, entry in raw_formations.items()
        }
        return cls(cards, formations)

    def _card(self, index: int) -> Card:
        return self.cards.get(str(index), Card(name=""))

    def _draw_unique(self, count: int, start: int, length: int, rng: random.Random) -> list[Draw]:
        if count > length:
            raise ValueError("抽取张数过多")
        draws = []
        for j in rng.sample(range(length), count):
            draws.append(Draw(self._card(j + start), rng.randrange(2) == 1))
        return draws

    def draw(self, n: int, kind: str, rng: random.Random) -> list[Draw]:
        """Draw ``n`` distinct cards of ``kind`` (anything with 小 means minor arcana)."""
        if n <= 0:
            raise ValueError("张数必须为正")
        if n > MAX_DRAW:
            raise ValueError("抽取张数过多")
        start, length = _range_of(kind, allow_mixed=False)
        if n == 1:
            index = rng.randrange(length) + start
            return [Draw(self._card(index), rng.randrange(2) == 1)]
        return self._draw_unique(n, start, length, rng)

    def lookup(self, name: str) -> Optional[Card]:
        """The card called ``name``, or None."""
        return self._by_name.get(name)

    def major_arcana_names(self) -> list[str]:
        """Names of the 22 major arcana in order."""
        return [self._card(i).name for i in range(MAJOR_COUNT)]

    def card_list_text(self) -> str:
        """Overview of the card names, shown when a lookup fails."""
        major = self.major_arcana_names()
        return (
            "塔罗牌列表\n大阿尔卡纳:\n"
            + " ".join(major[:7])
            + "\n"
            + " ".join(major[7:14])
            + "\n"
            + " ".join(major[14:22])
            + "\n小阿尔卡纳:\n"
            + MINOR_HINT
        )

    def spread(self, kind: str, name: str, rng: random.Random) -> list[tuple[str, Draw]]:
        """Lay out spread ``name``; return each position's meaning with its card.

        Raises ``LookupError`` naming the known spreads when ``name`` is unknown.
        """
        formation = self.formations.get(name)
        if formation is None:
            raise LookupError(
                f"没有找到{name}噢~\n现有牌阵列表: \n" + "\n".join(self.formations)
            )
        start, length = _range_of(kind, allow_mixed=True)
        draws = self._draw_unique(formation.cards_num, start, length, rng)
        labels = formation.represent[0] if formation.represent else []
        return [
            (labels[i] if i < len(labels) else "", draw) for i, draw in enumerate(draws)
        ]


def parse_draw_count(text: str) -> int:
    """Number in a count like ``3张``; an empty count means one card."""
    if not text:
        return 1
    digits = text[:-1] if text.endswith("张") else text
    if not digits.isdigit():
        raise ValueError(f"invalid card count {text!r}")
    return int(digits)