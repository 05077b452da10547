"""
Menu data structures for the Parsing context.

Provides the immutable Menu model produced by feed_parser.parse_menu():
Menu -> MenuDay -> MealGroup -> Meal, plus the two closed tag enumerations.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class MealInformation(Enum):
    """Dietary markers. Values are the letter codes used in meal names."""

    MIT_ALKOHOL = "A"
    MIT_FISCH = "F"
    MIT_GEFLUEGEL = "G"
    HALAL = "H"
    MIT_LAMM = "L"
    MIT_RIND = "R"
    MIT_SCHWEIN = "S"
    VEGETARISCH = "V"
    VEGAN = "VG"
    MIT_WILD = "W"

    @classmethod
    def from_code(cls, code: str) -> Optional["MealInformation"]:
        """Look up a marker by its code, None if the code is unknown."""
        try:
            return cls(code)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return INFORMATION_LABELS[self]


class MealAdditive(Enum):
    """Declared food additives. Values are the numeric codes used in meal names."""

    MIT_FARBSTOFF = "1"
    MIT_KONSERVIERUNGSSTOFF = "2"
    MIT_ANTIOXIDATIONSMITTEL = "3"
    MIT_GESCHMACKSVERSTAERKER = "4"
    GESCHWEFELT = "5"
    GESCHWAERZT = "6"
    GEWACHST = "7"
    MIT_PHOSPHAT = "8"
    MIT_SUESSUNGSMITTELN = "9"
    ENTHAELT_EINE_PHENYLALANINQUELLE = "10"
    KANN_BEI_UEBERMAESSIGEM_KONSUM_ABFUEHREND_WIRKEN = "11"
    KOFFEINHALTIG = "12"
    CHININHALTIG = "13"

    @classmethod
    def from_code(cls, code: str) -> Optional["MealAdditive"]:
        """Look up an additive by its code, None if the code is unknown."""
        try:
            return cls(code)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return ADDITIVE_LABELS[self]


INFORMATION_LABELS = {
    MealInformation.MIT_ALKOHOL: "mit Alkohol",
    MealInformation.MIT_FISCH: "mit Fisch",
    MealInformation.MIT_GEFLUEGEL: "mit Geflügel",
    MealInformation.HALAL: "Halal",
    MealInformation.MIT_LAMM: "mit Lamm",
    MealInformation.MIT_RIND: "mit Rind",
    MealInformation.MIT_SCHWEIN: "mit Schwein",
    MealInformation.VEGETARISCH: "vegetarisch",
    MealInformation.VEGAN: "vegan",
    MealInformation.MIT_WILD: "mit Wild",
}

ADDITIVE_LABELS = {
    MealAdditive.MIT_FARBSTOFF: "mit Farbstoff",
    MealAdditive.MIT_KONSERVIERUNGSSTOFF: "mit Konservierungsstoff",
    MealAdditive.MIT_ANTIOXIDATIONSMITTEL: "mit Antioxidationsmittel",
    MealAdditive.MIT_GESCHMACKSVERSTAERKER: "mit Geschmacksverstärker",
    MealAdditive.GESCHWEFELT: "geschwefelt",
    MealAdditive.GESCHWAERZT: "geschwärzt",
    MealAdditive.GEWACHST: "gewachst",
    MealAdditive.MIT_PHOSPHAT: "mit Phosphat",
    MealAdditive.MIT_SUESSUNGSMITTELN: "mit Süßungsmitteln",
    MealAdditive.ENTHAELT_EINE_PHENYLALANINQUELLE: "enthält eine Phenylalaninquelle",
    MealAdditive.KANN_BEI_UEBERMAESSIGEM_KONSUM_ABFUEHREND_WIRKEN: (
        "kann bei übermäßigem Konsum abführend wirken"
    ),
    MealAdditive.KOFFEINHALTIG: "koffeinhaltig",
    MealAdditive.CHININHALTIG: "chininhaltig",
}


@dataclass(frozen=True)
class Meal:
    """A single dish with its tags and both prices."""

    name: str
    information: frozenset[MealInformation] = field(default_factory=frozenset)
    additives: frozenset[MealAdditive] = field(default_factory=frozenset)
    price_student: float = 0.0
    price: float = 0.0


@dataclass(frozen=True)
class MealGroup:
    """Named subsection of a day's menu (e.g. a serving line)."""

    title: str
    meals: tuple[Meal, ...] = ()


@dataclass(frozen=True)
class MenuDay:
    """Menu for one calendar day, built from one feed entry."""

    id: str
    date: date
    updated: datetime
    title: str
    meal_groups: tuple[MealGroup, ...] = ()


@dataclass(frozen=True)
class Menu:
    """
    One complete feed snapshot.

    Day menus keep feed order. Produced by feed_parser.parse_menu();
    never mutated afterwards.
    """

    title: str
    id: str
    updated: datetime
    day_menus: tuple[MenuDay, ...] = ()

    @property
    def dates(self) -> tuple[date, ...]:
        return tuple(day.date for day in self.day_menus)

    def get_day(self, day: date) -> Optional[MenuDay]:
        """
        Find the menu for a calendar day.

        Args:
            day: Date to look up

        Returns:
            First MenuDay with that date, or None if the feed does not cover it
        """
        for menu_day in self.day_menus:
            if menu_day.date == day:
                return menu_day
        return None
