"""
Plain-text formatting for parsed menus.

Produces the layout used by the command-line printer:

    Menü für den 15.01.2023
    -----------------------
        Tagesgericht
        - Schnitzel (3,50€ - 5,00€) [mit Schwein; mit Farbstoff, mit Antioxidationsmittel]
"""

from typing import List

from akafo.contexts.parsing.menu_data_structure import (
    Meal,
    MealAdditive,
    MealInformation,
    Menu,
    MenuDay,
)
from akafo.utils.timestamp import format_date

DAY_RULE = "-" * 23
INDENT = "    "


def format_price(value: float) -> str:
    """Format a price with a decimal comma, e.g. 3.5 -> '3,50€'."""
    return f"{value:.2f}".replace(".", ",") + "€"


def _sorted_labels(tags, enum_cls) -> List[str]:
    # Sets have no order; list tags in declaration order
    order = list(enum_cls)
    return [tag.label for tag in sorted(tags, key=order.index)]


def format_meal(meal: Meal) -> str:
    """Format one meal as a list line."""
    line = f"- {meal.name} ({format_price(meal.price_student)} - {format_price(meal.price)})"

    information = _sorted_labels(meal.information, MealInformation)
    additives = _sorted_labels(meal.additives, MealAdditive)
    tag_parts = [", ".join(labels) for labels in (information, additives) if labels]
    if tag_parts:
        line += f" [{'; '.join(tag_parts)}]"

    return line


def format_menu_day(menu_day: MenuDay) -> str:
    """Format a day's menu: header, rule, then each group with its meals."""
    lines = [f"Menü für den {format_date(menu_day.date)}", DAY_RULE]

    for meal_group in menu_day.meal_groups:
        lines.append(f"{INDENT}{meal_group.title}")
        for meal in meal_group.meals:
            lines.append(f"{INDENT}{format_meal(meal)}")
        lines.append("")

    return "\n".join(lines)


def format_menu(menu: Menu) -> str:
    """Format every day of a menu, separated by blank lines."""
    return "\n\n".join(format_menu_day(day) for day in menu.day_menus)
