"""
HTML menu extraction for the Parsing context.

Each feed entry embeds an HTML fragment of the form:

    <div>
      <p><strong>Tagesgericht</strong></p>
      <ul>
        <li>Schnitzel (S) (1,3)<br/>3,50 EUR - 5,00 EUR</li>
        ...
      </ul>
      <p><strong>Beilagen</strong></p>
      <ul>...</ul>
    </div>

Headings open a meal group; the lists that follow fill it. The walk is a
two-state machine: until the first heading is seen there is no group to fill,
so lists are parsed and then dropped. Afterwards list items accumulate into
the current group. Groups are only emitted once they hold meals.
"""

from enum import Enum
from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import Comment, Declaration, Doctype, ProcessingInstruction

from akafo.contexts.parsing.exceptions import CouldNotParseHtml, UnexpectedHtmlFormat
from akafo.contexts.parsing.logger import _log_debug
from akafo.contexts.parsing.menu_data_structure import Meal, MealGroup
from akafo.contexts.parsing.price_parser import parse_price
from akafo.contexts.parsing.tag_extractor import extract_tags
from akafo.contexts.parsing.tag_patterns import FeedPatterns

HTML_PARSER = "html.parser"

# Child positions inside a list item: name text, separator, price text
ITEM_NAME_INDEX = 0
ITEM_PRICE_INDEX = 2

# Markup that is not content: <!-- -->, <!DOCTYPE>, <!...>, <?...?>
NON_CONTENT_NODES = (Comment, Doctype, Declaration, ProcessingInstruction)


class ExtractorState(Enum):
    SEEKING_HEADING = "seeking_heading"
    ACCUMULATING_LIST = "accumulating_list"


def _child_nodes(tag: Tag) -> list:
    """Children of a tag without comments, doctypes and whitespace-only text."""
    nodes = []
    for node in tag.children:
        if isinstance(node, NON_CONTENT_NODES):
            continue
        if isinstance(node, NavigableString) and not node.strip():
            continue
        nodes.append(node)
    return nodes


def _text_at(nodes: list, index: int, what: str, context: Tag) -> str:
    """Text of the node at index, which must exist and be a text node."""
    if index >= len(nodes) or isinstance(nodes[index], Tag):
        raise UnexpectedHtmlFormat(
            f"Expected {what} at child position {index}", snippet=str(context)
        )
    return str(nodes[index]).strip()


def _root_element(html: str) -> Tag:
    try:
        soup = BeautifulSoup(html, HTML_PARSER)
    except ParserRejectedMarkup as e:
        raise CouldNotParseHtml(
            "Entry content is not parseable HTML", snippet=html, original_error=e
        ) from e

    nodes = _child_nodes(soup)
    if not nodes:
        raise CouldNotParseHtml("Entry content has no root element", snippet=html)
    if not isinstance(nodes[0], Tag):
        raise UnexpectedHtmlFormat("Entry content does not start with an element", snippet=html)
    return nodes[0]


def extract_heading_title(heading: Tag) -> str:
    """
    Read a group title from a heading such as <p><strong>Title</strong></p>.

    Raises:
        UnexpectedHtmlFormat: If the heading has no nested element holding text
    """
    nodes = _child_nodes(heading)
    if not nodes or not isinstance(nodes[0], Tag):
        raise UnexpectedHtmlFormat("Heading has no nested element", snippet=str(heading))
    return _text_at(_child_nodes(nodes[0]), 0, "heading text", heading)


def extract_meal(item: Tag) -> Meal:
    """
    Build a Meal from one list item.

    The first child holds the tagged name, the third child the price string.

    Raises:
        UnexpectedHtmlFormat: If the name or price child is missing
        CouldNotParsePrice: If the price string is malformed
    """
    nodes = _child_nodes(item)
    raw_name = _text_at(nodes, ITEM_NAME_INDEX, "meal name", item)
    price_text = _text_at(nodes, ITEM_PRICE_INDEX, "price", item)

    tags = extract_tags(raw_name)
    price_student, price = parse_price(price_text)

    return Meal(
        name=tags.name,
        information=tags.information,
        additives=tags.additives,
        price_student=price_student,
        price=price,
    )


def _extract_list_meals(meal_list: Tag) -> List[Meal]:
    meals = []
    for item in _child_nodes(meal_list):
        if not isinstance(item, Tag) or item.name != FeedPatterns.ITEM_TAG:
            raise UnexpectedHtmlFormat(
                "Meal list contains a non-item node", snippet=str(meal_list)
            )
        meals.append(extract_meal(item))
    return meals


def extract_meal_groups(html: str) -> tuple[MealGroup, ...]:
    """
    Parse an entry's HTML fragment into meal groups in document order.

    Args:
        html: Entry content body

    Returns:
        Tuple of non-empty MealGroups

    Raises:
        CouldNotParseHtml: If the fragment cannot be parsed or is empty
        UnexpectedHtmlFormat: If headings or list items lack expected children
        CouldNotParsePrice: If a meal's price is malformed
    """
    root = _root_element(html)

    groups: List[MealGroup] = []
    state = ExtractorState.SEEKING_HEADING
    current_title: Optional[str] = None
    current_meals: List[Meal] = []

    def flush() -> None:
        if current_title is not None and current_meals:
            groups.append(MealGroup(title=current_title, meals=tuple(current_meals)))

    for element in _child_nodes(root):
        if not isinstance(element, Tag):
            continue

        if element.name == FeedPatterns.HEADING_TAG:
            flush()
            current_title = extract_heading_title(element)
            current_meals = []
            state = ExtractorState.ACCUMULATING_LIST

        elif element.name == FeedPatterns.LIST_TAG:
            if state is ExtractorState.SEEKING_HEADING:
                skipped = _extract_list_meals(element)
                _log_debug(f"Dropping {len(skipped)} meals listed before the first heading")
                continue
            current_meals.extend(_extract_list_meals(element))

    flush()

    return tuple(groups)
