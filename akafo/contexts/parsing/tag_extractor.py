"""
Tag extraction from meal names.

Meal names carry their dietary markers and additive codes inline, e.g.
"Schnitzel (S) (1,3)". This module strips those groups off the name and maps
each code to its enum member. Unknown codes are dropped, since the canteen may
introduce new codes at any time.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar

from akafo.contexts.parsing.logger import _log_debug
from akafo.contexts.parsing.menu_data_structure import MealAdditive, MealInformation
from akafo.contexts.parsing.tag_patterns import TagPatterns

T = TypeVar("T")


@dataclass(frozen=True)
class TagExtraction:
    """Cleaned meal name and the tags found in it."""

    name: str
    information: frozenset[MealInformation] = field(default_factory=frozenset)
    additives: frozenset[MealAdditive] = field(default_factory=frozenset)


def _parse_tuple(tuple_text: str, lookup: Callable[[str], Optional[T]]) -> frozenset[T]:
    """Split a "(A,B)" group into codes and map the known ones via lookup."""
    members = set()
    codes = tuple_text.strip(TagPatterns.GROUP_DELIMITERS).split(TagPatterns.CODE_SEPARATOR)
    for code in codes:
        member = lookup(code)
        if member is None:
            if code:
                _log_debug(f"Dropping unknown tag code {code!r}")
            continue
        members.add(member)
    return frozenset(members)


def parse_information_tuple(tuple_text: str) -> frozenset[MealInformation]:
    """
    Map an information group such as "(VG,V,G)" to dietary markers.

    Args:
        tuple_text: Matched group including parentheses (may be empty)

    Returns:
        Set of known markers; unknown codes are ignored
    """
    return _parse_tuple(tuple_text, MealInformation.from_code)


def parse_additive_tuple(tuple_text: str) -> frozenset[MealAdditive]:
    """
    Map an additive group such as "(1,3)" to additives.

    Args:
        tuple_text: Matched group including parentheses (may be empty)

    Returns:
        Set of known additives; unknown codes are ignored
    """
    return _parse_tuple(tuple_text, MealAdditive.from_code)


def extract_tags(raw_name: str) -> TagExtraction:
    """
    Strip tag groups from a meal name.

    The first information group is matched and removed before the additive
    group is searched, so letters never end up in the additive match. At most
    one group of each kind is read.

    Args:
        raw_name: Meal name as found in the feed, e.g. "Schnitzel (S) (1,3)"

    Returns:
        TagExtraction with the name right-trimmed and the recognised tags

    Examples:
        >>> extract_tags("Schnitzel (S) (1,3)").name
        'Schnitzel'
    """
    name = raw_name
    information: frozenset[MealInformation] = frozenset()
    additives: frozenset[MealAdditive] = frozenset()

    info_match = TagPatterns.INFORMATION_GROUP.search(name)
    if info_match:
        information = parse_information_tuple(info_match.group(0))
        name = name.replace(info_match.group(0), "")

    additive_match = TagPatterns.ADDITIVE_GROUP.search(name)
    if additive_match:
        additives = parse_additive_tuple(additive_match.group(0))
        name = name.replace(additive_match.group(0), "")

    return TagExtraction(name=name.rstrip(), information=information, additives=additives)
