"""
AKAFO Menu - Akademisches Förderungswerk cafeteria menu parser

Turns the Atom feed published for a university Mensa into a typed menu model
(days, meal groups, meals, dietary/additive tags and dual pricing).

Architecture:
- Parsing Context: Feed, HTML, tag and price parsing (pure, no I/O)
- Retrieval Context: HTTP download of the raw feed text
- Utils: Logging setup, configuration, plain-text menu formatting
"""

__version__ = "0.1.0"
