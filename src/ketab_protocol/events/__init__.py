"""
Event builders, received-event checks and parsers for Ketab Protocol.
"""

from .library import build_library_event
from .book import build_book_event
from .entry import build_library_entry_event
from .chapter import build_chapter_event
from .checks import (
    EventCheck,
    check_event,
    check_library_event,
    check_book_event,
    check_entry_event,
)
from .parse import (
    parse_library_event,
    parse_book_event,
    parse_chapter_event,
    parse_entry_event,
)

__all__ = [
    # Builders
    "build_library_event",
    "build_book_event",
    "build_library_entry_event",
    "build_chapter_event",
    # Checks
    "EventCheck",
    "check_event",
    "check_library_event",
    "check_book_event",
    "check_entry_event",
    # Parsers
    "parse_library_event",
    "parse_book_event",
    "parse_chapter_event",
    "parse_entry_event",
]
