"""
Structural checks for received Ketab Protocol events.

Unlike the builder validators these never raise: a relay or client handing
us a malformed event is an expected condition, so every check returns an
EventCheck describing the first problem found.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from ..kinds import KIND_BOOK, KIND_LIBRARY, KIND_LIBRARY_ENTRY
from ..models import UnsignedEvent

LIBRARY_STRING_FIELDS = (
    "name", "description", "founder_pubkey", "protocol_version",
    "ref_library_pubkey", "ref_library_id", "ref_clock_pubkey", "ref_block_id",
)
LIBRARY_COUNT_FIELDS = ("book_count", "reader_count", "chapter_count")

BOOK_STRING_FIELDS = ("title", "description", "author", "ref_book_pubkey", "ref_book_id")
BOOK_NUMBER_FIELDS = ("published_at", "chapter_count")

ENTRY_STRING_FIELDS = (
    "ref_library_owner_pubkey", "ref_library_id", "ref_book_coordinate",
    "ref_book_pubkey", "ref_book_id",
)
ENTRY_NUMBER_FIELDS = ("added_at",)


@dataclass(frozen=True)
class EventCheck:
    """Outcome of checking a received event."""
    valid: bool
    message: str

    def __bool__(self) -> bool:
        return self.valid


def _invalid(message: str) -> EventCheck:
    return EventCheck(valid=False, message=message)


def _decode_content(event: UnsignedEvent) -> dict[str, Any] | None:
    try:
        data = json.loads(event.content)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def _check_content_fields(
    content: dict[str, Any],
    string_fields: tuple[str, ...],
    number_fields: tuple[str, ...],
) -> EventCheck | None:
    for field in string_fields:
        if field not in content:
            return _invalid(f"Content must include '{field}'")
        value = content[field]
        if not isinstance(value, str) or value == "":
            return _invalid(f"Content field '{field}' must be a non-empty string")
    for field in number_fields:
        if field not in content:
            return _invalid(f"Content must include '{field}'")
        value = content[field]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return _invalid(f"Content field '{field}' must be a number")
    return None


def check_library_event(event: UnsignedEvent) -> EventCheck:
    """Check a Library event (kind 38890).

    Requires a ``d`` tag, at least two ``p`` tags (librarian and clock) and
    every required content field.
    """
    if event.kind != KIND_LIBRARY:
        return _invalid(f"Expected kind {KIND_LIBRARY} for Library event, got {event.kind}")
    if not event.first_tag_value("d"):
        return _invalid("Missing 'd' tag (library identifier)")
    if len(event.tag_values("p")) < 2:
        return _invalid("Missing required 'p' tags (need librarian pubkey and clock pubkey)")

    content = _decode_content(event)
    if content is None:
        return _invalid("Content must be a valid JSON object")
    problem = _check_content_fields(content, LIBRARY_STRING_FIELDS, LIBRARY_COUNT_FIELDS)
    if problem is not None:
        return problem

    return EventCheck(valid=True, message="Valid Library event")


def check_book_event(event: UnsignedEvent) -> EventCheck:
    """Check a Book event (kind 38891).

    ``ref_book_pubkey`` in content must match the event's pubkey, since the
    author's identity is the signing key.
    """
    if event.kind != KIND_BOOK:
        return _invalid(f"Expected kind {KIND_BOOK} for Book event, got {event.kind}")
    if not event.first_tag_value("d"):
        return _invalid("Missing 'd' tag (book identifier)")
    if not event.tag_values("p"):
        return _invalid("Missing required 'p' tag (author pubkey)")

    content = _decode_content(event)
    if content is None:
        return _invalid("Content must be a valid JSON object")
    problem = _check_content_fields(content, BOOK_STRING_FIELDS, BOOK_NUMBER_FIELDS)
    if problem is not None:
        return problem

    if "chapters" not in content:
        return _invalid("Content must include 'chapters' array")
    if not isinstance(content["chapters"], list):
        return _invalid("Content field 'chapters' must be an array")
    if content["ref_book_pubkey"] != event.pubkey:
        return _invalid("ref_book_pubkey must match event's pubkey (author identity)")

    return EventCheck(valid=True, message="Valid Book event")


def check_entry_event(event: UnsignedEvent) -> EventCheck:
    """Check a Library Entry event (kind 38892).

    Requires a book coordinate and a library coordinate ``a`` tag and at
    least two ``p`` tags (librarian and book author).
    """
    if event.kind != KIND_LIBRARY_ENTRY:
        return _invalid(
            f"Expected kind {KIND_LIBRARY_ENTRY} for Library Entry event, got {event.kind}"
        )
    if not event.first_tag_value("d"):
        return _invalid("Missing 'd' tag (entry identifier)")

    a_tags = event.tag_values("a")
    if not any(a.startswith(f"{KIND_BOOK}:") for a in a_tags):
        return _invalid(f"Missing book coordinate 'a' tag (format: {KIND_BOOK}:<author_pubkey>:<book_id>)")
    if not any(a.startswith(f"{KIND_LIBRARY}:") for a in a_tags):
        return _invalid(
            f"Missing library coordinate 'a' tag (format: {KIND_LIBRARY}:<library_owner_pubkey>:<library_id>)"
        )
    if len(event.tag_values("p")) < 2:
        return _invalid("Missing required 'p' tags (need library owner pubkey and book author pubkey)")

    content = _decode_content(event)
    if content is None:
        return _invalid("Content must be a valid JSON object")
    problem = _check_content_fields(content, ENTRY_STRING_FIELDS, ENTRY_NUMBER_FIELDS)
    if problem is not None:
        return problem

    return EventCheck(valid=True, message="Valid Library Entry event")


def check_event(event: UnsignedEvent) -> EventCheck:
    """Check a Ketab Protocol event, dispatching on its kind."""
    if event.kind == KIND_LIBRARY:
        return check_library_event(event)
    if event.kind == KIND_BOOK:
        return check_book_event(event)
    if event.kind == KIND_LIBRARY_ENTRY:
        return check_entry_event(event)
    return _invalid(f"Unknown Ketab Protocol kind: {event.kind}")


__all__ = [
    "EventCheck",
    "check_event",
    "check_library_event",
    "check_book_event",
    "check_entry_event",
]
