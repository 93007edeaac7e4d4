"""
Parse signed events back into typed Ketab records.
"""

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import EventFormatError
from ..kinds import KIND_BOOK, KIND_CHAPTER, KIND_LIBRARY, KIND_LIBRARY_ENTRY
from ..models import (
    BookContent,
    BookEvent,
    ChapterContent,
    ChapterEvent,
    ContentModel,
    LibraryContent,
    LibraryEntryContent,
    LibraryEntryEvent,
    LibraryEvent,
    SignedEvent,
)


def _identifier_and_content(
    event: SignedEvent,
    expected_kind: int,
    label: str,
    content_model: type[ContentModel],
) -> tuple[str, ContentModel]:
    """Pull the d-tag identifier and typed content out of an event.

    Raises:
        EventFormatError: On a kind mismatch, a missing d tag, or content
            that does not decode into ``content_model``
    """
    if event.kind != expected_kind:
        raise EventFormatError(
            f"Expected kind {expected_kind} for {label} event, got {event.kind}",
            details={"event_id": event.id, "kind": event.kind},
        )

    identifier = event.first_tag_value("d")
    if not identifier:
        raise EventFormatError(f"{label} event is missing its 'd' tag", details={"event_id": event.id})

    try:
        content = content_model.from_content(event.content)
    except PydanticValidationError as e:
        raise EventFormatError(
            f"{label} event content is not a valid {content_model.__name__}",
            details={"event_id": event.id, "errors": e.errors()},
        ) from e

    return identifier, content


def parse_library_event(event: SignedEvent) -> LibraryEvent:
    """Parse a signed Library event."""
    identifier, content = _identifier_and_content(event, KIND_LIBRARY, "Library", LibraryContent)
    return LibraryEvent(
        library_id=identifier,
        founder_pubkey=event.pubkey,
        content=content,
        event_id=event.id,
        created_at=event.created_at,
    )


def parse_book_event(event: SignedEvent) -> BookEvent:
    """Parse a signed Book event."""
    identifier, content = _identifier_and_content(event, KIND_BOOK, "Book", BookContent)
    return BookEvent(
        book_id=identifier,
        author_pubkey=event.pubkey,
        content=content,
        event_id=event.id,
        created_at=event.created_at,
    )


def parse_chapter_event(event: SignedEvent) -> ChapterEvent:
    """Parse a signed Chapter event."""
    identifier, content = _identifier_and_content(event, KIND_CHAPTER, "Chapter", ChapterContent)
    return ChapterEvent(
        chapter_id=identifier,
        author_pubkey=event.pubkey,
        content=content,
        event_id=event.id,
        created_at=event.created_at,
    )


def parse_entry_event(event: SignedEvent) -> LibraryEntryEvent:
    """Parse a signed Library Entry event. The signer is the librarian."""
    identifier, content = _identifier_and_content(
        event, KIND_LIBRARY_ENTRY, "Library Entry", LibraryEntryContent
    )
    return LibraryEntryEvent(
        entry_id=identifier,
        library_owner_pubkey=event.pubkey,
        content=content,
        event_id=event.id,
        created_at=event.created_at,
    )


__all__ = [
    "parse_library_event",
    "parse_book_event",
    "parse_chapter_event",
    "parse_entry_event",
]
