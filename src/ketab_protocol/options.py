"""
Builder option structs.

Each builder receives one of these. They are plain frozen dataclasses: no
coercion happens on construction, so the validators see exactly what the
caller passed.
"""

from dataclasses import dataclass

from .models import BookContent, ChapterContent, LibraryContent, LibraryEntryContent


@dataclass(frozen=True)
class BuildLibraryEventOptions:
    """Options for build_library_event.

    Attributes:
        secret_key: Librarian's 32-byte secret key
        library_id: Library slug
        content: Library event content
        created_at: Unix timestamp; defaults to now
    """
    secret_key: bytes
    library_id: str
    content: LibraryContent
    created_at: int | None = None


@dataclass(frozen=True)
class BuildBookEventOptions:
    """Options for build_book_event.

    Attributes:
        secret_key: Author's 32-byte secret key
        book_id: Book slug
        content: Book event content
        created_at: Unix timestamp; defaults to now
    """
    secret_key: bytes
    book_id: str
    content: BookContent
    created_at: int | None = None


@dataclass(frozen=True)
class BuildLibraryEntryEventOptions:
    """Options for build_library_entry_event.

    Attributes:
        secret_key: Librarian's 32-byte secret key
        library_owner_pubkey: Pubkey of the library owner
        book_slug: Slug of the curated book
        book_author_pubkey: Pubkey of the book's author
        content: Library Entry event content
        created_at: Unix timestamp; defaults to now
    """
    secret_key: bytes
    library_owner_pubkey: str
    book_slug: str
    book_author_pubkey: str
    content: LibraryEntryContent
    created_at: int | None = None


@dataclass(frozen=True)
class BuildChapterEventOptions:
    """Options for build_chapter_event.

    Attributes:
        secret_key: Author's 32-byte secret key
        chapter_id: Chapter d-tag
        content: Chapter content
        created_at: Unix timestamp; defaults to now
    """
    secret_key: bytes
    chapter_id: str
    content: ChapterContent
    created_at: int | None = None


__all__ = [
    "BuildLibraryEventOptions",
    "BuildBookEventOptions",
    "BuildLibraryEntryEventOptions",
    "BuildChapterEventOptions",
]
