"""
Ketab Protocol event kinds and protocol constants.

Reserved range: 38890-38892 for Ketab Protocol events. Chapters borrow the
long-form content kind 30023.
"""

# Library Event - book curation container (replaceable)
KIND_LIBRARY = 38890

# Book Event - book metadata and chapter organization (replaceable)
KIND_BOOK = 38891

# Library Entry Event - library-specific metadata about a curated book (replaceable)
KIND_LIBRARY_ENTRY = 38892

# Long-form content, used for chapters
KIND_CHAPTER = 30023

LIBRARY_PROTOCOL_KINDS: tuple[int, ...] = (
    KIND_LIBRARY,
    KIND_BOOK,
    KIND_LIBRARY_ENTRY,
)

PROTOCOL_VERSION = "0.1.0"

# Chapter addresses look like 30023:<author_pubkey>:<chapter_d-tag>
CHAPTER_ID_PREFIX = f"{KIND_CHAPTER}:"


def is_ketab_protocol_kind(kind: int) -> bool:
    """Return True if the kind is one of the Ketab Protocol event kinds."""
    return kind in LIBRARY_PROTOCOL_KINDS


__all__ = [
    "KIND_LIBRARY",
    "KIND_BOOK",
    "KIND_LIBRARY_ENTRY",
    "KIND_CHAPTER",
    "LIBRARY_PROTOCOL_KINDS",
    "PROTOCOL_VERSION",
    "CHAPTER_ID_PREFIX",
    "is_ketab_protocol_kind",
]
