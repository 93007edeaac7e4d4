"""
Input validation for event builders.

Each validator receives the options struct its builder will receive and
either returns None or raises ValidationError on the first bad field.
Checks run in a fixed order: secret key, pubkey fields, required strings,
required numbers, then entity-specific structure. Validators never mutate
their input.
"""

import logging
import math
import re
from typing import Any, NoReturn

from .addressing import book_address, parse_coordinate
from .exceptions import ValidationError
from .kinds import KIND_CHAPTER
from .options import (
    BuildBookEventOptions,
    BuildChapterEventOptions,
    BuildLibraryEntryEventOptions,
    BuildLibraryEventOptions,
)
from .signing import derive_pubkey

logger = logging.getLogger("ketab-protocol")

SECRET_KEY_LENGTH = 32
PUBKEY_PATTERN = re.compile(r"[0-9a-f]{64}")


def _fail(field: str, reason: str) -> NoReturn:
    logger.debug(f"❌ Validation failed for {field}: {reason}")
    raise ValidationError(field, reason)


# =============================================================================
# Field predicates
# =============================================================================

def is_hex_pubkey(value: Any) -> bool:
    """Return True for a 64-character lowercase hex string."""
    return isinstance(value, str) and PUBKEY_PATTERN.fullmatch(value) is not None


def require_secret_key(value: Any) -> None:
    if not isinstance(value, (bytes, bytearray)) or len(value) != SECRET_KEY_LENGTH:
        _fail("secret_key", f"must be exactly {SECRET_KEY_LENGTH} bytes")


def require_string(value: Any, field: str) -> None:
    if not isinstance(value, str) or not value.strip():
        _fail(field, "is required and must be a non-empty string")


def require_optional_string(value: Any, field: str) -> None:
    """Optional strings are either absent (None) or non-empty."""
    if value is not None:
        require_string(value, field)


def require_pubkey(value: Any, field: str) -> None:
    require_string(value, field)
    if not is_hex_pubkey(value):
        _fail(field, "must be a 64-character lowercase hex pubkey")


def require_number(value: Any, field: str) -> None:
    # bool is an int subclass but never a valid count or timestamp
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        _fail(field, "is required and must be a number")
    if isinstance(value, float) and math.isnan(value):
        _fail(field, "is required and must be a number")


def require_non_negative(value: Any, field: str) -> None:
    require_number(value, field)
    if value < 0:
        _fail(field, "must not be negative")


def require_created_at(value: Any) -> None:
    """created_at is optional; when given it must be a non-negative integer."""
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        _fail("created_at", "must be a non-negative integer unix timestamp")


def require_chapter_address(value: Any, field: str) -> None:
    """Check that a value is a ``30023:<pubkey>:<d-tag>`` chapter address."""
    require_string(value, field)
    try:
        parsed = parse_coordinate(value)
    except ValidationError as e:
        _fail(field, e.reason)
    if parsed.kind != KIND_CHAPTER:
        _fail(field, f"must be a chapter address of kind {KIND_CHAPTER}, got kind {parsed.kind}")
    if not is_hex_pubkey(parsed.pubkey):
        _fail(field, "chapter address pubkey must be a 64-character lowercase hex pubkey")


# =============================================================================
# Builder validators
# =============================================================================

def validate_library_inputs(options: BuildLibraryEventOptions) -> None:
    """Validate library event builder inputs.

    The founder named in content must be the signer, since the builder tags
    ``founder_pubkey`` as the librarian.
    """
    require_secret_key(options.secret_key)

    c = options.content
    require_pubkey(c.founder_pubkey, "content.founder_pubkey")
    require_pubkey(c.ref_library_pubkey, "content.ref_library_pubkey")
    require_pubkey(c.ref_clock_pubkey, "content.ref_clock_pubkey")

    require_string(options.library_id, "library_id")
    require_string(c.name, "content.name")
    require_string(c.description, "content.description")
    require_string(c.protocol_version, "content.protocol_version")
    require_string(c.ref_library_id, "content.ref_library_id")
    require_string(c.ref_block_id, "content.ref_block_id")

    require_non_negative(c.book_count, "content.book_count")
    require_non_negative(c.reader_count, "content.reader_count")
    require_non_negative(c.chapter_count, "content.chapter_count")

    # Present-but-empty URLs would otherwise become empty r/u tags
    require_optional_string(c.relay_url, "content.relay_url")
    require_optional_string(c.website_url, "content.website_url")
    if c.founder_pubkey != derive_pubkey(options.secret_key):
        _fail("content.founder_pubkey", "must be the pubkey of the signing secret key")
    require_created_at(options.created_at)


def validate_book_inputs(options: BuildBookEventOptions) -> None:
    """Validate book event builder inputs.

    Beyond the per-field checks, a book must list at least one chapter, every
    chapter must be a chapter address, the list length must match
    ``chapter_count``, ``ref_book_id`` must name this book and
    ``ref_book_pubkey`` must be the signer.
    """
    require_secret_key(options.secret_key)

    c = options.content
    require_pubkey(c.ref_book_pubkey, "content.ref_book_pubkey")
    if c.ref_library_pubkey is not None:
        require_pubkey(c.ref_library_pubkey, "content.ref_library_pubkey")

    require_string(options.book_id, "book_id")
    require_string(c.title, "content.title")
    require_string(c.description, "content.description")
    require_string(c.author, "content.author")
    require_string(c.ref_book_id, "content.ref_book_id")
    require_optional_string(c.ref_library_id, "content.ref_library_id")
    require_optional_string(c.ref_block_id, "content.ref_block_id")

    require_non_negative(c.published_at, "content.published_at")
    require_non_negative(c.chapter_count, "content.chapter_count")

    if not isinstance(c.chapters, (list, tuple)) or len(c.chapters) == 0:
        _fail("content.chapters", "must be a non-empty list of chapter addresses")
    for idx, chapter in enumerate(c.chapters):
        require_chapter_address(chapter, f"content.chapters[{idx}]")
    if len(c.chapters) != c.chapter_count:
        _fail(
            "content.chapter_count",
            f"is {c.chapter_count} but content.chapters lists {len(c.chapters)} chapters",
        )
    if c.ref_book_id != options.book_id:
        _fail("content.ref_book_id", f"must equal book_id '{options.book_id}'")
    if c.ref_book_pubkey != derive_pubkey(options.secret_key):
        _fail("content.ref_book_pubkey", "must be the pubkey of the signing secret key")
    require_created_at(options.created_at)


def validate_entry_inputs(options: BuildLibraryEntryEventOptions) -> None:
    """Validate library entry event builder inputs.

    The content's book and library references must agree with the options
    the builder derives its ``a`` and ``p`` tags from.
    """
    require_secret_key(options.secret_key)

    c = options.content
    require_pubkey(options.library_owner_pubkey, "library_owner_pubkey")
    require_pubkey(options.book_author_pubkey, "book_author_pubkey")
    require_pubkey(c.ref_library_owner_pubkey, "content.ref_library_owner_pubkey")
    require_pubkey(c.ref_book_pubkey, "content.ref_book_pubkey")

    require_string(options.book_slug, "book_slug")
    require_string(c.ref_library_id, "content.ref_library_id")
    require_string(c.ref_book_coordinate, "content.ref_book_coordinate")
    require_string(c.ref_book_id, "content.ref_book_id")
    require_optional_string(c.ref_block_id, "content.ref_block_id")

    require_non_negative(c.added_at, "content.added_at")

    expected_coordinate = book_address(options.book_author_pubkey, options.book_slug)
    if c.ref_book_coordinate != expected_coordinate:
        _fail("content.ref_book_coordinate", f"must equal '{expected_coordinate}'")
    if c.ref_book_pubkey != options.book_author_pubkey:
        _fail("content.ref_book_pubkey", "must equal book_author_pubkey")
    if c.ref_library_owner_pubkey != options.library_owner_pubkey:
        _fail("content.ref_library_owner_pubkey", "must equal library_owner_pubkey")
    if c.ref_book_id != options.book_slug:
        _fail("content.ref_book_id", f"must equal book_slug '{options.book_slug}'")
    require_created_at(options.created_at)


def validate_chapter_inputs(options: BuildChapterEventOptions) -> None:
    """Validate chapter event builder inputs."""
    require_secret_key(options.secret_key)

    c = options.content
    require_string(options.chapter_id, "chapter_id")
    require_string(c.title, "content.title")
    require_string(c.body, "content.body")

    require_non_negative(c.published_at, "content.published_at")
    require_created_at(options.created_at)


__all__ = [
    "SECRET_KEY_LENGTH",
    "is_hex_pubkey",
    "require_secret_key",
    "require_string",
    "require_optional_string",
    "require_pubkey",
    "require_number",
    "require_non_negative",
    "require_created_at",
    "require_chapter_address",
    "validate_library_inputs",
    "validate_book_inputs",
    "validate_entry_inputs",
    "validate_chapter_inputs",
]
