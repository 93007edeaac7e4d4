"""
Library Entry Event builder (kind 38892).
"""

import logging
import time

from ..addressing import book_address, entry_identifier, library_address
from ..kinds import KIND_LIBRARY_ENTRY
from ..models import UnsignedEvent
from ..options import BuildLibraryEntryEventOptions
from ..signing import derive_pubkey
from ..validation import validate_entry_inputs

logger = logging.getLogger("ketab-protocol")


def build_library_entry_event(options: BuildLibraryEntryEventOptions) -> UnsignedEvent:
    """Build an unsigned Library Entry event.

    Tags, in this fixed order:
        - ``["d", "<library_owner_pubkey>:<book_slug>"]``
        - ``["a", book coordinate]``
        - ``["a", library coordinate]``
        - ``["p", library_owner_pubkey]`` (librarian)
        - ``["p", book_author_pubkey]``

    The library coordinate uses ``content.ref_library_id``. Both coordinates
    come from the same address functions the Book and Library events are
    addressed with.

    Raises:
        ValidationError: If the options fail validate_entry_inputs()
    """
    validate_entry_inputs(options)

    content = options.content
    created_at = options.created_at if options.created_at is not None else int(time.time())
    pubkey = derive_pubkey(options.secret_key)

    identifier = entry_identifier(options.library_owner_pubkey, options.book_slug)
    book_coordinate = book_address(options.book_author_pubkey, options.book_slug)
    library_coordinate = library_address(options.library_owner_pubkey, content.ref_library_id)

    tags: list[list[str]] = [
        ["d", identifier],
        ["a", book_coordinate],
        ["a", library_coordinate],
        ["p", options.library_owner_pubkey],
        ["p", options.book_author_pubkey],
    ]

    logger.debug(f"🔖 Built library entry event {identifier} for {book_coordinate}")
    return UnsignedEvent(
        kind=KIND_LIBRARY_ENTRY,
        pubkey=pubkey,
        created_at=created_at,
        tags=tags,
        content=content.to_content(),
    )
