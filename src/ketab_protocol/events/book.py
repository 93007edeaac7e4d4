"""
Book Event builder (kind 38891).
"""

import logging
import time

from ..addressing import book_address, canonical_identifier
from ..kinds import KIND_BOOK
from ..models import UnsignedEvent
from ..options import BuildBookEventOptions
from ..signing import derive_pubkey
from ..validation import validate_book_inputs

logger = logging.getLogger("ketab-protocol")


def build_book_event(options: BuildBookEventOptions) -> UnsignedEvent:
    """Build an unsigned Book event.

    The ``d`` tag comes first, followed by one ``a`` tag per chapter address
    in reading order, then a ``p`` tag for the author. Chapter order is the
    order of ``content.chapters``.

    Raises:
        ValidationError: If the options fail validate_book_inputs()
    """
    validate_book_inputs(options)

    content = options.content
    created_at = options.created_at if options.created_at is not None else int(time.time())
    pubkey = derive_pubkey(options.secret_key)

    tags: list[list[str]] = [["d", canonical_identifier("book", options.book_id)]]
    # Chapter addresses, for relay indexing
    for chapter in content.chapters:
        tags.append(["a", chapter])
    tags.append(["p", pubkey])

    logger.debug(
        f"📖 Built book event {book_address(pubkey, options.book_id)} "
        f"with {len(content.chapters)} chapters"
    )
    return UnsignedEvent(
        kind=KIND_BOOK,
        pubkey=pubkey,
        created_at=created_at,
        tags=tags,
        content=content.to_content(),
    )
