"""
Chapter Event builder (kind 30023, long-form content).
"""

import logging
import time

from ..addressing import chapter_address
from ..kinds import KIND_CHAPTER
from ..models import UnsignedEvent
from ..options import BuildChapterEventOptions
from ..signing import derive_pubkey
from ..validation import validate_chapter_inputs

logger = logging.getLogger("ketab-protocol")


def build_chapter_event(options: BuildChapterEventOptions) -> UnsignedEvent:
    """Build an unsigned Chapter event.

    Title, publish time and body are all kept in content, so the only tags
    are ``["d", chapter_id]`` and ``["p", author_pubkey]``. Use
    chapter_address() with the author pubkey and ``chapter_id`` to list the
    chapter in a Book.
    """
    validate_chapter_inputs(options)

    created_at = options.created_at if options.created_at is not None else int(time.time())
    pubkey = derive_pubkey(options.secret_key)

    logger.debug(f"📄 Built chapter event {chapter_address(pubkey, options.chapter_id)}")
    return UnsignedEvent(
        kind=KIND_CHAPTER,
        pubkey=pubkey,
        created_at=created_at,
        tags=[["d", options.chapter_id], ["p", pubkey]],
        content=options.content.to_content(),
    )
