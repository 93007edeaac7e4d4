"""
Library Event builder (kind 38890).
"""

import logging
import time

from ..addressing import canonical_identifier, library_address
from ..kinds import KIND_LIBRARY
from ..models import UnsignedEvent
from ..options import BuildLibraryEventOptions
from ..signing import derive_pubkey
from ..validation import validate_library_inputs

logger = logging.getLogger("ketab-protocol")


def build_library_event(options: BuildLibraryEventOptions) -> UnsignedEvent:
    """Build an unsigned Library event.

    Tags, in order:
        - ``["d", library_id]``
        - ``["p", founder_pubkey]`` (librarian)
        - ``["p", ref_clock_pubkey]`` (City Protocol clock)
        - ``["r", relay_url]`` only if a relay URL is set
        - ``["u", website_url]`` only if a website URL is set

    Raises:
        ValidationError: If the options fail validate_library_inputs()
    """
    validate_library_inputs(options)

    content = options.content
    created_at = options.created_at if options.created_at is not None else int(time.time())
    pubkey = derive_pubkey(options.secret_key)
    library_identifier = canonical_identifier("library", options.library_id)

    tags: list[list[str]] = [
        ["d", library_identifier],
        ["p", content.founder_pubkey],
        ["p", content.ref_clock_pubkey],
    ]
    if content.relay_url is not None:
        tags.append(["r", content.relay_url])
    if content.website_url is not None:
        tags.append(["u", content.website_url])

    logger.debug(f"📚 Built library event {library_address(pubkey, options.library_id)}")
    return UnsignedEvent(
        kind=KIND_LIBRARY,
        pubkey=pubkey,
        created_at=created_at,
        tags=tags,
        content=content.to_content(),
    )
