"""
Ketab Protocol - event construction and validation for decentralized book libraries on Nostr.
"""

from .kinds import *
from .addressing import (
    IdentifierPolicy,
    IDENTIFIER_POLICY,
    Coordinate,
    coordinate,
    canonical_identifier,
    namespaced_identifier,
    library_address,
    book_address,
    chapter_address,
    entry_identifier,
    parse_coordinate,
)
from .exceptions import KetabError, ValidationError, EventFormatError
from .models import *
from .options import *
from .validation import (
    validate_library_inputs,
    validate_book_inputs,
    validate_entry_inputs,
    validate_chapter_inputs,
)
from .signing import (
    derive_pubkey,
    sign_event,
    verify_event,
    compute_event_id,
    parse_secret_key,
    hex_to_secret_key,
    secret_key_to_hex,
)
from .events import *
from .config import KetabSettings, load_settings, configure_logging

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("ketab-protocol")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
