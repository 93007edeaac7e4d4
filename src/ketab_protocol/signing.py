"""
Signing adapter over nostr-sdk.

Builders only use derive_pubkey(). Signing and verification are for callers
that want to finalize or check events. Errors raised by nostr-sdk (for
example an out-of-range secret key) propagate unchanged.
"""

import hashlib
import json
import logging

from nostr_sdk import Event, Keys, NostrSdkError, SecretKey
from nostr_sdk import UnsignedEvent as NostrUnsignedEvent

from .models import SignedEvent, UnsignedEvent

logger = logging.getLogger("ketab-protocol")


def derive_pubkey(secret_key: bytes) -> str:
    """Get the x-only public key (hex) for a 32-byte secret key."""
    return Keys.parse(secret_key.hex()).public_key().to_hex()


def sign_event(event: UnsignedEvent, secret_key: bytes) -> SignedEvent:
    """Sign an unsigned event.

    Args:
        event: Event built by one of the builders
        secret_key: 32-byte secret key matching ``event.pubkey``

    Returns:
        The same event with ``id`` and ``sig`` filled in.
    """
    keys = Keys.parse(secret_key.hex())
    signed = keys.sign_event(NostrUnsignedEvent.from_json(event.to_json()))
    logger.debug(f"✍️ Signed kind {event.kind} event {signed.id().to_hex()}")
    return SignedEvent.from_json(signed.as_json())


def verify_event(event: SignedEvent) -> bool:
    """Verify an event's id and signature."""
    try:
        return Event.from_json(event.to_json()).verify()
    except NostrSdkError as e:
        logger.debug(f"❌ Event {event.id} could not be decoded for verification: {e}")
        return False


def compute_event_id(event: UnsignedEvent) -> str:
    """Compute the NIP-01 event id: sha256 of the canonical serialization."""
    serialized = json.dumps(
        [0, event.pubkey, event.created_at, event.kind, event.tags, event.content],
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()


def parse_secret_key(value: str) -> bytes:
    """Parse a secret key given as 64-char hex or as a bech32 ``nsec``."""
    return bytes.fromhex(SecretKey.parse(value.strip()).to_hex())


def hex_to_secret_key(value: str) -> bytes:
    """Convert a hex string to secret key bytes."""
    return bytes.fromhex(value)


def secret_key_to_hex(secret_key: bytes) -> str:
    """Convert secret key bytes to a hex string."""
    return secret_key.hex()


__all__ = [
    "derive_pubkey",
    "sign_event",
    "verify_event",
    "compute_event_id",
    "parse_secret_key",
    "hex_to_secret_key",
    "secret_key_to_hex",
]
