"""
Tests for key handling, signing and verification.
"""

import json

import pytest
from nostr_sdk import SecretKey

from ketab_protocol.events import build_book_event, build_library_event
from ketab_protocol.options import BuildBookEventOptions, BuildLibraryEventOptions
from ketab_protocol.signing import (
    compute_event_id,
    derive_pubkey,
    hex_to_secret_key,
    parse_secret_key,
    secret_key_to_hex,
    sign_event,
    verify_event,
)


@pytest.fixture
def library_event(librarian_secret_key, library_content):
    return build_library_event(BuildLibraryEventOptions(
        secret_key=librarian_secret_key,
        library_id="alexandria",
        content=library_content,
        created_at=1700000000,
    ))


class TestDerivePubkey:
    """Tests for derive_pubkey."""

    def test_known_vectors(self, author_secret_key, author_pubkey, librarian_secret_key, librarian_pubkey):
        """Test the x-only pubkeys of secret keys 1 and 2."""
        assert derive_pubkey(author_secret_key) == author_pubkey
        assert derive_pubkey(librarian_secret_key) == librarian_pubkey

    def test_builders_use_derived_pubkey(self, author_secret_key, book_content):
        """Test a built event carries the pubkey of its secret key."""
        event = build_book_event(BuildBookEventOptions(
            secret_key=author_secret_key,
            book_id="dune",
            content=book_content,
        ))
        assert event.pubkey == derive_pubkey(author_secret_key)


class TestSignEvent:
    """Tests for sign_event and verify_event."""

    def test_sign_and_verify(self, library_event, librarian_secret_key):
        """Test a signed event keeps its fields and verifies."""
        signed = sign_event(library_event, librarian_secret_key)

        assert signed.unsigned() == library_event
        assert len(signed.id) == 64
        assert len(signed.sig) == 128
        assert verify_event(signed)

    def test_id_matches_computed(self, library_event, librarian_secret_key):
        """Test the signed id is the NIP-01 hash of the event."""
        signed = sign_event(library_event, librarian_secret_key)
        assert signed.id == compute_event_id(library_event)

    def test_id_is_deterministic(self, library_event):
        """Test the same event always hashes to the same id."""
        assert compute_event_id(library_event) == compute_event_id(library_event)

    def test_tampered_content_fails(self, library_event, librarian_secret_key):
        """Test changing content after signing breaks verification."""
        signed = sign_event(library_event, librarian_secret_key)
        data = json.loads(signed.content)
        data["name"] = "Pergamon"
        tampered = signed.model_copy(update={"content": json.dumps(data, separators=(",", ":"))})

        assert not verify_event(tampered)

    def test_wire_round_trip(self, library_event, librarian_secret_key):
        """Test a signed event survives its wire JSON."""
        signed = sign_event(library_event, librarian_secret_key)
        restored = type(signed).from_json(signed.to_json())

        assert restored == signed
        assert verify_event(restored)


class TestSecretKeyHelpers:
    """Tests for secret key parsing and hex conversion."""

    def test_hex_round_trip(self, author_secret_key):
        """Test hex conversion in both directions."""
        value = secret_key_to_hex(author_secret_key)
        assert value == "00" * 31 + "01"
        assert hex_to_secret_key(value) == author_secret_key

    def test_parse_hex(self, author_secret_key):
        """Test a hex secret key parses to its bytes."""
        assert parse_secret_key("00" * 31 + "01") == author_secret_key

    def test_parse_nsec(self, librarian_secret_key):
        """Test a bech32 nsec parses to the same bytes as its hex form."""
        nsec = SecretKey.parse(librarian_secret_key.hex()).to_bech32()
        assert nsec.startswith("nsec1")
        assert parse_secret_key(f"  {nsec}\n") == librarian_secret_key
