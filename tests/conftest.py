"""
Pytest configuration and fixtures for ketab-protocol tests.
"""

import sys
from pathlib import Path
import pytest

# Add src directory to Python path to allow importing ketab_protocol
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from ketab_protocol.addressing import book_address, chapter_address
from ketab_protocol.models import BookContent, ChapterContent, LibraryContent, LibraryEntryContent

# Secret keys 1, 2 and 3; their x-only pubkeys are the x coordinates of G, 2G and 3G.
AUTHOR_SECRET_KEY = bytes(31) + b"\x01"
AUTHOR_PUBKEY = "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
LIBRARIAN_SECRET_KEY = bytes(31) + b"\x02"
LIBRARIAN_PUBKEY = "c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5"
CLOCK_PUBKEY = "f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9"

FIXED_CREATED_AT = 1700000000


@pytest.fixture
def author_secret_key() -> bytes:
    return AUTHOR_SECRET_KEY


@pytest.fixture
def author_pubkey() -> str:
    return AUTHOR_PUBKEY


@pytest.fixture
def librarian_secret_key() -> bytes:
    return LIBRARIAN_SECRET_KEY


@pytest.fixture
def librarian_pubkey() -> str:
    return LIBRARIAN_PUBKEY


@pytest.fixture
def clock_pubkey() -> str:
    return CLOCK_PUBKEY


@pytest.fixture
def library_content() -> LibraryContent:
    """Library curated by the librarian, with no optional URLs."""
    return LibraryContent(
        name="Alexandria",
        description="Books published on Nostr. Read by citizens.",
        founder_pubkey=LIBRARIAN_PUBKEY,
        protocol_version="0.1.0",
        ref_library_pubkey=LIBRARIAN_PUBKEY,
        ref_library_id="alexandria",
        ref_clock_pubkey=CLOCK_PUBKEY,
        ref_block_id="block-840000",
        book_count=0,
        reader_count=0,
        chapter_count=0,
    )


@pytest.fixture
def chapter_addresses() -> list[str]:
    return [chapter_address(AUTHOR_PUBKEY, f"dune-ch-{n}") for n in (1, 2, 3)]


@pytest.fixture
def book_content(chapter_addresses) -> BookContent:
    """Three-chapter book by the author."""
    return BookContent(
        title="Dune",
        description="A desert planet.",
        author="Frank Herbert",
        published_at=FIXED_CREATED_AT,
        chapter_count=len(chapter_addresses),
        chapters=chapter_addresses,
        ref_book_pubkey=AUTHOR_PUBKEY,
        ref_book_id="dune",
    )


@pytest.fixture
def chapter_content() -> ChapterContent:
    return ChapterContent(
        title="Chapter 1: Arrakis",
        published_at=FIXED_CREATED_AT,
        body="In the week before their departure to Arrakis...",
    )


@pytest.fixture
def entry_content() -> LibraryEntryContent:
    """The librarian's entry for the author's book in Alexandria."""
    return LibraryEntryContent(
        added_at=FIXED_CREATED_AT,
        ref_library_owner_pubkey=LIBRARIAN_PUBKEY,
        ref_library_id="alexandria",
        ref_book_coordinate=book_address(AUTHOR_PUBKEY, "dune"),
        ref_book_pubkey=AUTHOR_PUBKEY,
        ref_book_id="dune",
    )
