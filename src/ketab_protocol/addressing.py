"""
Identifier and coordinate formatting.

Every builder and every cross-reference goes through this module, so the way
an entity names itself and the way other events point at it can never drift
apart. All functions are pure.

Identifier policy: identifiers are bare slugs. The namespaced form
(``org.ketab-protocol:<entity>:<slug>``) can still be produced explicitly,
but IDENTIFIER_POLICY is fixed to BARE and builders only ever call
canonical_identifier() with the default policy.
"""

from dataclasses import dataclass
from enum import Enum

from .exceptions import ValidationError
from .kinds import KIND_BOOK, KIND_CHAPTER, KIND_LIBRARY

NAMESPACE = "org.ketab-protocol"


class IdentifierPolicy(Enum):
    """Whether entity identifiers carry the protocol namespace prefix."""
    BARE = "bare"
    NAMESPACED = "namespaced"


IDENTIFIER_POLICY = IdentifierPolicy.BARE


@dataclass(frozen=True)
class Coordinate:
    """A parsed ``kind:pubkey:identifier`` address."""
    kind: int
    pubkey: str
    identifier: str

    def __str__(self) -> str:
        return coordinate(self.kind, self.pubkey, self.identifier)


def coordinate(kind: int, pubkey: str, identifier: str) -> str:
    """Format the canonical coordinate string for an addressable event."""
    return f"{kind}:{pubkey}:{identifier}"


def namespaced_identifier(entity: str, slug: str) -> str:
    """Prefix a slug with the protocol namespace, e.g. ``org.ketab-protocol:book:dune``."""
    return f"{NAMESPACE}:{entity}:{slug}"


def canonical_identifier(
    entity: str,
    slug: str,
    policy: IdentifierPolicy = IDENTIFIER_POLICY,
) -> str:
    """Return the identifier an entity uses for its own ``d`` tag.

    Args:
        entity: Entity name used in the namespace ("library", "book")
        slug: Raw slug supplied by the caller
        policy: Namespace policy; defaults to the package-wide policy

    Returns:
        The identifier string used both as the ``d`` tag value and as the
        last segment of the entity's coordinate.
    """
    if policy is IdentifierPolicy.NAMESPACED:
        return namespaced_identifier(entity, slug)
    return slug


def library_address(founder_pubkey: str, library_id: str) -> str:
    """Coordinate of a Library event: ``38890:<founder_pubkey>:<library_id>``."""
    return coordinate(KIND_LIBRARY, founder_pubkey, canonical_identifier("library", library_id))


def book_address(author_pubkey: str, book_id: str) -> str:
    """Coordinate of a Book event: ``38891:<author_pubkey>:<book_id>``."""
    return coordinate(KIND_BOOK, author_pubkey, canonical_identifier("book", book_id))


def chapter_address(author_pubkey: str, chapter_d_tag: str) -> str:
    """Coordinate of a Chapter event: ``30023:<author_pubkey>:<chapter_d-tag>``.

    Chapter d-tags are owned by the long-form content kind and never carry
    the Ketab namespace.
    """
    return coordinate(KIND_CHAPTER, author_pubkey, chapter_d_tag)


def entry_identifier(library_owner_pubkey: str, book_slug: str) -> str:
    """Identifier of a Library Entry: ``<library_owner_pubkey>:<book_slug>``."""
    return f"{library_owner_pubkey}:{book_slug}"


def parse_coordinate(value: str) -> Coordinate:
    """Split a coordinate string into its kind, pubkey and identifier.

    The identifier is everything after the second colon, so identifiers that
    contain colons themselves (entry ids, namespaced ids) survive intact.

    Raises:
        ValidationError: If the value is not ``<int>:<pubkey>:<identifier>``
    """
    parts = value.split(":", 2)
    if len(parts) != 3 or not all(parts):
        raise ValidationError("coordinate", f"'{value}' is not of the form kind:pubkey:identifier")

    kind, pubkey, identifier = parts
    if not kind.isdigit():
        raise ValidationError("coordinate", f"kind '{kind}' is not an integer")

    return Coordinate(kind=int(kind), pubkey=pubkey, identifier=identifier)


__all__ = [
    "NAMESPACE",
    "IdentifierPolicy",
    "IDENTIFIER_POLICY",
    "Coordinate",
    "coordinate",
    "namespaced_identifier",
    "canonical_identifier",
    "library_address",
    "book_address",
    "chapter_address",
    "entry_identifier",
    "parse_coordinate",
]
