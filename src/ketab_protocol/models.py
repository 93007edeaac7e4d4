"""
Data models for Ketab Protocol events.

Content models are serialized into the ``content`` field of an event. Field
declaration order is the serialization order, and optional fields that are
None are left out of the JSON entirely.
"""

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError


class ContentModel(BaseModel):
    """Base class for event content structs."""
    model_config = {"frozen": True}

    def __init__(self, **data):
        """Construct the model, reporting the first bad field as a ValidationError.

        Raises:
            ValidationError: With ``field`` set to ``content.<dotted path>``
        """
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            error = e.errors()[0]
            path = ".".join(str(part) for part in error["loc"])
            raise ValidationError(
                f"content.{path}",
                error["msg"],
                details={"model": type(self).__name__, "errors": e.errors()},
            ) from e

    def to_content(self) -> str:
        """Serialize to the compact JSON string stored in an event's content."""
        return self.model_dump_json(exclude_none=True)

    @classmethod
    def from_content(cls, content: str):
        """Decode an event content string back into the typed model."""
        return cls.model_validate_json(content)


class LibraryContent(ContentModel):
    """Library event content (kind 38890)."""
    name: str = Field(description="Library name")
    description: str = Field(description="Library description")
    website_url: str | None = Field(default=None, description="Library website URL")
    relay_url: str | None = Field(default=None, description="Library relay URL")
    founder_pubkey: str = Field(description="Founder (librarian) pubkey")
    protocol_version: str = Field(description="Ketab Protocol version")
    ref_library_pubkey: str = Field(description="Reference to library pubkey")
    ref_library_id: str = Field(description="Reference to library ID")
    ref_clock_pubkey: str = Field(description="Reference to City Protocol clock pubkey")
    ref_block_id: str = Field(description="Reference to block event identifier")
    book_count: int = Field(description="Total books")
    reader_count: int = Field(description="Total unique readers")
    chapter_count: int = Field(description="Total chapters across all books")


class BookContent(ContentModel):
    """Book event content (kind 38891).

    ``chapters`` holds chapter addresses in reading order and its length
    must equal ``chapter_count``.
    """
    title: str
    subtitle: str | None = None
    description: str
    dedication: str | None = None
    author: str = Field(description="Author display name; identity is the event pubkey")
    cover_image_url: str | None = None
    published_at: int = Field(description="Unix timestamp")
    chapter_count: int
    chapters: tuple[str, ...] = Field(default=(), description="Ordered chapter addresses")
    ref_book_pubkey: str = Field(description="Must match the event pubkey")
    ref_book_id: str
    ref_library_pubkey: str | None = Field(default=None, description="Author's primary library pubkey")
    ref_library_id: str | None = Field(default=None, description="Author's primary library ID")
    ref_block_id: str | None = None


class ChapterContent(ContentModel):
    """Chapter event content (kind 30023).

    All chapter metadata lives in content rather than in long-form tags.
    """
    title: str
    published_at: int
    body: str = Field(description="Markdown chapter body")


class LibraryEntryContent(ContentModel):
    """Library Entry event content (kind 38892)."""
    notes: str | None = None
    rating: int | None = None
    tags: tuple[str, ...] | None = None
    added_at: int = Field(description="Unix timestamp when added to the library")
    read_status: str | None = Field(default=None, description='e.g. "unread", "reading", "completed"')
    ref_library_owner_pubkey: str
    ref_library_id: str
    ref_book_coordinate: str = Field(description="38891:<author_pubkey>:<book_id>")
    ref_book_pubkey: str
    ref_book_id: str
    ref_block_id: str | None = None


class UnsignedEvent(BaseModel):
    """An event ready for signing: everything except ``id`` and ``sig``."""
    model_config = {"frozen": True}

    kind: int
    pubkey: str
    created_at: int
    tags: list[list[str]] = Field(default_factory=list)
    content: str = ""

    def tag_values(self, name: str) -> list[str]:
        """Return the first value of every tag called ``name``, in order."""
        return [tag[1] for tag in self.tags if len(tag) >= 2 and tag[0] == name]

    def first_tag_value(self, name: str) -> str | None:
        """Return the first value of the first tag called ``name``."""
        values = self.tag_values(name)
        return values[0] if values else None

    def to_dict(self) -> dict:
        """Convert to the wire dictionary."""
        return self.model_dump()

    def to_json(self) -> str:
        """Convert to compact wire JSON."""
        return self.model_dump_json()


class SignedEvent(UnsignedEvent):
    """A signed event as it travels between relays."""
    id: str = Field(description="64-char hex event id")
    sig: str = Field(description="128-char hex Schnorr signature")

    def unsigned(self) -> UnsignedEvent:
        """Drop ``id`` and ``sig``."""
        return UnsignedEvent(**self.model_dump(exclude={"id", "sig"}))

    @classmethod
    def from_dict(cls, data: dict) -> "SignedEvent":
        """Create from a wire dictionary."""
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, data: str) -> "SignedEvent":
        """Create from wire JSON."""
        return cls.model_validate_json(data)


class LibraryEvent(BaseModel):
    """Parsed Library event."""
    model_config = {"frozen": True}

    library_id: str
    founder_pubkey: str
    content: LibraryContent
    event_id: str
    created_at: int


class BookEvent(BaseModel):
    """Parsed Book event."""
    model_config = {"frozen": True}

    book_id: str
    author_pubkey: str
    content: BookContent
    event_id: str
    created_at: int


class ChapterEvent(BaseModel):
    """Parsed Chapter event."""
    model_config = {"frozen": True}

    chapter_id: str
    author_pubkey: str
    content: ChapterContent
    event_id: str
    created_at: int


class LibraryEntryEvent(BaseModel):
    """Parsed Library Entry event."""
    model_config = {"frozen": True}

    entry_id: str
    library_owner_pubkey: str
    content: LibraryEntryContent
    event_id: str
    created_at: int


__all__ = [
    "ContentModel",
    "LibraryContent",
    "BookContent",
    "ChapterContent",
    "LibraryEntryContent",
    "UnsignedEvent",
    "SignedEvent",
    "LibraryEvent",
    "BookEvent",
    "ChapterEvent",
    "LibraryEntryEvent",
]
