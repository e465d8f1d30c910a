"""Document value objects for uploaded pitch decks, business plans and CVs."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Document:
    """
    Immutable description of a file as declared by its sender.

    Attributes:
        filename: Original file name, used only for display
        content_type: Declared media type
        size: Size in bytes
    """

    filename: str
    content_type: str
    size: int

    def __post_init__(self) -> None:
        """Validate document metadata."""
        if self.size < 0:
            raise ValueError("Document size cannot be negative")

    def __str__(self) -> str:
        return f"{self.filename} ({self.content_type}, {self.size:,} bytes)"


@dataclass(frozen=True)
class StoredDocument(Document):
    """
    A document accepted by the upload handler.

    The storage key is opaque and never a filesystem path or public URL.
    """

    storage_key: str


@dataclass(frozen=True)
class DocumentUpload(Document):
    """A document held in memory on the client side before submission."""

    content: bytes = field(repr=False)

    @classmethod
    def from_bytes(cls, filename: str, content_type: str, content: bytes) -> "DocumentUpload":
        """Build an upload whose size is taken from the payload."""
        return cls(filename=filename, content_type=content_type, size=len(content), content=content)
