"""File storage interface for uploaded documents."""

from abc import ABC, abstractmethod


class IFileStorage(ABC):
    """
    Abstract interface for private, write-once document storage.

    Keys are opaque identifiers chosen by the storage; they never map to a
    publicly resolvable path.
    """

    @abstractmethod
    async def save(self, content: bytes, content_type: str) -> str:
        """
        Write a new object.

        Args:
            content: File bytes
            content_type: Media type recorded alongside the object

        Returns:
            Storage key of the new object

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def exists(self, storage_key: str) -> bool:
        """Check whether a key refers to a stored object."""
        pass

    @abstractmethod
    async def read(self, storage_key: str) -> bytes:
        """
        Read an object back.

        Raises:
            StorageError: If the key is unknown or the read fails
        """
        pass
