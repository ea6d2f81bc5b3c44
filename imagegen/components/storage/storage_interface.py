from abc import ABC, abstractmethod


class StorageInterface(ABC):
    """Durable byte-addressable write target for generated images."""

    @abstractmethod
    def write(self, path: str, data: bytes) -> None:
        """
        Write ``data`` to ``path`` in a single step.

        Either the whole payload ends up at ``path`` or nothing does.

        Raises:
            OSError: On exhaustion, permission denial or path issues.
        """
        pass
