import os
import tempfile

from imagegen.components.storage.storage_interface import StorageInterface


class LocalFileStorage(StorageInterface):
    def __init__(self, create_dirs: bool = True):
        self.create_dirs = create_dirs

    def write(self, path: str, data: bytes) -> None:
        """
        Write the payload to a temp file next to ``path`` and rename it into place.
        """
        directory = os.path.dirname(os.path.abspath(path))
        if self.create_dirs:
            os.makedirs(directory, exist_ok=True)

        fd, temp_path = tempfile.mkstemp(
            dir=directory, prefix=".", suffix=".part"
        )
        try:
            with os.fdopen(fd, "wb") as temp_file:
                temp_file.write(data)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.chmod(temp_path, 0o644)
            os.replace(temp_path, path)
        except BaseException:
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise
