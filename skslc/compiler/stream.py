"""
SkSL Output Streams

Destinations the code generators write into.
"""

from typing import BinaryIO, Optional


class FileOutputStream:
    """
    Binary output file with a checked close.

    Opening never raises: check `is_valid()` afterwards. Write errors are
    remembered and reported by `close()`, so an emitter can write freely and
    the caller decides once whether the artifact made it to disk.
    """

    def __init__(self, path: str):
        self.path = path
        self._file: Optional[BinaryIO] = None
        self._failed = False
        try:
            self._file = open(path, 'wb')
        except OSError:
            self._failed = True

    def is_valid(self) -> bool:
        """True while the file is open and no write has failed."""
        return self._file is not None and not self._failed

    def write(self, data: bytes) -> None:
        """Write raw bytes."""
        if not self.is_valid():
            return
        try:
            self._file.write(data)
        except OSError:
            self._failed = True

    def write_text(self, text: str) -> None:
        """Write UTF-8 encoded text."""
        self.write(text.encode('utf-8', 'surrogateescape'))

    def close(self) -> bool:
        """
        Close the file.

        Returns:
            True if the file was open, every write succeeded and the final
            flush succeeded. Closing twice returns False the second time.
        """
        if self._file is None:
            return False
        try:
            self._file.close()
        except OSError:
            self._failed = True
        self._file = None
        return not self._failed
