"""
Cassette Storage Interface.

Protocol-based interface for reading and writing named files.
Implementations: Local disk (now). Callers depend only on this contract
so another backend can be swapped in without touching them.

Error model:
- NotFound: FileNotFoundError when reading a file that is absent
- IOError: any other OSError (permission denied, disk full, mkdir failure)

Errors raised by the underlying filesystem are propagated unmodified.
"""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

StorageName = str | os.PathLike[str]


@runtime_checkable
class Storage(Protocol):
    """
    File storage port interface.

    Each operation is a one-shot call: no retries, no caching, no locking.
    """

    def read(self, name: StorageName) -> bytes:
        """
        Read the full contents of the file at name.

        Raises:
            FileNotFoundError: If no file exists at name
            OSError: If the file exists but cannot be read
        """
        ...

    def write(self, name: StorageName, data: bytes) -> None:
        """
        Write data to the file at name, replacing any existing content.

        Missing parent directories are created first.

        Raises:
            OSError: If directory creation, file creation or the write fails
        """
        ...

    def exists(self, name: StorageName) -> bool:
        """
        Check whether a file is present at name.

        Best-effort: a name that cannot be inspected is reported as absent.
        """
        ...
