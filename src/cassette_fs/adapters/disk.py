"""
Local Disk Storage Adapter.

Implements the Storage interface using the local operating system filesystem.
Names are plain filesystem paths; when a base path is configured, relative
names resolve under it.

Behaviors:
- write creates the parent directory chain (mode 0o755) when it is missing
- write truncates an existing file, there is no atomic replace
- exists reports every stat failure as absent
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from cassette_fs.config import DEFAULT_DIR_MODE, ENV_BASE_PATH, StorageSettings
from cassette_fs.core.ports.storage import StorageName

logger = logging.getLogger(__name__)


class DiskStorage:
    """
    Local disk implementation of Storage.

    Stateless apart from its configuration, so one instance may be shared
    across threads. Concurrent writes to the same name are not coordinated.
    """

    def __init__(
        self,
        base_path: str | Path | None = None,
        *,
        dir_mode: int = DEFAULT_DIR_MODE,
    ) -> None:
        """
        Initialize disk storage.

        Args:
            base_path: Directory that relative names resolve against
                (None uses names exactly as given)
            dir_mode: Permission bits for directories created by write
        """
        self.base_path = Path(base_path) if base_path is not None else None
        self.dir_mode = dir_mode

    def resolve(self, name: StorageName) -> Path:
        """Return the filesystem path a name maps to."""
        path = Path(name)
        if self.base_path is None or path.is_absolute():
            return path
        return self.base_path / path

    def read(self, name: StorageName) -> bytes:
        """Read the full contents of the file at name."""
        with open(self.resolve(name), "rb") as f:
            return f.read()

    def write(self, name: StorageName, data: bytes) -> None:
        """Write data to the file at name, creating parent directories."""
        target = self.resolve(name)
        self._ensure_directory(target.parent)

        with open(target, "wb") as f:
            f.write(data)

        logger.debug("Wrote %d bytes to %s", len(data), target)

    def _ensure_directory(self, directory: Path) -> None:
        """Create every missing directory in the chain with dir_mode."""
        # Only FileNotFoundError marks a level as missing; other stat errors propagate
        missing: list[Path] = []
        current = directory
        while True:
            try:
                os.stat(current)
                break
            except FileNotFoundError:
                missing.append(current)
                if current.parent == current:
                    break
                current = current.parent

        # os.makedirs only applies mode to the leaf, so create top-down
        for path in reversed(missing):
            logger.debug("Creating directory %s (mode %o)", path, self.dir_mode)
            try:
                os.mkdir(path, self.dir_mode)
            except FileExistsError:
                pass

    def exists(self, name: StorageName) -> bool:
        """Check whether a file is present at name."""
        target = self.resolve(name)
        try:
            os.stat(target)
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.debug("Treating %s as absent: %s", target, e)
            return False
        return True


def create_disk_storage(
    base_path: str | Path | None = None,
    *,
    settings: StorageSettings | None = None,
    env_var: str = ENV_BASE_PATH,
) -> DiskStorage:
    """
    Factory function to create DiskStorage from config.

    Args:
        base_path: Explicit base path (overrides settings and env var)
        settings: Loaded settings supplying base path and directory mode
        env_var: Environment variable consulted when no base path is given

    Returns:
        Configured DiskStorage instance
    """
    dir_mode = DEFAULT_DIR_MODE

    if settings is not None:
        dir_mode = settings.dir_mode
        if base_path is None:
            base_path = settings.base_path

    if base_path is None:
        base_path = os.environ.get(env_var) or None

    return DiskStorage(base_path, dir_mode=dir_mode)
