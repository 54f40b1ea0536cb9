# cassette-fs — Adapters
# Concrete implementations of the ports

from cassette_fs.adapters.disk import DiskStorage, create_disk_storage

__all__ = [
    "DiskStorage",
    "create_disk_storage",
]
