# cassette-fs — Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from cassette_fs.core.ports.storage import Storage, StorageName

__all__ = [
    "Storage",
    "StorageName",
]
