# cassette-fs — Storage capability for recorded interaction files
# Public entry points re-exported for callers

from cassette_fs.adapters.disk import DiskStorage, create_disk_storage
from cassette_fs.config import ConfigurationError, StorageSettings, load_settings
from cassette_fs.core.ports.storage import Storage, StorageName

__all__ = [
    "ConfigurationError",
    "DiskStorage",
    "Storage",
    "StorageName",
    "StorageSettings",
    "create_disk_storage",
    "load_settings",
]
