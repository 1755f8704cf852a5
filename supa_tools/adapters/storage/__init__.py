"""Storage adapter.

Provides tools for the storage service:
- List buckets, get and update storage config
- List, upload, download and delete files
- Create signed URLs
"""

from .operations import StorageOperations
from .schemas import (
    SignedUrlResult,
    StorageBucket,
    StorageConfig,
    StorageFile,
    UploadFileResult,
)
from .tools import get_storage_tools

__all__ = [
    "SignedUrlResult",
    "StorageBucket",
    "StorageConfig",
    "StorageFile",
    "StorageOperations",
    "UploadFileResult",
    "get_storage_tools",
]
