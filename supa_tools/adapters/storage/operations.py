"""Storage capability interface."""

from typing import Protocol

from .schemas import (
    SignedUrlResult,
    StorageBucket,
    StorageConfig,
    StorageFile,
    UploadFileResult,
)


class StorageOperations(Protocol):
    """Bucket, config and file operations on the storage service."""

    async def get_storage_config(self, project_id: str) -> StorageConfig: ...

    async def update_storage_config(self, project_id: str, config: StorageConfig) -> None: ...

    async def list_all_buckets(self, project_id: str) -> list[StorageBucket]: ...

    async def list_files(
        self, project_id: str, bucket: str, path: str | None = None
    ) -> list[StorageFile]: ...

    async def upload_file(
        self,
        project_id: str,
        bucket: str,
        path: str,
        content: str,
        content_type: str | None = None,
    ) -> UploadFileResult: ...

    async def download_file(self, project_id: str, bucket: str, path: str) -> SignedUrlResult: ...

    async def delete_file(self, project_id: str, bucket: str, paths: list[str]) -> None: ...

    async def create_signed_url(
        self, project_id: str, bucket: str, path: str, expires_in: int
    ) -> SignedUrlResult: ...
