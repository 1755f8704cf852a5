"""Storage tools.

Bucket listing, storage config, and file management.
"""

from supa_tools.base import (
    Tool,
    ToolAnnotations,
    ensure_writable,
    injectable_tool,
    success_response,
    tool_map,
)

from .operations import StorageOperations
from .schemas import (
    CreateSignedUrlInput,
    DeleteFileInput,
    DownloadFileInput,
    GetStorageConfigInput,
    ListFilesInput,
    ListStorageBucketsInput,
    SignedUrlResult,
    StorageBucket,
    StorageConfig,
    StorageFile,
    UpdateStorageConfigInput,
    UploadFileInput,
    UploadFileResult,
)


def get_storage_tools(
    storage: StorageOperations,
    project_id: str | None = None,
    read_only: bool = False,
) -> dict[str, Tool]:
    """Build the storage tool set."""

    async def list_storage_buckets(params: ListStorageBucketsInput) -> list[StorageBucket]:
        return await storage.list_all_buckets(params.project_id)

    async def get_storage_config(params: GetStorageConfigInput) -> StorageConfig:
        return await storage.get_storage_config(params.project_id)

    async def update_storage_config(params: UpdateStorageConfigInput) -> dict[str, bool]:
        ensure_writable(read_only, "update storage config")
        await storage.update_storage_config(params.project_id, params.config)
        return success_response()

    async def list_files(params: ListFilesInput) -> list[StorageFile]:
        return await storage.list_files(params.project_id, params.bucket, params.path)

    async def upload_file(params: UploadFileInput) -> UploadFileResult:
        ensure_writable(read_only, "upload file")
        return await storage.upload_file(
            params.project_id, params.bucket, params.path, params.content, params.content_type
        )

    async def download_file(params: DownloadFileInput) -> SignedUrlResult:
        return await storage.download_file(params.project_id, params.bucket, params.path)

    async def delete_file(params: DeleteFileInput) -> dict[str, bool]:
        ensure_writable(read_only, "delete files")
        await storage.delete_file(params.project_id, params.bucket, params.paths)
        return success_response()

    async def create_signed_url(params: CreateSignedUrlInput) -> SignedUrlResult:
        return await storage.create_signed_url(
            params.project_id, params.bucket, params.path, params.expires_in
        )

    inject = {"project_id": project_id}

    def reading(title: str, idempotent: bool = True) -> ToolAnnotations:
        return ToolAnnotations(
            title=title,
            read_only_hint=True,
            destructive_hint=False,
            idempotent_hint=idempotent,
            open_world_hint=False,
        )

    return tool_map(
        injectable_tool(
            name="list_storage_buckets",
            description="Lists all storage buckets in a Supabase project.",
            annotations=reading("List storage buckets"),
            parameters=ListStorageBucketsInput,
            inject=inject,
            execute=list_storage_buckets,
        ),
        injectable_tool(
            name="get_storage_config",
            description="Get the storage config for a Supabase project.",
            annotations=reading("Get storage config"),
            parameters=GetStorageConfigInput,
            inject=inject,
            execute=get_storage_config,
        ),
        injectable_tool(
            name="update_storage_config",
            description="Update the storage config for a Supabase project.",
            annotations=ToolAnnotations(
                title="Update storage config",
                read_only_hint=False,
                destructive_hint=True,
                idempotent_hint=False,
                open_world_hint=False,
            ),
            parameters=UpdateStorageConfigInput,
            inject=inject,
            execute=update_storage_config,
        ),
        injectable_tool(
            name="list_files",
            description="Lists all files in a storage bucket.",
            annotations=reading("List files"),
            parameters=ListFilesInput,
            inject=inject,
            execute=list_files,
        ),
        injectable_tool(
            name="upload_file",
            description="Uploads a file to a storage bucket. Content should be base64 encoded.",
            annotations=ToolAnnotations(
                title="Upload file",
                read_only_hint=False,
                destructive_hint=False,
                idempotent_hint=False,
                open_world_hint=True,
            ),
            parameters=UploadFileInput,
            inject=inject,
            execute=upload_file,
        ),
        injectable_tool(
            name="download_file",
            description="Gets a signed URL to download a file from storage.",
            annotations=reading("Download file"),
            parameters=DownloadFileInput,
            inject=inject,
            execute=download_file,
        ),
        injectable_tool(
            name="delete_file",
            description="Deletes one or more files from a storage bucket.",
            annotations=ToolAnnotations(
                title="Delete file",
                read_only_hint=False,
                destructive_hint=True,
                idempotent_hint=False,
                open_world_hint=True,
            ),
            parameters=DeleteFileInput,
            inject=inject,
            execute=delete_file,
        ),
        injectable_tool(
            name="create_signed_url",
            description="Creates a signed URL for temporary access to a file.",
            annotations=reading("Create signed URL", idempotent=False),
            parameters=CreateSignedUrlInput,
            inject=inject,
            execute=create_signed_url,
        ),
    )
