"""Storage adapter Pydantic schemas.

Config records keep the storage API's camelCase keys on the wire.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from supa_tools.base import ProjectScopedInput


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# DOMAIN VALUE OBJECTS
# ============================================================================


class StorageBucket(BaseModel):
    """Storage bucket."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    owner: str | None = None
    created_at: str
    updated_at: str
    public: bool


class FeatureToggle(_CamelModel):
    enabled: bool


class StorageFeatures(_CamelModel):
    image_transformation: FeatureToggle
    s3_protocol: FeatureToggle


class StorageConfig(_CamelModel):
    """Project-wide storage settings."""

    file_size_limit: int
    features: StorageFeatures


class StorageFile(BaseModel):
    """Object in a bucket."""

    model_config = ConfigDict(frozen=True)

    name: str
    id: str | None = None
    updated_at: str | None = None
    created_at: str | None = None
    last_accessed_at: str | None = None
    metadata: dict[str, Any] | None = None


class UploadFileResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str


class SignedUrlResult(_CamelModel):
    model_config = ConfigDict(frozen=True)

    signed_url: str


# ============================================================================
# TOOL INPUT SCHEMAS
# ============================================================================


class ListStorageBucketsInput(ProjectScopedInput):
    """Input schema for list_storage_buckets."""


class GetStorageConfigInput(ProjectScopedInput):
    """Input schema for get_storage_config."""


class UpdateStorageConfigInput(ProjectScopedInput):
    """Input schema for update_storage_config."""

    config: StorageConfig


class ListFilesInput(ProjectScopedInput):
    """Input schema for list_files."""

    bucket: str = Field(..., description="Name of the storage bucket")
    path: str | None = Field(None, description="Path prefix to filter files")


class UploadFileInput(ProjectScopedInput):
    """Input schema for upload_file."""

    bucket: str = Field(..., description="Name of the storage bucket")
    path: str = Field(..., description="Path where the file will be stored")
    content: str = Field(..., description="Base64 encoded file content")
    content_type: str | None = Field(
        None, description="MIME type of the file (e.g., image/png)"
    )


class DownloadFileInput(ProjectScopedInput):
    """Input schema for download_file."""

    bucket: str = Field(..., description="Name of the storage bucket")
    path: str = Field(..., description="Path to the file")


class DeleteFileInput(ProjectScopedInput):
    """Input schema for delete_file."""

    bucket: str = Field(..., description="Name of the storage bucket")
    paths: list[str] = Field(..., description="Array of file paths to delete")


class CreateSignedUrlInput(ProjectScopedInput):
    """Input schema for create_signed_url."""

    bucket: str = Field(..., description="Name of the storage bucket")
    path: str = Field(..., description="Path to the file")
    expires_in: int = Field(
        ..., description="Expiration time in seconds (e.g., 3600 for 1 hour)"
    )
