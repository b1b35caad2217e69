from enum import Enum
from typing import Optional, List

from pydantic import Field
from pydantic_settings import BaseSettings


class StorageBackend(str, Enum):
    LOCAL = "local"
    BLOB = "blob"


class Settings(BaseSettings):
    # Core
    environment: str = Field(default="dev")
    app_name: str = Field(default="Trip Photo API", alias="APP_NAME")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8004, alias="PORT")

    # JWT
    jwt_secret: Optional[str] = Field(default=None, alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_ttl_seconds: int = Field(default=60 * 60 * 3, alias="JWT_TTL")  # 3 hours
    require_upload_auth: bool = Field(default=True, alias="REQUIRE_UPLOAD_AUTH")

    # Uploads
    max_upload_bytes: int = Field(default=20 * 1024 * 1024, alias="MAX_UPLOAD_BYTES")
    upload_rollback: bool = Field(default=True, alias="UPLOAD_ROLLBACK")

    # Storage
    storage_provider: StorageBackend = Field(default=StorageBackend.LOCAL, alias="STORAGE_PROVIDER")
    storage_destination: Optional[str] = Field(
        default=None,
        alias="STORAGE_DESTINATION",
        description="local: root directory; blob: folder prefix inside the container",
    )
    azure_blob_connection: Optional[str] = Field(default=None, alias="AZURE_BLOB_CONNECTION")
    azure_blob_container: Optional[str] = Field(default=None, alias="AZURE_BLOB_CONTAINER")

    # HTTP
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS", description="comma-separated origins")
    rate_limit: str = Field(default="100/minute", alias="RATE_LIMIT")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(default=True, alias="JSON_LOGS")

    # Feature flags
    enable_metrics: bool = Field(default=True, alias="ENABLE_METRICS")
    enable_dummy_endpoints: bool = Field(default=True, alias="ENABLE_DUMMY_ENDPOINTS")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        populate_by_name = True

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
