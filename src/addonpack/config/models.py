from pydantic import BaseModel, Field
from typing import Literal

DEFAULT_PORT = 15015


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, gt=0, lt=65536)


class TreeConfig(BaseModel):
    max_depth: int = Field(default=64, gt=0)
    escaped_contents: bool = True


class SyncConfig(BaseModel):
    hash_workers: int = Field(default=1, ge=1)


class AddonPackConfig(BaseModel):
    server: ServerConfig = Field(default_factory=ServerConfig)
    tree: TreeConfig = Field(default_factory=TreeConfig)
    sync: SyncConfig = Field(default_factory=SyncConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
