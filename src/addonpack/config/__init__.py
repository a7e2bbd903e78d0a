from .loader import load_config
from .models import (
    DEFAULT_PORT,
    AddonPackConfig,
    ServerConfig,
    SyncConfig,
    TreeConfig,
)

__all__ = [
    "DEFAULT_PORT",
    "AddonPackConfig",
    "ServerConfig",
    "SyncConfig",
    "TreeConfig",
    "load_config",
]
