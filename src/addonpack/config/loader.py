"""Locate and read the addonpack YAML config.

Candidates are tried in order: an explicit path, ``$ADDONPACK_CONFIG``,
``./addonpack.yaml``, then ``~/.addonpack/config.yaml``. The first file that
holds a non-empty document wins; nothing found means defaults.
"""

import logging
import os
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import AddonPackConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ADDONPACK_CONFIG"
PROJECT_CONFIG_NAME = "addonpack.yaml"

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def load_config(cli_path: str | None = None) -> AddonPackConfig:
    for path in _candidate_paths(cli_path):
        raw = _read_yaml(path)
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ValueError(
                f"Invalid config in {path}: top level must be a mapping, "
                f"got {type(raw).__name__}"
            )
        try:
            config = AddonPackConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
        logger.debug("Loaded config from %s", path)
        return config

    logger.debug("No config file found, using defaults")
    return AddonPackConfig()


def _candidate_paths(cli_path: str | None) -> Iterator[Path]:
    if cli_path:
        yield Path(cli_path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        yield Path(env_path)
    yield Path.cwd() / PROJECT_CONFIG_NAME
    yield Path.home() / ".addonpack" / "config.yaml"


def _read_yaml(path: Path) -> Any:
    """Parsed document at *path*, or None when the file is absent or empty."""
    if not path.is_file():
        return None
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def _expand_env_vars(obj: object) -> object:
    """Replace ``${VAR}`` in every string of a parsed document; unset vars become ''."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    return obj


DEFAULT_CONFIG_TEMPLATE = """\
# addonpack.yaml

# Add-on server
server:
  host: "0.0.0.0"
  port: 15015

# Tree ingestion
tree:
  max_depth: 64                # deeper trees are rejected as malformed
  escaped_contents: true       # file contents use the binary escape codec

# Update packs
sync:
  hash_workers: 1              # >1 hashes sibling files in a thread pool

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
