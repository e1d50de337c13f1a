"""Global configuration loading.

Reads config.json with schema versioning. The file is edited by hand;
its values only supply defaults for CLI options and the distance
functions never read configuration.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import structlog

from levdist.infrastructure.paths import PathResolver, default_resolver

__all__ = [
    "GlobalConfig",
    "load_global_config",
]

logger = structlog.get_logger()

# Current schema version - increment when making breaking changes
# v1: Initial schema
SCHEMA_VERSION = "1"

# Maximum config file size (1MB)
MAX_CONFIG_SIZE = 1 * 1024 * 1024


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration for levdist.

    Attributes:
        default_max_distance: Bound used by `levdist distance` when --max
            is omitted. Negative means unbounded.
        suggestion_max_distance: Largest distance accepted by `levdist suggest`.
        max_suggestions: Number of suggestions shown by `levdist suggest`.
        case_sensitive: Whether `levdist suggest` compares case.
    """

    default_max_distance: int = -1
    suggestion_max_distance: int = 3
    max_suggestions: int = 3
    case_sensitive: bool = False


def load_global_config(resolver: PathResolver | None = None) -> GlobalConfig:
    """Load global configuration from a JSON file.

    Gracefully handles missing files, invalid JSON, wrongly typed values
    and oversized files by returning the default config.

    Args:
        resolver: Path resolver (defaults to default_resolver).

    Returns:
        GlobalConfig instance (uses defaults if file missing or invalid).
    """
    if resolver is None:
        resolver = default_resolver

    path = resolver.global_config()

    if not path.exists():
        logger.debug("config_not_found", path=str(path))
        return GlobalConfig()

    try:
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            logger.warning(
                "config_too_large",
                path=str(path),
                size=file_size,
                max_size=MAX_CONFIG_SIZE,
            )
            return GlobalConfig()

        content = path.read_text(encoding="utf-8")
        data = json.loads(content)
        if not isinstance(data, dict):
            raise TypeError(f"expected JSON object, got {type(data).__name__}")

        version = data.get("version")
        if version and version != SCHEMA_VERSION:
            logger.warning(
                "config_version_mismatch",
                path=str(path),
                expected=SCHEMA_VERSION,
                found=version,
            )

        return _dict_to_config(data)

    except json.JSONDecodeError as e:
        logger.warning("config_invalid_json", path=str(path), error=str(e))
        return GlobalConfig()
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("config_parse_error", path=str(path), error=str(e))
        return GlobalConfig()
    except OSError as e:
        logger.warning("config_read_error", path=str(path), error=str(e))
        return GlobalConfig()


def _dict_to_config(data: dict[str, Any]) -> GlobalConfig:
    """Convert dict to GlobalConfig.

    Raises:
        TypeError: If a field has an invalid type.
        ValueError: If max_suggestions is below 1.
    """
    defaults = GlobalConfig()

    max_suggestions = _int_field(data, "max_suggestions", defaults.max_suggestions)
    if max_suggestions < 1:
        raise ValueError("max_suggestions must be at least 1")

    case_sensitive = data.get("case_sensitive", defaults.case_sensitive)
    if not isinstance(case_sensitive, bool):
        raise TypeError("case_sensitive must be a boolean")

    return GlobalConfig(
        default_max_distance=_int_field(
            data, "default_max_distance", defaults.default_max_distance
        ),
        suggestion_max_distance=_int_field(
            data, "suggestion_max_distance", defaults.suggestion_max_distance
        ),
        max_suggestions=max_suggestions,
        case_sensitive=case_sensitive,
    )


def _int_field(data: dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer")
    return value
