"""Environment loading and typed getters for the service settings.

File Priority (highest to lowest):
1. .env.local (local overrides, gitignored)
2. .env (base configuration, committed)
3. Environment variables set by hosting platform
"""

import os
import logging
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def load_environment(env_dir: Optional[Union[str, Path]] = None) -> list:
    """Load environment variables from .env files.

    Args:
        env_dir: Directory containing .env files. Defaults to current directory.

    Returns:
        Names of the files that were loaded
    """
    env_dir = Path.cwd() if env_dir is None else Path(env_dir)

    # Load files in reverse priority order (last loaded wins)
    env_files = [
        env_dir / ".env",          # Base configuration
        env_dir / ".env.local",    # Local overrides
    ]

    loaded_files = []
    for env_file in env_files:
        if env_file.exists():
            load_dotenv(env_file, override=True)
            loaded_files.append(env_file.name)
            logger.debug(f"Loaded environment from {env_file}")

    if loaded_files:
        logger.info(f"Environment loaded from: {', '.join(loaded_files)}")
    else:
        logger.debug("No .env files found")
    return loaded_files


TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


def get_env_bool(key: str, default: bool = False) -> bool:
    """DEBUG-style flag; unrecognised values give the default"""
    value = os.getenv(key, "").strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return default


def _get_env_number(key: str, default, cast):
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Invalid {cast.__name__} value for {key}={raw!r}, using default: {default}")
        return default


def get_env_int(key: str, default: int = 0) -> int:
    """Integer setting such as PORT"""
    return _get_env_number(key, default, int)


def get_env_float(key: str, default: float = 0.0) -> float:
    """Float setting such as ELECTRICITY_PRICE_PER_KWH"""
    return _get_env_number(key, default, float)


def get_env_list(key: str, separator: str = ",", default: Optional[list] = None) -> list:
    """Separator-delimited setting such as ALLOWED_ORIGINS; blank items are dropped"""
    value = os.getenv(key, "")
    if not value.strip():
        return [] if default is None else default
    return [item.strip() for item in value.split(separator) if item.strip()]
