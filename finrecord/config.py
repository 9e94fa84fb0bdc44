"""Configuration loading.

Settings come from environment variables (a local ``.env`` file is honoured)
and risk weights from ``risk_config.json`` in the config directory. The
result is a frozen AppConfig built once at startup.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from finrecord.models import AppConfig, RiskConfig

logger = logging.getLogger(__name__)

# Resolve the data/ directory relative to this file so the server works
# regardless of which directory uvicorn is launched from.
DEFAULT_CONFIG_DIR = Path(__file__).parent.parent / "data"

load_dotenv()  # take environment variables from .env


def env_get(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def load_risk_config(config_dir: Path) -> RiskConfig:
    """Load risk weights from ``risk_config.json``, or use defaults."""
    path = config_dir / "risk_config.json"
    if not path.exists():
        logger.info(f"No risk config at {path}, using defaults")
        return RiskConfig()

    with open(path, "r") as f:
        return RiskConfig(**json.load(f))


def load_config() -> AppConfig:
    """Build the process configuration from the environment."""
    config_dir = Path(env_get("FINRECORD_CONFIG_DIR", str(DEFAULT_CONFIG_DIR)))
    defaults = AppConfig()

    return AppConfig(
        data_dir=Path(env_get("FINRECORD_DATA_DIR", str(defaults.data_dir))),
        store_filename=env_get("FINRECORD_STORE_FILENAME", defaults.store_filename),
        log_level=env_get("FINRECORD_LOG_LEVEL", defaults.log_level).upper(),
        log_file=env_get("FINRECORD_LOG_FILE") or None,
        risk=load_risk_config(config_dir),
    )
