"""
Configuration management for the gesture recognizer service.

Engine constants (point count, LUT resolution) are fixed in
qgesture.normalize and are not configurable here.
"""
import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .types import HIGH_CONFIDENCE


CONFIG_ENV_VAR = "QGESTURE_CONFIG"


@dataclass
class RecognizerConfig:
    """Recognizer behaviour settings."""
    load_defaults: bool = True
    high_confidence_threshold: float = HIGH_CONFIDENCE


@dataclass
class ServerConfig:
    """HTTP adapter settings."""
    host: str = "127.0.0.1"
    port: int = 8000
    title: str = "Gesture Recognizer"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"


@dataclass
class Cfg:
    """Main configuration class."""
    recognizer: RecognizerConfig
    server: ServerConfig
    logging: LoggingConfig


def default_config_path() -> Path:
    """Path of config.default.yaml in the project root."""
    return Path(__file__).parent.parent / "config.default.yaml"


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses $QGESTURE_CONFIG (a .env file
            is honoured) and then config.default.yaml

    Returns:
        Configuration object with all settings
    """
    if path is None:
        load_dotenv()
        path = os.getenv(CONFIG_ENV_VAR) or default_config_path()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    return _dict_to_config(data)


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object; missing keys keep their defaults."""
    recognizer_data = data.get('recognizer') or {}
    recognizer = RecognizerConfig(
        load_defaults=bool(recognizer_data.get('load_defaults', True)),
        high_confidence_threshold=float(recognizer_data.get('high_confidence_threshold', HIGH_CONFIDENCE))
    )

    server_data = data.get('server') or {}
    server = ServerConfig(
        host=server_data.get('host', "127.0.0.1"),
        port=int(server_data.get('port', 8000)),
        title=server_data.get('title', "Gesture Recognizer"),
        cors_origins=list(server_data.get('cors_origins', ["*"]))
    )

    logging_data = data.get('logging') or {}
    logging_cfg = LoggingConfig(
        level=str(logging_data.get('level', "INFO")).upper()
    )

    return Cfg(
        recognizer=recognizer,
        server=server,
        logging=logging_cfg
    )
