"""Engine configuration."""

from __future__ import annotations
from typing import Dict, Any, Optional
from dataclasses import dataclass
from pathlib import Path
import os


WORKERS_ENV_VAR = "RASTER_MAX_WORKERS"


def default_max_workers() -> int:
    """Worker count from the environment, else hardware parallelism."""
    env = os.environ.get(WORKERS_ENV_VAR)
    if env:
        return int(env)
    return os.cpu_count() or 1


@dataclass
class EngineConfig:
    """
    Process-wide engine configuration.

    Attributes:
        max_workers: Upper bound on row workers per operation
        debug: Enable debug output (same effect as RASTER_DEBUG=1)
    """
    max_workers: Optional[int] = None
    debug: bool = False

    def __post_init__(self):
        if self.max_workers is None:
            self.max_workers = default_max_workers()
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'EngineConfig':
        """Create EngineConfig from dictionary."""
        max_workers = cfg.get('max_workers')
        return cls(
            max_workers=int(max_workers) if max_workers is not None else None,
            debug=bool(cfg.get('debug', False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'max_workers': self.max_workers,
            'debug': self.debug,
        }


_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    """Return the process-wide default configuration, creating it on first use."""
    global _config
    if _config is None:
        _config = EngineConfig()
    return _config


def set_config(config: Optional[EngineConfig]):
    """Replace the process-wide default configuration (None resets it)."""
    global _config
    _config = config


def load_config(config_path: str) -> EngineConfig:
    """
    Load engine configuration from YAML.

    The file may hold the settings at top level or under an ``engine`` section.

    Args:
        config_path: Path to YAML config file

    Returns:
        EngineConfig

    Raises:
        FileNotFoundError: If the file does not exist
    """
    from omegaconf import OmegaConf

    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = OmegaConf.load(config_path)
    section = config.engine if "engine" in config else config
    return EngineConfig.from_dict(OmegaConf.to_container(section, resolve=True))
