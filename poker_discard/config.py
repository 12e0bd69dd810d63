"""
config.py

Load config.yaml into typed settings.

Path resolution: explicit argument, then $POKER_DISCARD_CONFIG (a .env file
is honored), then config.yaml at the repo root. A missing file leaves the
built-in defaults in place.
"""
import copy
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from poker_discard.hand_classifier import FLUSH_TIEBREAKS

load_dotenv()

CONFIG_ENV_VAR = 'POKER_DISCARD_CONFIG'
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', 'config.yaml')

DEFAULTS: Dict[str, Dict[str, Any]] = {
    'estimator': {
        'trials': 750_000,
        'seed': None,
        'workers': 1,
        'flush_tiebreak': 'rank_sum',
    },
    'logging': {
        'level': 'INFO',
        'log_dir': 'logs',
        'log_to_file': False,
    },
}


class ConfigError(ValueError):
    """Raised for configuration values of the wrong type or out of range"""


@dataclass
class EstimatorSettings:
    trials: int = 750_000
    seed: Optional[int] = None
    workers: int = 1
    flush_tiebreak: str = 'rank_sum'

    def __post_init__(self):
        if isinstance(self.trials, bool) or not isinstance(self.trials, int) or self.trials <= 0:
            raise ConfigError(f"estimator.trials must be a positive integer, got {self.trials!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0):
            raise ConfigError(f"estimator.seed must be a non-negative integer or null, got {self.seed!r}")
        if isinstance(self.workers, bool) or not isinstance(self.workers, int) or self.workers <= 0:
            raise ConfigError(f"estimator.workers must be a positive integer, got {self.workers!r}")
        if self.flush_tiebreak not in FLUSH_TIEBREAKS:
            raise ConfigError(
                f"estimator.flush_tiebreak must be one of {FLUSH_TIEBREAKS}, got {self.flush_tiebreak!r}"
            )


@dataclass
class LoggingSettings:
    level: str = 'INFO'
    log_dir: str = 'logs'
    log_to_file: bool = False

    def __post_init__(self):
        if not isinstance(self.level, str) or self.level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ConfigError(f"logging.level is not a logging level name: {self.level!r}")
        self.level = self.level.upper()


@dataclass
class Settings:
    estimator: EstimatorSettings
    logging: LoggingSettings


def resolve_config_path(path: Optional[str] = None) -> str:
    if path:
        return path
    return os.environ.get(CONFIG_ENV_VAR) or os.path.abspath(DEFAULT_CONFIG_PATH)


def load_raw_config(path: Optional[str] = None) -> Dict[str, Dict[str, Any]]:
    """Defaults overlaid with whatever the YAML file provides"""
    config = copy.deepcopy(DEFAULTS)
    config_path = resolve_config_path(path)
    if not os.path.exists(config_path):
        return config

    with open(config_path, 'r', encoding='utf-8') as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")

    for section, values in loaded.items():
        if section not in config:
            raise ConfigError(f"Unknown config section '{section}' in {config_path}")
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ConfigError(f"Config section '{section}' must be a mapping")
        unknown = set(values) - set(config[section])
        if unknown:
            raise ConfigError(f"Unknown keys in '{section}': {', '.join(sorted(unknown))}")
        config[section].update(values)
    return config


def load_config(path: Optional[str] = None) -> Settings:
    raw = load_raw_config(path)
    return Settings(
        estimator=EstimatorSettings(**raw['estimator']),
        logging=LoggingSettings(**raw['logging']),
    )
