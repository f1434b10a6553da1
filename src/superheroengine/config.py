"""Configuration with defaults for SuperheroEngine."""

import os
from dataclasses import dataclass, replace
from pathlib import Path


# Bundled sample dataset shipped with the package
BUNDLED_DATA_PATH = Path(__file__).resolve().parent / "data" / "superheroes.json"

# Env overrides
DATA_PATH_ENV = "SUPERHEROES_DATA"
LOG_LEVEL_ENV = "SUPERHEROES_LOG_LEVEL"


@dataclass(frozen=True)
class Config:
    """Default config: where heroes come from, how loud to log, where cards go."""

    # Data
    data_path: str | None = None  # None = bundled superheroes.json

    # Logging (CLI only; library modules never configure handlers)
    log_level: str = "WARNING"

    # Comparison card output
    card_outpath: str = "outputs/compare.png"

    def resolved_data_path(self) -> Path:
        """Path to the hero JSON, falling back to the bundled dataset."""
        return Path(self.data_path) if self.data_path else BUNDLED_DATA_PATH


# Singleton default config; override via env or explicit args in APIs
DEFAULT_CONFIG = Config()


def config_from_env(base: Config | None = None) -> Config:
    """Return base (or DEFAULT_CONFIG) with SUPERHEROES_* env overrides applied."""
    cfg = base or DEFAULT_CONFIG
    overrides = {}
    data_path = os.environ.get(DATA_PATH_ENV, "").strip()
    if data_path:
        overrides["data_path"] = data_path
    log_level = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if log_level:
        overrides["log_level"] = log_level.upper()
    return replace(cfg, **overrides) if overrides else cfg
