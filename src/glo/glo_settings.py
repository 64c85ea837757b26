"""Glo Config Loader (YAML tunables with constant fallbacks)."""
from pathlib import Path
from typing import Any

import yaml

from src.glo.glo_config import (
    K_FLOOR,
    K_HOLE,
    K_PLAYER_DEFAULT,
    K_SCALE,
    K_SPREAD,
    K_THRESHOLD,
    MAX_RETURN,
    MIN_RETURN,
    R_WEIGHT,
    RD,
    TOLERANCE,
)

# flat name -> (yaml section, yaml key, default)
_SETTINGS: dict[str, tuple[str, str, float]] = {
    "rd": ("rating", "rd", RD),
    "r_weight": ("rating", "r_weight", R_WEIGHT),
    "k_hole": ("k_factor", "hole", K_HOLE),
    "k_player_default": ("k_factor", "player_default", K_PLAYER_DEFAULT),
    "k_threshold": ("k_factor", "threshold", K_THRESHOLD),
    "k_scale": ("k_factor", "scale", K_SCALE),
    "k_floor": ("k_factor", "floor", K_FLOOR),
    "k_spread": ("k_factor", "spread", K_SPREAD),
    "min_return": ("solver", "min_return", MIN_RETURN),
    "max_return": ("solver", "max_return", MAX_RETURN),
    "tolerance": ("solver", "tolerance", TOLERANCE),
}


class GloConfig:
    """YAML-based Glo configuration.

    Every tunable falls back to the constant in ``glo_config`` when the
    YAML file (or a section of it) is missing. Keyword overrides win over
    both, so tests and tuning runs can do ``GloConfig(r_weight=0.3)``.
    """

    DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "glo_config.yaml"

    def __init__(self, config_path: Path | str | None = None, **overrides: float):
        path = Path(config_path) if config_path else self.DEFAULT_CONFIG_PATH
        if config_path or path.exists():
            with open(path, encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
        else:
            self._config = {}
        self._values = self._resolve(overrides)

    @classmethod
    def from_dict(cls, data: dict[str, Any], **overrides: float) -> "GloConfig":
        """Build a config from an already-parsed mapping (same shape as the YAML)."""
        config = cls.__new__(cls)
        config._config = dict(data)
        config._values = config._resolve(overrides)
        return config

    def _resolve(self, overrides: dict[str, float]) -> dict[str, float]:
        unknown = set(overrides) - set(_SETTINGS)
        if unknown:
            raise KeyError(f"Unknown Glo setting(s): {', '.join(sorted(unknown))}")
        values = {}
        for name, (section, key, default) in _SETTINGS.items():
            if name in overrides:
                values[name] = float(overrides[name])
            else:
                values[name] = float((self._config.get(section) or {}).get(key, default))
        return values

    def replace(self, **overrides: float) -> "GloConfig":
        """Copy of this config with some values replaced."""
        merged = {**self._values, **overrides}
        return GloConfig.from_dict(self._config, **merged)

    def as_dict(self) -> dict[str, float]:
        return dict(self._values)

    @property
    def version(self) -> str:
        return str(self._config.get("version", "builtin"))

    @property
    def rd(self) -> float:
        return self._values["rd"]

    @property
    def r_weight(self) -> float:
        return self._values["r_weight"]

    @property
    def k_hole(self) -> float:
        return self._values["k_hole"]

    @property
    def k_player_default(self) -> float:
        return self._values["k_player_default"]

    @property
    def k_threshold(self) -> float:
        return self._values["k_threshold"]

    @property
    def k_scale(self) -> float:
        return self._values["k_scale"]

    @property
    def k_floor(self) -> float:
        return self._values["k_floor"]

    @property
    def k_spread(self) -> float:
        return self._values["k_spread"]

    @property
    def min_return(self) -> float:
        return self._values["min_return"]

    @property
    def max_return(self) -> float:
        return self._values["max_return"]

    @property
    def tolerance(self) -> float:
        return self._values["tolerance"]


DEFAULT_CONFIG = GloConfig()
