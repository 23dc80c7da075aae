"""
PassGauge Configuration Management
==================================

Centralized configuration for the PassGauge tool using Python dataclasses
and TOML-based persistence.

The scoring contract (pool sizes, penalty weights, score thresholds) is
deliberately *not* configurable; only presentation, logging and generator
defaults are.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class MeterConfig:
    """Configuration for the strength meter and checklist display.

    The bar width is ``adjusted_entropy / full_scale_bits`` of the meter,
    clamped so that even a 0-bit password leaves a visible sliver.
    """

    full_scale_bits: float = 200.0
    min_percent: int = 6
    max_percent: int = 100
    width: int = 40
    mask_password: bool = True


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Defaults for the random password generator."""

    default_length: int = 16
    count: int = 1


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, log file and output format."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False
    output_format: str = "console"
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class GaugeConfig:
    """Master configuration aggregating all section settings.

    Usage:
        >>> config = GaugeConfig.load()                  # from default path
        >>> config = GaugeConfig.load("custom.toml")     # from custom path
        >>> print(config.generator.default_length)
        16
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    meter: MeterConfig = field(default_factory=MeterConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> GaugeConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`GaugeConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            meter=cls._build_section(MeterConfig, raw.get("meter", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> GaugeConfig:
    """Module-level convenience wrapper around :meth:`GaugeConfig.load`.

    Caches the result so that repeated calls share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = GaugeConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
