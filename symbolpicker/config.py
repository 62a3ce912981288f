"""
Configuration — Centralized settings for symbol loading

Config hierarchy (highest to lowest priority):
  1. Environment variables
  2. Project config (.symbolpicker/config.yaml)
  3. User config (~/.symbolpicker/config.yaml)
  4. Defaults

Configuration is read-only at runtime: nothing here writes files.
"""

import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from .core.catalog import DEFAULT_STRATEGY, list_strategies
from .core.platform import parse_version


SECTIONS = ("catalog", "platform", "loader")


@dataclass
class CatalogConfig:
    """Live system catalog settings."""
    strategy: str = DEFAULT_STRATEGY  # "availability" | "ordered" | "none"
    bundle_paths: List[str] = field(default_factory=list)  # Searched before system paths

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        valid = list_strategies()
        if self.strategy not in valid:
            return f"Unknown catalog strategy '{self.strategy}'. Valid: {', '.join(valid)}"
        return None


@dataclass
class PlatformConfig:
    """Host platform override. Unset fields mean auto-detect."""
    name: Optional[str] = None     # e.g. "ios", "macos"
    version: Optional[str] = None  # e.g. "17.0"

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if self.version and not parse_version(self.version):
            return f"Invalid platform version '{self.version}'. Use dotted digits (e.g., '17.0')"
        return None


@dataclass
class LoaderConfig:
    """Loader behavior."""
    strict: bool = False  # Raise when the bundled fallback cannot be read


@dataclass
class Config:
    """Application configuration."""
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    platform: PlatformConfig = field(default_factory=PlatformConfig)
    loader: LoaderConfig = field(default_factory=LoaderConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display."""
        return {
            "catalog": {
                "strategy": self.catalog.strategy,
                "bundle_paths": list(self.catalog.bundle_paths)
            },
            "platform": {
                "name": self.platform.name,
                "version": self.platform.version
            },
            "loader": {
                "strict": self.loader.strict
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary. Invalid values fall back to defaults."""
        catalog_data = _section(data, "catalog")
        platform_data = _section(data, "platform")
        loader_data = _section(data, "loader")

        bundle_paths = catalog_data.get("bundle_paths") or []
        if isinstance(bundle_paths, str):
            bundle_paths = [bundle_paths]
        elif not isinstance(bundle_paths, list):
            bundle_paths = []

        name = platform_data.get("name")
        version = platform_data.get("version")

        config = cls(
            catalog=CatalogConfig(
                strategy=str(catalog_data.get("strategy", DEFAULT_STRATEGY)),
                bundle_paths=[str(p) for p in bundle_paths]
            ),
            platform=PlatformConfig(
                name=str(name) if name is not None else None,
                version=str(version) if version is not None else None
            ),
            loader=LoaderConfig(
                strict=_to_bool(loader_data.get("strict", False))
            )
        )

        if config.catalog.validate():
            config.catalog.strategy = DEFAULT_STRATEGY
        if config.platform.validate():
            config.platform.version = None

        return config

    def validate(self) -> Optional[str]:
        """Validate all sections. Returns first error message or None."""
        for section in (self.catalog, self.platform):
            error = section.validate()
            if error:
                return error
        return None


class ConfigManager:
    """
    Manages configuration loading.

    Hierarchy:
      1. Environment variables
      2. Project config (.symbolpicker/config.yaml)
      3. User config (~/.symbolpicker/config.yaml)
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".symbolpicker"
    USER_CONFIG_FILE = USER_CONFIG_DIR / "config.yaml"
    PROJECT_CONFIG_DIR = ".symbolpicker"
    PROJECT_CONFIG_FILE = "config.yaml"

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_DIR / self.PROJECT_CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.USER_CONFIG_FILE

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        # Start with defaults
        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        config_data = self._merge(config_data, self._read_yaml(self.user_config_path))

        # Layer 2: Project config (higher priority)
        config_data = self._merge(config_data, self._read_yaml(self.project_config_path))

        # Scalar or list sections read as empty
        for section in SECTIONS:
            config_data[section] = _section(config_data, section)

        # Layer 3: Environment overrides
        if os.environ.get("SYMBOLPICKER_CATALOG"):
            config_data.setdefault("catalog", {})["strategy"] = os.environ["SYMBOLPICKER_CATALOG"].lower()
        if os.environ.get("SYMBOLPICKER_BUNDLE_PATH"):
            env_paths = [p for p in os.environ["SYMBOLPICKER_BUNDLE_PATH"].split(os.pathsep) if p]
            config_data.setdefault("catalog", {})["bundle_paths"] = env_paths
        if os.environ.get("SYMBOLPICKER_PLATFORM"):
            config_data.setdefault("platform", {})["name"] = os.environ["SYMBOLPICKER_PLATFORM"]
        if os.environ.get("SYMBOLPICKER_OS_VERSION"):
            config_data.setdefault("platform", {})["version"] = os.environ["SYMBOLPICKER_OS_VERSION"]
        if os.environ.get("SYMBOLPICKER_STRICT"):
            config_data.setdefault("loader", {})["strict"] = os.environ["SYMBOLPICKER_STRICT"]

        self._config = Config.from_dict(config_data)
        return self._config

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        """Read a YAML mapping; missing or malformed files read as empty."""
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            return {}  # Ignore malformed config
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value by dotted key (e.g., "catalog.strategy")."""
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return None

        section, setting = parts

        if section == "catalog":
            if setting == "strategy":
                return config.catalog.strategy
            elif setting == "bundle_paths":
                return os.pathsep.join(config.catalog.bundle_paths)
        elif section == "platform":
            if setting == "name":
                return config.platform.name
            elif setting == "version":
                return config.platform.version
        elif section == "loader":
            if setting == "strict":
                return str(config.loader.strict).lower()

        return None

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()

        bundle_paths = ", ".join(config.catalog.bundle_paths) or "(system default)"
        lines = [
            "Configuration:",
            "",
            "Catalog:",
            f"  Strategy: {config.catalog.strategy}",
            f"  Bundle paths: {bundle_paths}",
            "",
            "Platform:",
            f"  Name: {config.platform.name or 'auto'}",
            f"  Version: {config.platform.version or 'auto'}",
            "",
            "Loader:",
            f"  Strict: {config.loader.strict}",
            "",
            "Config files:",
            f"  User: {self.user_config_path}",
            f"  Project: {self.project_config_path}",
        ]

        return "\n".join(lines)


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Get a config section, treating anything but a mapping as empty."""
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _to_bool(value: Any) -> bool:
    """Coerce YAML/env values to bool."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes", "on")


# Convenience function
def get_config(project_dir: Optional[Path] = None) -> Config:
    """Load configuration for a project."""
    return ConfigManager(project_dir).load()
