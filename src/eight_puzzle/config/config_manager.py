"""Hydra-backed configuration loading for the 8-puzzle solver."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import DictConfig, OmegaConf, open_dict

from .validators import validate_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "conf"

# Most recently loaded configuration
_global_config: Optional[DictConfig] = None


class ConfigManager:
    """Loads, validates and edits solver configuration through Hydra."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_dir: Directory holding ``config.yaml``. Defaults to the
                configuration shipped inside the package.
        """
        self.config_dir = Path(config_dir if config_dir is not None else DEFAULT_CONFIG_DIR).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.exists():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        logger.debug(f"Configuration manager using config_dir: {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[List[str]] = None,
                    validate: bool = True) -> DictConfig:
        """Compose the configuration, applying command-line style overrides.

        Args:
            config_name: Config file name without ``.yaml``
            overrides: Overrides such as ``["search.check_solvability=true"]``
            validate: Run ``validate_config`` on the result

        Returns:
            The composed configuration

        Raises:
            ConfigValidationError: If validation is requested and fails
        """
        GlobalHydra.instance().clear()

        try:
            with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
                cfg = compose(config_name=config_name, overrides=overrides or [])
        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")
            raise

        if validate:
            validate_config(cfg)

        self.config = cfg
        global _global_config
        _global_config = cfg

        logger.info(f"Configuration loaded: {config_name}")
        if overrides:
            logger.info(f"Applied overrides: {overrides}")
        return cfg

    def _require_config(self) -> DictConfig:
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")
        return self.config

    def get_config(self) -> Optional[DictConfig]:
        return self.config

    def update_config(self, updates: Dict[str, Any]) -> None:
        """Set several dotted keys at once."""
        config = self._require_config()
        with open_dict(config):
            for key, value in updates.items():
                OmegaConf.update(config, key, value)
        logger.info(f"Configuration updated with: {updates}")

    def save_config(self, output_path: Union[str, Path]) -> None:
        """Write the current configuration as YAML."""
        config = self._require_config()
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        OmegaConf.save(config, output_path)
        logger.info(f"Configuration saved to: {output_path}")

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Read a dotted key such as ``search.max_nodes_expanded``."""
        config = self._require_config()
        return OmegaConf.select(config, key, default=default)

    def set_parameter(self, key: str, value: Any) -> None:
        config = self._require_config()
        with open_dict(config):
            OmegaConf.update(config, key, value)
        logger.debug(f"Parameter set: {key} = {value}")

    def to_yaml(self, resolve: bool = True) -> str:
        return OmegaConf.to_yaml(self._require_config(), resolve=resolve)


def load_config(config_name: str = "config",
                overrides: Optional[List[str]] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load configuration through a fresh ConfigManager.

    Args:
        config_name: Name of the main config file
        overrides: List of configuration overrides
        config_dir: Configuration directory (packaged default if None)
        validate: Whether to validate the configuration

    Returns:
        Loaded configuration
    """
    manager = ConfigManager(config_dir)
    return manager.load_config(config_name, overrides, validate)


def get_config() -> Optional[DictConfig]:
    """Return the most recently loaded configuration, if any."""
    return _global_config


def get_parameter(key: str, default: Any = None) -> Any:
    """Read a dotted key from the global configuration."""
    config = get_config()
    if config is None:
        logger.warning("No global configuration loaded")
        return default
    return OmegaConf.select(config, key, default=default)


class ConfigContext:
    """Context manager applying temporary changes to the global configuration."""

    def __init__(self, **changes):
        """Initialize with temporary configuration changes.

        Args:
            **changes: Dotted keys (passed via ``**{'search.x': 1}``) and values
        """
        self.changes = changes
        self.original_values: Dict[str, Any] = {}
        self.config = get_config()

    def __enter__(self) -> DictConfig:
        if self.config is None:
            raise RuntimeError("No global configuration loaded")

        for key in self.changes:
            self.original_values[key] = OmegaConf.select(self.config, key)

        with open_dict(self.config):
            for key, value in self.changes.items():
                OmegaConf.update(self.config, key, value)
        return self.config

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.config is None:
            return
        with open_dict(self.config):
            for key, value in self.original_values.items():
                OmegaConf.update(self.config, key, value)
