"""
Configuration module for ionmatch.

This module contains the IonMatchConfig class, which manages the matching
settings: tolerances, error units, isotope range and ion series.
"""

import logging
from typing import Dict, Any, Optional
from .constants import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class IonMatchConfig:
    """Configuration class for ion matching."""

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize a new IonMatchConfig instance.

        Args:
            config_dict: Optional dictionary containing configuration settings
        """
        self.config = DEFAULT_CONFIG.copy()

        if config_dict:
            self.update(config_dict)

    def update(self, config_dict: Dict[str, Any]) -> None:
        """
        Update configuration with new settings. Unknown keys are ignored.

        Args:
            config_dict: Dictionary containing new configuration settings
        """
        for key, value in config_dict.items():
            if key in self.config:
                self.config[key] = value
            else:
                logger.warning(f"Unknown configuration key: {key}")

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.config[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return self.config.copy()

    def is_fragment_ppm(self) -> bool:
        return str(self.config["fragment_error_units"]).lower() == "ppm"

    def is_precursor_ppm(self) -> bool:
        return str(self.config["precursor_error_units"]).lower() == "ppm"

    def __getitem__(self, key: str) -> Any:
        return self.config[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.config[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.config
