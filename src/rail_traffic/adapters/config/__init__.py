"""Configuration adapters."""

from rail_traffic.adapters.config.app_config import AppConfig
from rail_traffic.adapters.config.network_configuration_loader import (
    NetworkConfigurationError,
    NetworkConfigurationLoader,
)

__all__ = ["AppConfig", "NetworkConfigurationError", "NetworkConfigurationLoader"]
