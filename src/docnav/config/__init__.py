"""Configuration loading and resolution."""

from docnav.config.load import default_config, load_config
from docnav.config.model import Config, NavOptions

__all__ = ["Config", "NavOptions", "default_config", "load_config"]
