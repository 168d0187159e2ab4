"""Configuration store for developers and repository rosters."""

from .errors import ConfigurationError, YAMLParseError
from .loader import ConfigLoader
from .schema import Config

__all__ = ["Config", "ConfigLoader", "ConfigurationError", "YAMLParseError"]
