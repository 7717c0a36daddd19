"""
Typed configuration properties for the IAM role controller
"""

from .account import discover_account_id
from .bootstrap import bootstrap
from .errors import (
    ConfigError,
    MissingConfigSourceError,
    RequiredKeyMissingError,
    TypeCoercionError,
)
from .handle import HandleState, PropertiesHandle, load_properties, props
from .properties import Properties, build_properties
from .source import ConfigSource, RawConfig, resolve_source

__all__ = [
    "discover_account_id",
    "bootstrap",
    "ConfigError",
    "MissingConfigSourceError",
    "RequiredKeyMissingError",
    "TypeCoercionError",
    "HandleState",
    "PropertiesHandle",
    "load_properties",
    "props",
    "Properties",
    "build_properties",
    "ConfigSource",
    "RawConfig",
    "resolve_source",
]
