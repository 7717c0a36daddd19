"""Errors raised while loading configuration properties."""

MISSING_CONFIG_SOURCE_MESSAGE = "config map cannot be nil"


class ConfigError(ValueError):
    """Base class for every configuration load failure."""


class MissingConfigSourceError(ConfigError):
    """Non-local environment without a usable external key/value map."""

    def __init__(self):
        super().__init__(MISSING_CONFIG_SOURCE_MESSAGE)


class RequiredKeyMissingError(ConfigError):
    """A key with no default was absent from the resolved source."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"required config key '{key}' is missing")


class TypeCoercionError(ConfigError):
    """A present value could not be parsed into its declared type."""

    def __init__(self, key: str, value: str, expected: str):
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(f"config key '{key}' has invalid {expected} value '{value}'")
