"""Selects the raw key/value source for a configuration load."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .constants import LOCAL_ENV, LOCAL_PROFILE
from .errors import MissingConfigSourceError

logger = logging.getLogger(__name__)


class ConfigSource:
    """Provenance of a RawConfig"""

    LOCAL = "LOCAL"
    EXTERNAL = "EXTERNAL"


@dataclass(frozen=True)
class RawConfig:
    """Unparsed key/value configuration consumed once by the builder.

    Attributes:
        values: Read-only mapping of config key to raw string value
        source: ConfigSource.LOCAL or ConfigSource.EXTERNAL
    """

    values: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    source: str = ConfigSource.EXTERNAL

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)


def _freeze(values: Mapping[Any, Any]) -> Mapping[str, str]:
    return MappingProxyType(
        {str(k): v if isinstance(v, str) else str(v) for k, v in values.items() if v is not None}
    )


def extract_data(external_config: Any) -> Optional[Mapping[Any, Any]]:
    # Accept a plain mapping or a ConfigMap-like object exposing `.data`
    if external_config is None:
        return None
    if isinstance(external_config, Mapping):
        return external_config
    return getattr(external_config, "data", None)


def is_local(env: Optional[str]) -> bool:
    return bool(env) and env.upper() == LOCAL_ENV


def resolve_source(env: Optional[str], external_config: Any = None) -> RawConfig:
    """Decide which raw key/value source a load should use.

    Args:
        env: Environment discriminator; "LOCAL" (any case) selects the local profile
        external_config: Mapping or ConfigMap-like object with a `data` mapping

    Returns:
        RawConfig holding either the fixed local profile or the supplied values

    Raises:
        MissingConfigSourceError: If env is not local and no usable map was supplied
    """
    if is_local(env):
        if external_config is not None:
            logger.info("LOCAL environment selected; ignoring supplied config map")
        return RawConfig(values=_freeze(LOCAL_PROFILE), source=ConfigSource.LOCAL)

    data = extract_data(external_config)
    if not data:
        raise MissingConfigSourceError()

    return RawConfig(values=_freeze(data), source=ConfigSource.EXTERNAL)
