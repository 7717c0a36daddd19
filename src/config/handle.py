"""
Process-wide publication of the current Properties snapshot.

A PropertiesHandle owns one published reference. Loads are serialized and
publish by replacing the reference in a single assignment; readers never
lock and never see a partially built snapshot.
"""

import logging
import threading
from typing import Any, Optional

from .errors import ConfigError
from .properties import Properties, build_properties
from .source import resolve_source

logger = logging.getLogger(__name__)


class HandleState:
    """Lifecycle states of a PropertiesHandle"""

    UNSET = "UNSET"
    LOADING = "LOADING"
    PUBLISHED = "PUBLISHED"


class PropertiesHandle:
    """Owner of the currently published Properties snapshot."""

    def __init__(self):
        self._current: Optional[Properties] = None
        self._loading = False
        self._load_lock = threading.Lock()

    @property
    def current(self) -> Optional[Properties]:
        """Published snapshot, or None when nothing has been loaded."""
        return self._current

    @property
    def state(self) -> str:
        if self._loading:
            return HandleState.LOADING
        if self._current is None:
            return HandleState.UNSET
        return HandleState.PUBLISHED

    def get(self) -> Properties:
        """Published snapshot, falling back to default Properties when unset."""
        current = self._current
        return current if current is not None else Properties()

    def load(self, env: Optional[str], external_config: Any = None) -> Properties:
        """Resolve, build and publish a new snapshot.

        Args:
            env: Environment discriminator ("LOCAL" selects the local profile)
            external_config: Mapping or ConfigMap-like object for non-local runs

        Returns:
            The newly published Properties

        Raises:
            ConfigError: If the source is missing or a value fails to build.
                The previously published snapshot is left in place.
        """
        with self._load_lock:
            self._loading = True
            try:
                raw = resolve_source(env, external_config)
                snapshot = build_properties(raw)
            except ConfigError as e:
                logger.error(f"Failed to load properties - Env: {env!r}, Error: {str(e)}")
                raise
            finally:
                self._loading = False

            self._current = snapshot

        logger.info(
            f"Loaded properties - Source: {raw.source}, Keys: {len(raw)}, Region: {snapshot.aws_region}"
        )
        return snapshot

    def reset(self) -> None:
        """Drop the published snapshot, returning the handle to UNSET."""
        with self._load_lock:
            self._current = None


props = PropertiesHandle()


def load_properties(env: Optional[str], external_config: Any = None) -> None:
    """Load configuration into the process-wide handle.

    Raises:
        ConfigError: If the load fails; the process-wide state is unchanged
    """
    props.load(env, external_config)
