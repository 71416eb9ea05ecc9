"""Remote feature gate for upstream integrations."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class FlagStore(Protocol):
    """Read access to remotely managed boolean switches."""

    def get(self, key: str) -> bool | None:
        """Return the switch value, or None if it is not set."""


@dataclass
class FeatureGate:
    """Runs operations only while a remote switch is on.

    The switch is read on every call, so turning it off stops upstream calls
    immediately. A missing switch counts as off.
    """

    store: FlagStore
    key: str

    def is_enabled(self) -> bool:
        """Return whether the gated integration may be called."""
        return self.store.get(self.key) is True

    def run(self, operation: Callable[[], T], default: T) -> T:
        """Return ``operation()`` when enabled, otherwise ``default``."""
        if not self.is_enabled():
            _logger.debug("Feature %s is disabled, skipping call", self.key)
            return default
        return operation()
