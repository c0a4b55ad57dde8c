"""Interface to the host platform's restriction service.

A source is connected once, reports the current restrictions synchronously and
then pushes every change to a single registered listener.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from uxguard.models.restrictions import RestrictionSnapshot

RestrictionListener = Callable[[RestrictionSnapshot], None]


class SourceUnavailableError(RuntimeError):
    """The restriction service cannot be reached (no platform support, no permission)."""


class RestrictionSource(Protocol):
    name: str

    def connect(self) -> None:
        """Connect to the restriction service.

        Raises:
            SourceUnavailableError: If the service is missing or access is denied.
        """
        ...

    def current(self) -> RestrictionSnapshot | None:
        """Return the restrictions in effect right now, if known.

        Raises:
            SourceUnavailableError: If the service refuses access after connecting.
        """
        ...

    def register_listener(self, listener: RestrictionListener) -> None:
        """Follow changes with ``listener``; may raise SourceUnavailableError."""
        ...

    def unregister_listener(self) -> None: ...

    def disconnect(self) -> None: ...


class BaseSource:
    """Listener bookkeeping shared by the bundled sources."""

    name = "base"

    def __init__(self) -> None:
        self._listener: RestrictionListener | None = None
        self._connected = False

    @property
    def connected(self) -> bool:
        return self._connected

    def connect(self) -> None:
        self._connected = True

    def register_listener(self, listener: RestrictionListener) -> None:
        # One listener at a time; registering again replaces it
        self._listener = listener

    def unregister_listener(self) -> None:
        self._listener = None

    def disconnect(self) -> None:
        self._listener = None
        self._connected = False

    def _emit(self, snapshot: RestrictionSnapshot) -> None:
        if self._listener is not None:
            self._listener(snapshot)
