"""Observable holder for the set of currently blocked functions.

The set is recomputed from every snapshot and swapped in as a whole, so an
observer never sees a half-updated value.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable

from uxguard.models.restrictions import BlockedFunctionSet, RestrictionSnapshot
from uxguard.policy.decoder import decode
from uxguard.sources.interface import RestrictionSource, SourceUnavailableError

logger = logging.getLogger(__name__)

BlockedObserver = Callable[[BlockedFunctionSet], None]


class BlockedFunctionState:
    def __init__(self) -> None:
        self._blocked: BlockedFunctionSet = frozenset()
        self._snapshot: RestrictionSnapshot | None = None
        self._observers: list[BlockedObserver] = []
        self._source: RestrictionSource | None = None

    @property
    def blocked(self) -> BlockedFunctionSet:
        return self._blocked

    @property
    def snapshot(self) -> RestrictionSnapshot | None:
        """Last snapshot applied, if any."""
        return self._snapshot

    @property
    def connected(self) -> bool:
        return self._source is not None

    def subscribe(self, observer: BlockedObserver) -> Callable[[], None]:
        """Register ``observer`` for every replacement; returns an unsubscribe callable."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def apply(self, snapshot: RestrictionSnapshot | None) -> BlockedFunctionSet:
        """Decode ``snapshot``, install the result and notify observers."""
        blocked = decode(snapshot)
        self._snapshot = snapshot
        self._blocked = blocked
        logger.debug("Applied %s -> blocked=%s", snapshot, sorted(f.value for f in blocked))

        for observer in list(self._observers):
            observer(blocked)
        return blocked

    def attach(self, source: RestrictionSource) -> bool:
        """Connect to ``source`` and follow its updates.

        If connecting, reading the current restrictions or registering fails,
        nothing is attached and the state is driven with an explicit
        unrestricted snapshot instead. Returns whether the connection succeeded.
        """
        self.detach()
        try:
            source.connect()
            initial = source.current()
            source.register_listener(self.apply)
        except SourceUnavailableError as exc:
            logger.warning(
                "Restriction source %r unavailable, nothing blocked: %s", source.name, exc
            )
            with contextlib.suppress(SourceUnavailableError):
                source.unregister_listener()
            with contextlib.suppress(SourceUnavailableError):
                source.disconnect()
            self.apply(RestrictionSnapshot.unrestricted())
            return False

        self._source = source
        logger.info("Connected to restriction source %r", source.name)
        self.apply(initial)
        return True

    def detach(self) -> None:
        """Stop following the attached source and disconnect it."""
        if self._source is None:
            return
        source, self._source = self._source, None
        source.unregister_listener()
        source.disconnect()
