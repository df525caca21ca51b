"""
Observer dispatch for completed actions.

Actions are named ``"<Component>.<action>"``. A ``Sync`` registered for an
action runs after that action completes and receives an ``ActionEvent``
with the inputs and the result. By default syncs only fire on success.
Follow-up results are reported back but never alter the triggering
action's result.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from chordcraft.core.result import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionEvent:
    action: str
    inputs: dict[str, Any]
    result: Result[Any]

    @property
    def succeeded(self) -> bool:
        return isinstance(self.result, Ok)


SyncHandler = Callable[[ActionEvent], Awaitable[Result[Any]]]


@dataclass(frozen=True)
class Sync:
    """``then`` runs whenever ``when`` completes (successfully, unless ``on_error`` is set)."""
    name: str
    when: str
    then: SyncHandler
    on_error: bool = False

    def matches(self, event: ActionEvent) -> bool:
        return event.action == self.when and (event.succeeded or self.on_error)


@dataclass
class SyncOutcome:
    sync: str
    result: Result[Any]


@dataclass
class SyncEngine:
    _syncs: dict[str, list[Sync]] = field(default_factory=lambda: defaultdict(list))

    def register(self, sync: Sync) -> None:
        self._syncs[sync.when].append(sync)
        logger.debug(f"Registered sync {sync.name} on {sync.when}")

    def syncs_for(self, action: str) -> list[Sync]:
        return list(self._syncs.get(action, []))

    async def dispatch(self, event: ActionEvent) -> list[SyncOutcome]:
        """Run every matching sync in registration order."""
        outcomes: list[SyncOutcome] = []
        for sync in self._syncs.get(event.action, []):
            if not sync.matches(event):
                continue
            try:
                result = await sync.then(event)
            except Exception as e:
                logger.error(f"Sync {sync.name} raised after {event.action}: {e}", exc_info=True)
                result = Err(ErrorKind.UPSTREAM_FAILURE, str(e))
            if isinstance(result, Err):
                logger.warning(f"Sync {sync.name} failed after {event.action}: {result.message}")
            else:
                logger.debug(f"Sync {sync.name} completed after {event.action}")
            outcomes.append(SyncOutcome(sync=sync.name, result=result))
        return outcomes

    async def perform(
        self,
        action: str,
        fn: Callable[..., Awaitable[Result[Any]]],
        **inputs: Any,
    ) -> Result[Any]:
        """Run ``fn(**inputs)`` as ``action`` and dispatch its completion."""
        result = await fn(**inputs)
        await self.dispatch(ActionEvent(action=action, inputs=inputs, result=result))
        return result
