"""Uniform requested/succeeded/failed protocol for remote operations."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field, replace
from typing import Any, Generic, Protocol, TypeVar

from pydantic import ValidationError

from blog_client.adapters.blog_api_client import ApiError
from blog_client.domain.operations import (
    Operation,
    OperationFailed,
    OperationStatus,
)

_logger = logging.getLogger(__name__)


class StatusSnapshot(Protocol):
    """Immutable category state that carries an operation status."""

    status: OperationStatus


StateT = TypeVar("StateT", bound=StatusSnapshot)
ResultT = TypeVar("ResultT")

Listener = Callable[[Any], None]


@dataclass
class OperationLifecycle(Generic[StateT]):
    """Owns one category's state snapshot and drives its status transitions.

    Every mutation replaces ``state`` in a single assignment, so a reader sees
    either the snapshot before an operation's merge or the one after it.
    """

    state: StateT
    listeners: list[Listener] = field(default_factory=list)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run with each new snapshot; returns an unsubscriber."""
        self.listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self.listeners:
                self.listeners.remove(listener)

        return unsubscribe

    def commit(self, state: StateT) -> None:
        """Publish a new snapshot."""
        self.state = state
        for listener in list(self.listeners):
            listener(state)

    async def run(
        self,
        operation: Operation,
        call: Callable[[], Awaitable[ResultT]],
        merge: Callable[[StateT, ResultT], StateT],
    ) -> ResultT:
        """Run a remote call through the three-phase protocol.

        ``merge`` receives the snapshot current at completion time, not the one
        seen when the call was issued. On failure the snapshot contents are
        left as they are and ``OperationFailed`` is raised.
        """
        pending = self.state.status.requested(operation)
        self.commit(replace(self.state, status=pending))
        try:
            result = await call()
        except (ApiError, ValidationError) as exc:
            reason = exc.reason if isinstance(exc, ApiError) else None
            status = self.state.status.failed(operation, reason)
            self.commit(replace(self.state, status=status))
            _logger.warning("Operation %s failed: %s", operation.tag, status.reason)
            raise OperationFailed(operation, status.reason or "") from exc

        merged = merge(self.state, result)
        self.commit(replace(merged, status=merged.status.succeeded(operation)))
        _logger.debug("Operation %s succeeded", operation.tag)
        return result

    def clear_error(self) -> None:
        """Drop the category's failure reason."""
        self.commit(replace(self.state, status=self.state.status.cleared()))
