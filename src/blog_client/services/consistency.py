"""Merge rules keeping list and detail projections coherent."""

from typing import Protocol, TypeVar


class Identified(Protocol):
    """Any entity carrying a server-assigned id."""

    @property
    def id(self) -> str | None:
        """Server-assigned identity."""


EntityT = TypeVar("EntityT", bound=Identified)


def prepend(items: tuple[EntityT, ...], created: EntityT) -> tuple[EntityT, ...]:
    """Place a newly created entity at the head without re-sorting."""
    return (created, *items)


def append(items: tuple[EntityT, ...], added: EntityT) -> tuple[EntityT, ...]:
    """Place an entity at the tail."""
    return (*items, added)


def replace_by_id(
    items: tuple[EntityT, ...], updated: EntityT
) -> tuple[EntityT, ...]:
    """Swap in the server representation for the entry with a matching id.

    When no entry matches, the sequence is returned unchanged.
    """
    return tuple(updated if item.id == updated.id else item for item in items)


def remove_by_id(items: tuple[EntityT, ...], target_id: str) -> tuple[EntityT, ...]:
    """Filter out the entry with the target id; repeat calls are no-ops."""
    return tuple(item for item in items if item.id != target_id)
