"""Shared behaviour of in-memory repositories."""

import copy
from typing import Any


class InMemoryRepository:
    """Base for in-memory repositories.

    State lives in flat containers of immutable models, so a shallow
    copy of each container is a full snapshot.
    """

    def snapshot(self) -> dict[str, Any]:
        """Capture the repository state."""
        return {name: copy.copy(value) for name, value in vars(self).items()}

    def restore(self, state: dict[str, Any]) -> None:
        """Roll the repository back to a snapshot."""
        for name, value in state.items():
            setattr(self, name, value)
