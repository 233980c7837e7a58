"""workspace_model.errors

Errors raised across the build-analysis boundary.
"""

from __future__ import annotations

from typing import Iterable, Tuple


class AggregateFailure(Exception):
    """A batched failure wrapping one or more underlying causes.

    Build-analysis adapters raise this when the failure is systemic (the
    solution cannot be read, the build tool is missing) rather than specific
    to one project.
    """

    def __init__(self, causes: Iterable[BaseException], message: str = "") -> None:
        self.causes: Tuple[BaseException, ...] = tuple(causes)
        if not self.causes:
            raise ValueError("AggregateFailure requires at least one cause")
        if not message:
            message = f"{len(self.causes)} error(s) occurred: " + "; ".join(
                f"{type(c).__name__}: {c}" for c in self.causes
            )
        super().__init__(message)

    def base_exception(self) -> BaseException:
        """Return the first innermost cause, unwrapping nested aggregates."""
        current: BaseException = self
        while isinstance(current, AggregateFailure):
            current = current.causes[0]
        return current
