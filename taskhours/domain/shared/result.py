"""Result monad for explicit rejection handling in aggregate operations.

Operations on the Project aggregate never raise for rules they enforce
(negative hours, the hour budget, unknown task ids). They return a Result
instead, so callers can tell an accepted mutation from a rejected one
without digging through the activity log.

Example usage:
    >>> result = project.add_task("Write docs", 3)
    >>> if isinstance(result, Ok):
    ...     print(f"Added {result.value.name}")
    ... else:
    ...     print(f"Rejected: {result.error}")
    Added Write docs
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents an accepted operation carrying its value.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a rejected operation carrying the reason.

    Attributes:
        error: The rejection reason of type E.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007

