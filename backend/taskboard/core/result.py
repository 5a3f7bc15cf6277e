"""Result Type — explicit success/failure values for expected outcomes.

Invariants:
    - Ok carries the success value, Err carries a recoverable TaskboardError
    - Stores never raise for authorization, validation, not-found or empty-listing
      outcomes; they return Err
    - Non-recoverable storage failures are raised, never wrapped in Err

Design Decisions:
    - Two frozen dataclasses over a single class with flags: isinstance() checks
      read naturally at call sites and the type checker narrows the union
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from taskboard.core.errors import TaskboardError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: TaskboardError

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def unwrap(result: "Result[T]") -> T:
    """Return the Ok value or raise the Err's error."""
    if isinstance(result, Err):
        raise result.error
    return result.value
