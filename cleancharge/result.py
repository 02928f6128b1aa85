from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from cleancharge.errors import GenerationError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: GenerationError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        """Re-raise the wrapped error for callers that prefer exceptions."""
        raise self.error


Result = Union[Success[T], Failure]
