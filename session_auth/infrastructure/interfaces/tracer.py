from abc import ABC, abstractmethod
import typing as t


F = t.TypeVar("F", bound=t.Callable[..., t.Any])

class ITracer(ABC):
    @staticmethod
    @abstractmethod
    def start_span(name: str) -> t.ContextManager[t.Any]:
        """Returns span context manager"""

    @staticmethod
    @abstractmethod
    def traced(func: F) -> F:
        """
        Decorator that wraps a function in a span named after its qualname.
        Implementations must support both sync and async functions.
        """
