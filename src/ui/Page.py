from abc import ABC, abstractmethod


class Page(ABC):
    """Abstract base class for the navigator's UI pages."""

    @abstractmethod
    def render(self) -> None:
        pass
