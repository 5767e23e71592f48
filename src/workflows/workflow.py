from abc import ABC, abstractmethod
from typing import Any, Dict


class Workflow(ABC):
    """A single user-triggered computation: dict in, result out."""

    @abstractmethod
    def run(self, input: Dict[str, Any]) -> Any:
        pass
