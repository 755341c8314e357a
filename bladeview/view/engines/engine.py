"""
Engine Interface
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class Engine(ABC):
    """
    Interface that all view engines must implement
    """

    @abstractmethod
    def get(self, path: str, data: Dict[str, Any]) -> str:
        """
        Get the evaluated contents of the view

        Args:
            path: Resolved view file path
            data: Final merged view data

        Returns:
            Rendered output
        """
