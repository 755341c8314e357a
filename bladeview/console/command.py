"""
Base Command Class
Laravel-style command base class for the bladeview CLI
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from bladeview.blade import Blade


class Command(ABC):

    # Command name (e.g., "view:cache")
    name: str = ""

    # Command description
    description: str = ""

    # Command signature (for help display)
    signature: Optional[str] = None

    def __init__(self):
        if not self.signature:
            self.signature = self.name
        self.blade: Optional['Blade'] = None  # Injected by the Kernel

    @abstractmethod
    async def handle(self, *args, **kwargs):
        """
        Execute the command logic

        Returns:
            int: Exit code (0 for success, non-zero for error)
        """
        pass

    # Output helpers
    def info(self, message: str):
        """Print info message"""
        print(f"ℹ {message}")

    def success(self, message: str):
        """Print success message"""
        print(f"✅ {message}")

    def error(self, message: str):
        """Print error message"""
        print(f"❌ {message}")

    def warning(self, message: str):
        """Print warning message"""
        print(f"⚠ {message}")

    def line(self, message: str = ""):
        """Print plain line"""
        print(message)

    def table(self, headers: list, rows: list):
        """Print a simple table"""
        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(str(cell)))

        header_line = " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
        self.line(header_line)
        self.line("-" * len(header_line))

        for row in rows:
            self.line(" | ".join(str(cell).ljust(widths[i]) for i, cell in enumerate(row)))
