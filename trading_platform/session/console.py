"""
Line-oriented input/output ports used by the session loop.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Console(ABC):
    """Reads one line per prompt and writes lines of text"""

    @abstractmethod
    def read_line(self, prompt: str = "") -> Optional[str]:
        """Show prompt and return the next input line, or None at end of input"""
        pass

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        pass


class StdioConsole(Console):
    """Console bound to the process standard input and output"""

    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            return input(prompt)
        except EOFError:
            return None

    def write_line(self, text: str = "") -> None:
        print(text)
