from abc import ABC, abstractmethod
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from protoc_gui.compiler.process_runner import ExecutionResult


class ICommandRunner(ABC):
    """
    Interface for running an external command in the infrastructure layer.
    """

    @abstractmethod
    def run(self, executable: str, args: List[str]) -> "ExecutionResult":
        """
        Run the executable once and wait for it to exit.

        Args:
            executable: Program name or path, resolved through PATH.
            args: Arguments passed after the program name.

        Returns:
            ExecutionResult with the captured stdout/stderr and the
            error description when the run failed.
        """
        pass
