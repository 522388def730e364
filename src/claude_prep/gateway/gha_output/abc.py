"""Abstract base class for publishing values to later workflow steps."""

from abc import ABC, abstractmethod


class GhaOutput(ABC):
    @abstractmethod
    def set_output(self, key: str, value: str) -> None:
        """Publish a step output (`steps.<id>.outputs.<key>`).

        Raises:
            RuntimeError: If the output file is not configured
        """
        ...

    @abstractmethod
    def export_variable(self, key: str, value: str) -> None:
        """Export an environment variable for subsequent steps.

        Raises:
            RuntimeError: If the environment file is not configured
        """
        ...
