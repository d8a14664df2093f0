"""Port: Configuration provider — supply linter configuration."""

from abc import ABC, abstractmethod
from typing import Any


class ConfigProviderPort(ABC):
    """Contract for providing configuration to the application.

    The concrete return type is ``Any`` at the domain level; the config
    package's ``LinterConfig`` provides the typed contract.
    """

    @abstractmethod
    def get_config(self) -> Any:
        """Return the current linter configuration object."""
        ...
