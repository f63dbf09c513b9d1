"""
Notifier service interface.
"""

from abc import ABC, abstractmethod


class INotifier(ABC):
    """Fire-and-forget operator notifications."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """
        Schedule a notification and return immediately.

        Implementations must never raise to the caller.

        Args:
            message: Human-readable notification text
        """

    @abstractmethod
    async def close(self) -> None:
        """Wait for in-flight notifications and release resources."""
