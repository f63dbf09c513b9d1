"""
Webhook notifier.

Sends operator notifications as GET {webhook}{message} in detached tasks.
"""

import asyncio
import logging
from typing import Optional, Set

import httpx

from relais.domain.services.i_notifier import INotifier
from relais.infrastructure.monitoring import metrics

logger = logging.getLogger(__name__)


class WebhookNotifier(INotifier):
    """
    Fire-and-forget webhook notifier.

    Each notification runs in its own asyncio task. The notifier keeps a
    strong reference to every task until it completes. Failures are logged
    and counted, never raised.

    Attributes:
        webhook_url: Webhook prefix; the message is appended verbatim
        timeout: HTTP request timeout in seconds
    """

    def __init__(self, webhook_url: str, timeout: float = 5.0):
        """
        Initialize webhook notifier.

        Args:
            webhook_url: Webhook prefix (e.g., "https://hooks.example/notify?text=")
            timeout: HTTP request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None
        self._tasks: Set[asyncio.Task] = set()

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                limits=httpx.Limits(max_connections=5, max_keepalive_connections=2),
            )
        return self._client

    @property
    def in_flight(self) -> int:
        """Number of notifications not yet finished."""
        return len(self._tasks)

    def notify(self, message: str) -> None:
        """
        Schedule a notification and return immediately.

        Args:
            message: Human-readable notification text
        """
        try:
            task = asyncio.get_running_loop().create_task(self._send(message))
        except RuntimeError:
            metrics.notifications_total.labels(outcome="dropped").inc()
            logger.warning(f"No running event loop, dropped notification: {message}")
            return

        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _send(self, message: str) -> None:
        url = f"{self.webhook_url}{message}"
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except Exception as e:
            metrics.notifications_total.labels(outcome="failed").inc()
            logger.warning(f"Notification failed: {e}", exc_info=True)
            return

        metrics.notifications_total.labels(outcome="sent").inc()
        logger.debug(f"Notification sent: {message}")

    async def close(self) -> None:
        """Wait for in-flight notifications and close HTTP client."""
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
