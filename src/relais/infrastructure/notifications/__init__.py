"""
Notification infrastructure.
"""

from relais.infrastructure.notifications.webhook_notifier import WebhookNotifier

__all__ = ["WebhookNotifier"]
