"""Application-owned holder for pay-period settings with change notification."""

from __future__ import annotations

import logging
from collections.abc import Callable

from payperiods.config.defaults import default_settings
from payperiods.config.schema import PayPeriodConfig, PayPeriodSettings

logger = logging.getLogger(__name__)

Subscriber = Callable[[PayPeriodSettings], None]


class SettingsStore:
    """Current pay-period settings plus the callbacks watching them.

    The application creates one and passes it to whatever needs the
    settings. The calculation functions never consult a store; callers hand
    them ``effective_configs()``.
    """

    def __init__(self, settings: PayPeriodSettings | None = None) -> None:
        self._settings = settings if settings is not None else default_settings()
        self._subscribers: list[Subscriber] = []

    @property
    def settings(self) -> PayPeriodSettings:
        return self._settings

    def set_settings(self, settings: PayPeriodSettings | None) -> None:
        """Replace the settings and notify subscribers.

        ``None`` resets to the default disabled settings.
        """
        self._settings = settings if settings is not None else default_settings()
        self._notify()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` and call it right away with the current settings.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)
        callback(self._settings)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def is_enabled(self) -> bool:
        return self._settings.enabled

    def effective_configs(self) -> list[PayPeriodConfig]:
        """Configured income sources, or an empty list when pay periods are disabled."""
        if not self._settings.enabled:
            return []
        return list(self._settings.pay_periods)

    @staticmethod
    def default_settings() -> PayPeriodSettings:
        return default_settings()

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback(self._settings)
            except Exception:
                logger.exception("Pay period settings subscriber %r failed", callback)
