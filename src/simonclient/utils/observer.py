"""Generic observer list manager.

Registration, unregistration and notification of observers, shared by the
turn state machine and anything else that publishes events. Everything runs
on the session's event loop, so no locking is needed.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class ObserverManager[T: object]:
    """
    Observer list with isolated notification.

    Type Parameters:
        T: The observer protocol type (e.g., UIObserver)

    Example:
        ```python
        class MyService:
            def __init__(self):
                self._observers = ObserverManager[MyObserver](observer_type_name="my")

            def register_observer(self, observer: MyObserver) -> None:
                self._observers.register(observer)

            def _notify_something_happened(self, data):
                self._observers.notify("on_something_happened", data)
        ```
    """

    def __init__(self, observer_type_name: str = "observer"):
        """
        Initialize the observer manager.

        Args:
            observer_type_name: Name of the observer type for logging (e.g., "UI")
        """
        self._observers: list[T] = []
        self._observer_type_name = observer_type_name

    def register(self, observer: T) -> None:
        """Register an observer (idempotent - won't add duplicates)."""
        if observer not in self._observers:
            self._observers.append(observer)
            logger.info(f"Registered {self._observer_type_name} observer: {observer}")
        else:
            logger.debug(f"{self._observer_type_name} observer already registered: {observer}")

    def unregister(self, observer: T) -> None:
        """Unregister an observer."""
        if observer in self._observers:
            self._observers.remove(observer)
            logger.debug(f"Unregistered {self._observer_type_name} observer: {observer}")
        else:
            logger.warning(
                f"Attempted to unregister unknown {self._observer_type_name} observer: {observer}"
            )

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """
        Call ``callback_name`` on every registered observer.

        The observer list is copied first so observers may unregister
        themselves while being notified.

        Error Handling:
            Exceptions in observer callbacks are logged but don't affect other observers.
        """
        for observer in list(self._observers):
            try:
                callback = getattr(observer, callback_name)
                callback(*args, **kwargs)
            except AttributeError:
                logger.error(
                    f"{self._observer_type_name} observer {observer} has no method '{callback_name}'",
                    exc_info=True,
                )
            except Exception as e:
                logger.error(
                    f"Error notifying {self._observer_type_name} observer {observer} via {callback_name}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Remove all registered observers."""
        count = len(self._observers)
        self._observers.clear()
        if count > 0:
            logger.info(f"Cleared {count} {self._observer_type_name} observer(s)")

    def __contains__(self, observer: T) -> bool:
        return observer in self._observers

    def __len__(self) -> int:
        return len(self._observers)

    def __bool__(self) -> bool:
        return bool(self._observers)
