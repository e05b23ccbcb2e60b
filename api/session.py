"""
Client-side JWT session holder.

Holds the current access/refresh token pair for an API consumer, refreshes
it through an injected callback and notifies subscribers on every change.

Usage:
    holder = SessionHolder(jwt_refresh_callback("https://example.com/api/v1/token/refresh/"))
    unsubscribe = holder.subscribe(lambda session: print(session))
    holder.set_session(Session(access="...", refresh="..."))
    holder.refresh()
"""

import logging
import threading
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = 15 * 60


@dataclass(frozen=True)
class Session:
    access: str
    refresh: str


RefreshCallback = Callable[[Session], Session]
Subscriber = Callable[[Optional[Session]], None]


class SessionHolder:
    """Owns one session and the subscribers interested in it."""

    def __init__(self, refresh_callback: RefreshCallback, session: Optional[Session] = None):
        self._refresh_callback = refresh_callback
        self._session = session
        self._subscribers: List[Subscriber] = []
        self._lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._interval: Optional[float] = None

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a change listener. Returns a function that removes it."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe():
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def set_session(self, session: Optional[Session]) -> None:
        with self._lock:
            self._session = session
            subscribers = list(self._subscribers)

        for subscriber in subscribers:
            try:
                subscriber(session)
            except Exception as e:
                logger.error(f"Session subscriber failed: {e}")

    def clear(self) -> None:
        self.set_session(None)

    def refresh(self) -> Optional[Session]:
        """
        Exchange the current session for a fresh one.

        Any error from the callback clears the session. Returns the new
        session, or None when there was nothing to refresh or it failed.
        """
        current = self._session
        if current is None:
            return None

        try:
            refreshed = self._refresh_callback(current)
        except Exception as e:
            logger.warning(f"Session refresh failed, clearing session: {e}")
            self.clear()
            return None

        self.set_session(refreshed)
        return refreshed

    def start_auto_refresh(self, interval: float = DEFAULT_REFRESH_INTERVAL) -> None:
        """Refresh every `interval` seconds on a daemon timer thread."""
        with self._lock:
            self._interval = interval
            self._schedule()

    def stop_auto_refresh(self) -> None:
        with self._lock:
            self._interval = None
            if self._timer:
                self._timer.cancel()
                self._timer = None

    def _schedule(self) -> None:
        if self._timer:
            self._timer.cancel()
        self._timer = threading.Timer(self._interval, self._tick)
        self._timer.daemon = True
        self._timer.start()

    def _tick(self) -> None:
        self.refresh()
        with self._lock:
            if self._interval is not None and self._session is not None:
                self._schedule()
            else:
                self._timer = None


def jwt_refresh_callback(url: str, timeout: Optional[float] = None) -> RefreshCallback:
    """Build a refresh callback that calls the simplejwt refresh endpoint."""

    def refresh(session: Session) -> Session:
        response = requests.post(
            url,
            json={"refresh": session.refresh},
            timeout=timeout or settings.EXTERNAL_API_TIMEOUT,
        )
        response.raise_for_status()
        data = response.json()
        # Refresh token rotates only when ROTATE_REFRESH_TOKENS is on
        return replace(session, access=data["access"], refresh=data.get("refresh", session.refresh))

    return refresh
