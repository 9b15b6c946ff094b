from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from typing import TypeAlias

AuthListener: TypeAlias = Callable[[bool], None]


class SessionState:
    """In-memory access token with an observable authentication flag.

    Every assignment of the token notifies subscribers with whether a token
    is now held. Listeners run synchronously, in subscription order.

    Example:
        >>> state = SessionState()
        >>> unsubscribe = state.subscribe(print)
        False
        >>> state.set_token("abc")
        True
        >>> unsubscribe()
    """

    def __init__(self, access_token: str | None = None) -> None:
        self._access_token = access_token
        self._listeners: list[AuthListener] = []
        self._queues: list[asyncio.Queue[bool]] = []

    @property
    def access_token(self) -> str | None:
        return self._access_token

    @property
    def is_authenticated(self) -> bool:
        return self._access_token is not None

    def set_token(self, access_token: str | None) -> None:
        self._access_token = access_token
        self._notify()

    def clear(self) -> None:
        self.set_token(None)

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Register a listener and call it with the current state.

        Returns:
            A callable that removes the listener. Calling it twice is a no-op.
        """
        self._listeners.append(listener)
        listener(self.is_authenticated)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def changes(self) -> AsyncIterator[bool]:
        """Yield each authentication state published after iteration starts."""
        queue: asyncio.Queue[bool] = asyncio.Queue()
        self._queues.append(queue)
        try:
            while True:
                yield await queue.get()
        finally:
            self._queues.remove(queue)

    def _notify(self) -> None:
        value = self.is_authenticated
        for listener in list(self._listeners):
            listener(value)
        for queue in self._queues:
            queue.put_nowait(value)
