import asyncio

import pytest

from tripjournal.core.session import SessionState


def test_initial_state() -> None:
    assert SessionState().is_authenticated is False
    assert SessionState("abc").is_authenticated is True


def test_subscribe_emits_current_value() -> None:
    state = SessionState("abc")
    seen: list[bool] = []

    state.subscribe(seen.append)

    assert seen == [True]


def test_set_token_and_clear_notify_listeners() -> None:
    state = SessionState()
    seen: list[bool] = []
    state.subscribe(seen.append)

    state.set_token("abc")
    state.clear()

    assert seen == [False, True, False]
    assert state.access_token is None


def test_listeners_notified_in_subscription_order() -> None:
    state = SessionState()
    calls: list[str] = []
    state.subscribe(lambda _: calls.append("first"))
    state.subscribe(lambda _: calls.append("second"))
    calls.clear()

    state.set_token("abc")

    assert calls == ["first", "second"]


def test_unsubscribe_stops_notifications() -> None:
    state = SessionState()
    seen: list[bool] = []
    unsubscribe = state.subscribe(seen.append)

    unsubscribe()
    unsubscribe()
    state.set_token("abc")

    assert seen == [False]


@pytest.mark.asyncio
async def test_changes_yields_published_states() -> None:
    state = SessionState()
    changes = state.changes()
    next_change = asyncio.ensure_future(anext(changes))
    await asyncio.sleep(0)

    state.set_token("abc")
    assert await next_change is True

    state.clear()
    assert await anext(changes) is False

    await changes.aclose()
    state.set_token("def")
    assert state._queues == []  # noqa: SLF001
