"""Tests for the in-memory greeting store."""

from __future__ import annotations

import threading

from greeting_service.application.use_cases import get_greeting, update_greeting
from greeting_service.config import DEFAULT_GREETING
from greeting_service.domain.entities import Greeting
from greeting_service.infrastructure.greeting_store import GreetingStore


def test_store_starts_with_default_greeting() -> None:
    store = GreetingStore()
    assert store.get() == DEFAULT_GREETING == "Hello, World"


def test_store_returns_latest_value() -> None:
    store = GreetingStore("first")
    store.set("second")
    store.set("third")
    assert store.get() == "third"
    assert store.snapshot() == Greeting(message="third")


def test_use_cases_read_and_replace_greeting() -> None:
    store = GreetingStore()

    updated = update_greeting(store, "Hola")

    assert updated == Greeting(message="Hola")
    assert get_greeting(store) == Greeting(message="Hola")


def test_concurrent_writers_leave_one_of_the_written_values() -> None:
    """Readers never see anything other than a fully written value."""

    store = GreetingStore()
    values = [f"greeting-{index}-" + "x" * index for index in range(32)]
    allowed = set(values) | {DEFAULT_GREETING}
    observed: list[str] = []
    start = threading.Barrier(len(values) + 1)

    def writer(value: str) -> None:
        start.wait()
        for _ in range(200):
            store.set(value)

    def reader() -> None:
        start.wait()
        for _ in range(2000):
            observed.append(store.get())

    threads = [threading.Thread(target=writer, args=(value,)) for value in values]
    threads.append(threading.Thread(target=reader))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.get() in values
    assert set(observed) <= allowed
