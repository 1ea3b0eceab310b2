"""Pytest configuration and fixtures."""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Generator

import pytest


@pytest.fixture
def other_loop() -> Generator[tuple[asyncio.AbstractEventLoop, threading.Thread], None, None]:
    """Event loop running forever in a daemon thread, stopped on teardown."""
    loop = asyncio.new_event_loop()
    thread = threading.Thread(target=loop.run_forever, name="other-loop", daemon=True)
    thread.start()
    try:
        yield loop, thread
    finally:
        loop.call_soon_threadsafe(loop.stop)
        thread.join(timeout=5)
        loop.close()
