"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition and timing tests.
"""

import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial

ConcurrentRunner = Callable[[list[Callable[[], Any]]], list[Any]]


def _run_concurrently(tasks: list[Callable[[], Any]]) -> list[Any]:
    """
    Run tasks on separate threads released together by a barrier.

    Returns each task's result, or the exception it raised, in task order.
    """
    barrier = threading.Barrier(len(tasks))

    def release_then(task: Callable[[], Any]) -> Any:
        barrier.wait()
        try:
            return task()
        except Exception as e:
            return e

    with ThreadPoolExecutor(max_workers=len(tasks)) as executor:
        futures = [executor.submit(release_then, task) for task in tasks]
        return [f.result() for f in futures]


@pytest.fixture
def run_concurrently() -> ConcurrentRunner:
    """Barrier-synchronized thread runner."""
    return _run_concurrently
