"""Helper to run async click commands."""

import asyncio
import functools
from collections.abc import Callable, Coroutine
from typing import Any, ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")


def run_sync(command: Callable[P, Coroutine[Any, Any, R]]) -> Callable[P, R]:
    """Wrap a coroutine function so click can call it like a plain command."""

    @functools.wraps(command)
    def runner(*args: P.args, **kwargs: P.kwargs) -> R:
        return asyncio.run(command(*args, **kwargs))

    return runner
