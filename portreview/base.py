from typing import List, Callable, TypeAlias
from dataclasses import dataclass
from types import TracebackType
import logging


@dataclass
class OnExitCallback:
    value: Callable[[], None]


@dataclass
class OnFailureCallback:
    value: Callable[[BaseException], None]


Callback: TypeAlias = OnExitCallback | OnFailureCallback


class Scope:
    """
    Runs deferred cleanup callbacks in reverse registration order when the
    `with` block exits. A callback that raises is logged and the remaining
    callbacks still run; the exception leaving the block is never replaced.
    """

    def __init__(self) -> None:
        self.deferred: List[Callback] = []

    def defer(self, fn: Callable[[], None]) -> None:
        self.deferred.append(OnExitCallback(fn))

    def on_failure(self, fn: Callable[[BaseException], None]) -> None:
        self.deferred.append(OnFailureCallback(fn))

    def __enter__(self) -> 'Scope':
        assert len(self.deferred) == 0
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        for callback in self.deferred[::-1]:
            match callback:
                case OnExitCallback(fn):
                    try:
                        fn()
                    except Exception as e:
                        logging.warning(f"Error during deferred cleanup: {e}")
                case OnFailureCallback(fn):
                    if value is None:
                        continue
                    try:
                        fn(value)
                    except Exception as e:
                        logging.warning(f"Error during deferred cleanup: {e}")
        self.deferred.clear()
