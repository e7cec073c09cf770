"""Recorded-invocation stand-ins for functions."""

from __future__ import annotations

from typing import Any, Callable


class Spy:
    """Callable that records every invocation.

    Attributes:
        identity: Label used in matcher messages.
        call_count: Number of recorded calls.
        args_for_call: One argument list per recorded call.
        original: The callable this spy replaced, if installed by spy_on().
    """

    def __init__(self, identity: str = "unknown", original: Callable[..., Any] | None = None):
        self.identity = identity
        self.original = original
        self.call_count = 0
        self.args_for_call: list[list[Any]] = []
        self._plan: Callable[..., Any] = lambda *args, **kwargs: None
        self._restore: Callable[[], None] | None = None

    @property
    def was_called(self) -> bool:
        return self.call_count > 0

    @property
    def most_recent_call(self) -> list[Any] | None:
        return self.args_for_call[-1] if self.args_for_call else None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.call_count += 1
        self.args_for_call.append(list(args))
        return self._plan(*args, **kwargs)

    def and_return(self, value: Any) -> Spy:
        self._plan = lambda *args, **kwargs: value
        return self

    def and_raise(self, error: BaseException) -> Spy:
        def _raise(*args: Any, **kwargs: Any) -> Any:
            raise error

        self._plan = _raise
        return self

    def and_call_fake(self, fake: Callable[..., Any]) -> Spy:
        self._plan = fake
        return self

    def and_call_through(self) -> Spy:
        if self.original is None:
            raise ValueError(f"Spy '{self.identity}' has no original function to call through to")
        self._plan = self.original
        return self

    def reset(self) -> None:
        self.call_count = 0
        self.args_for_call = []

    def restore(self) -> None:
        """Put the replaced attribute back when installed by spy_on()."""
        if self._restore is not None:
            self._restore()
            self._restore = None


def is_spy(value: Any) -> bool:
    return isinstance(value, Spy)


def create_spy(identity: str = "unknown") -> Spy:
    return Spy(identity)


def spy_on(obj: Any, method_name: str) -> Spy:
    """Replace ``obj.method_name`` with a spy and return it."""
    if not hasattr(obj, method_name):
        raise AttributeError(f"{method_name}() method does not exist")
    current = getattr(obj, method_name)
    if is_spy(current):
        raise ValueError(f"{method_name} has already been spied upon")

    had_own = method_name in vars(obj) if hasattr(obj, "__dict__") else False
    spy = Spy(identity=method_name, original=current)
    setattr(obj, method_name, spy)

    def _restore() -> None:
        if had_own:
            setattr(obj, method_name, current)
        else:
            delattr(obj, method_name)

    spy._restore = _restore
    return spy
