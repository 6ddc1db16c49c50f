from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

from .model import Graph, Node

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 8
_repr.maxdict = 8


def summarize(value: Any, *, max_items: int = 5) -> str:
    """Compact repr used in DEBUG call traces."""

    if isinstance(value, Graph):
        kind = "digraph" if value.directed else "graph"
        return (
            f"{kind}({value.name or '<anonymous>'}, nodes={len(value.nodes)}, "
            f"edges={len(value.edges)}, subgraphs={len(value.subgraphs)}, layout={value.layout.value})"
        )
    if isinstance(value, Node):
        return f"Node({value.id!r} @ {value.x:.3f},{value.y:.3f})"
    if isinstance(value, np.ndarray):
        if value.size == 0 or value.size > max_items:
            if value.size == 0:
                return f"ndarray(shape={value.shape})"
            return f"ndarray(shape={value.shape}, min={float(value.min()):.4g}, max={float(value.max()):.4g})"
        return f"ndarray({_repr.repr(value.tolist())})"
    if isinstance(value, dict):
        items = [f"{summarize(k)}: {summarize(v)}" for k, v in list(value.items())[:max_items]]
        if len(value) > max_items:
            items.append("...")
        return "{" + ", ".join(items) + "}"
    if isinstance(value, (list, tuple)):
        items = [summarize(item) for item in list(value)[:max_items]]
        if len(value) > max_items:
            items.append("...")
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        return open_br + ", ".join(items) + close_br
    return _repr.repr(value)


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [summarize(arg) for arg in args]
    parts.extend(f"{key}={summarize(val)}" for key, val in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG logs on entry and exit."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.exception("Exception in %s", qualname)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, summarize(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the module-level functions of ``namespace`` with :func:`debug_log_call`."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name if isinstance(module_name, str) else __name__)
    skip_set: Set[str] = set(skip or [])

    for attr, value in list(namespace.items()):
        if attr in skip_set:
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[attr] = debug_log_call(logger, name=attr)(value)
