"""Error contracts: let known errors through and turn everything else into a violation."""

import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any, NoReturn

SENSITIVE_ARGUMENT_NAMES = frozenset(
    {
        "password",
        "passwd",
        "pwd",
        "secret",
        "token",
        "key",
        "private_key",
        "auth",
    }
)


class ContractViolationError(Exception):
    """Raised when a function fails with an exception it does not declare.

    Attributes
    ----------
    function_name : str | None
        Name of the function where the contract violation occurred.
    original_exception : Exception | None
        The exception that triggered the contract violation.
    context : dict[str, Any]
        Call arguments, with sensitive values redacted.
    """

    def __init__(
        self,
        message: str = "contract violation",
        *,
        function_name: str | None = None,
        original_exception: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.function_name = function_name
        self.original_exception = original_exception
        self.context = context or {}

    def __str__(self) -> str:
        parts = [super().__str__()]

        if self.function_name:
            parts.append(f"in function '{self.function_name}'")

        if self.original_exception:
            parts.append(
                f"caused by {type(self.original_exception).__name__}: {self.original_exception}"
            )

        return " ".join(parts)


def _sanitize_arguments(
    fn: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> dict[str, Any]:
    try:
        param_names = list(inspect.signature(fn).parameters)
    except (ValueError, TypeError):
        param_names = []

    sanitized_args = tuple(
        "<REDACTED>"
        if i < len(param_names) and param_names[i].lower() in SENSITIVE_ARGUMENT_NAMES
        else arg
        for i, arg in enumerate(args)
    )
    sanitized_kwargs = {
        key: "<REDACTED>" if key.lower() in SENSITIVE_ARGUMENT_NAMES else value
        for key, value in kwargs.items()
    }
    return {"args": sanitized_args, "kwargs": sanitized_kwargs}


def _default_map_err(
    err: Exception,
    fn: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> NoReturn:
    raise ContractViolationError(
        "contract violation",
        function_name=fn.__name__,
        original_exception=err,
        context=_sanitize_arguments(fn, args, kwargs),
    ) from err


def contract[R, **P](
    *,
    map_err: Callable[
        [Exception, Callable[..., Any], tuple[Any, ...], dict[str, Any]],
        NoReturn,
    ] = _default_map_err,
    known_err: tuple[type[Exception], ...] = (),
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Enforce an error handling contract on a function.

    Exceptions listed in ``known_err`` propagate unchanged; any other
    exception is handed to ``map_err``, which by default raises
    ``ContractViolationError``.

    Examples
    --------
    >>> @contract(known_err=(KeyError,))
    ... def lookup(rows: dict[str, str], key: str) -> str:
    ...     return rows[key].upper()
    >>> try:
    ...     lookup({"T": None}, "T")
    ... except ContractViolationError as e:
    ...     print(e.function_name)
    lookup
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return fn(*args, **kwargs)
            except known_err:
                raise
            except Exception as e:
                map_err(e, fn, args, kwargs)

        return wrapper

    return decorator
