def unwrap_or[T](v: T | None, default: T) -> T:
    """Unwraps the value if it is not None, otherwise returns the default value.

    Examples
    --------
    >>> unwrap_or("T", "")
    'T'
    >>> unwrap_or(None, "")
    ''
    """
    if v is None:
        return default
    return v
