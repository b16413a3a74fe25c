"""Encoding of nested request parameters into query string pairs."""

from typing import Any


def encode_params(params: dict[str, Any] | None) -> list[tuple[str, Any]]:
    """Flatten nested parameters into bracket-style query string pairs.

    Dicts expand to ``key[subkey]`` and sequences to ``key[0]``, ``key[1]``, ...
    Booleans are sent as 1/0 and ``None`` values are dropped.

    Example:
        >>> encode_params({"vars": {"age": 30}, "ids": ["a", "b"], "x": True})
        [('vars[age]', 30), ('ids[0]', 'a'), ('ids[1]', 'b'), ('x', 1)]
    """
    pairs: list[tuple[str, Any]] = []
    if params:
        for key, value in params.items():
            _encode_recursive(str(key), value, pairs)
    return pairs


def _encode_recursive(name: str, value: Any, pairs: list[tuple[str, Any]]) -> None:
    if value is None:
        return
    if isinstance(value, dict):
        for key, item in value.items():
            _encode_recursive(f"{name}[{key}]", item, pairs)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _encode_recursive(f"{name}[{index}]", item, pairs)
    elif isinstance(value, bool):
        pairs.append((name, 1 if value else 0))
    else:
        pairs.append((name, value))
