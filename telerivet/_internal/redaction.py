"""Redaction of sensitive values in debug output.

Request parameters are logged either as nested mappings (POST/PUT bodies) or
as flattened query pairs such as `route_params[webhook_secret]`. Both forms
are redacted by key name.
"""

import re
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "secret",
    "status_secret",
    "webhook_secret",
    "password",
    "token",
    "auth_token",
    "access_token",
    "authorization",
    "private_key",
    "credentials",
})

REDACTED_VALUE = "[REDACTED]"

_NAME_SEGMENT = re.compile(r"[^\[\]]+")


def is_sensitive_key(key: Any) -> bool:
    """Return True if a parameter name refers to a secret.

    A flattened name like `route_params[webhook_secret]` or `secret[0]` is
    sensitive if any of its segments is.
    """
    if not isinstance(key, str):
        return False
    return any(segment.lower() in REDACT_KEYS for segment in _NAME_SEGMENT.findall(key))


def redact_params(params: Any) -> Any:
    """Return a copy of request parameters with secret values masked.

    Accepts nested dicts and lists, or the list of `(name, value)` pairs
    produced by `encode_params`. The input is never mutated.
    """
    if isinstance(params, dict):
        return {
            key: REDACTED_VALUE if is_sensitive_key(key) else redact_params(value)
            for key, value in params.items()
        }
    if isinstance(params, (list, tuple)):
        if params and all(isinstance(item, tuple) and len(item) == 2 for item in params):
            return [
                (name, REDACTED_VALUE if is_sensitive_key(name) else value)
                for name, value in params
            ]
        return [redact_params(item) for item in params]
    return params
