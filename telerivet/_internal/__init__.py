"""Internal modules for the Telerivet SDK.

These are not intended for direct use in application code.

Modules:
    http - Shared HTTP client configuration
    params - Query string parameter encoding
    models - Pydantic models for API wire payloads
    redaction - Masking of secrets in debug output
"""
