"""Telerivet SDK for Python.

Client binding for the Telerivet messaging platform REST API.

Public API:
    TelerivetClient - Request dispatcher and entry point
    ApiCursor - Iterator over paginated list endpoints
    models - Entity classes (Project, Contact, Message, ...)
    exceptions - TelerivetError and subclasses

Example:
    from telerivet import TelerivetClient

    client = TelerivetClient(api_key="YOUR_API_KEY")
    project = client.init_project_by_id("PJ2ad0100c8ed3e6ea")
    project.send_message({"to_number": "+16505550123", "content": "Hello"})
"""

from telerivet._version import __version__
from telerivet.client import TelerivetClient, get_client
from telerivet.cursor import ApiCursor
from telerivet.exceptions import (
    InvalidParameterError,
    NotFoundError,
    TelerivetAPIError,
    TelerivetConfigError,
    TelerivetError,
)

__all__ = [
    "__version__",
    "TelerivetClient",
    "get_client",
    "ApiCursor",
    "TelerivetError",
    "TelerivetAPIError",
    "InvalidParameterError",
    "NotFoundError",
    "TelerivetConfigError",
]
