"""Request dispatcher for the Telerivet REST API."""

import json
import os
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from telerivet._internal.http import (
    DEFAULT_API_URL,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    create_http_client,
)
from telerivet._internal.models import (
    ERROR_INVALID_PARAM,
    ERROR_NOT_FOUND,
    ApiErrorPayload,
)
from telerivet._internal.params import encode_params
from telerivet._internal.redaction import redact_params
from telerivet.cursor import ApiCursor
from telerivet.exceptions import (
    InvalidParameterError,
    NotFoundError,
    TelerivetAPIError,
    TelerivetConfigError,
)

if TYPE_CHECKING:
    from telerivet.models.entity import Entity
    from telerivet.models.organization import Organization
    from telerivet.models.project import Project

BODY_METHODS = frozenset({"POST", "PUT"})


class TelerivetClient:
    """Client for the Telerivet REST API.

    Every call is synchronous and issues exactly one HTTP request over a single
    persistent connection. The client is not safe for concurrent use from
    multiple threads.

    Use `TelerivetClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        *,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Telerivet API key.
            api_url: Base URL of the API.
            connect_timeout: Connect timeout in seconds.
            read_timeout: Read timeout in seconds.
            debug: Enable debug logging to stderr.
        """
        self._api_key = api_key
        self._api_url = api_url.rstrip("/")
        self._connect_timeout = connect_timeout
        self._read_timeout = read_timeout
        self._debug = debug
        self._num_requests = 0
        self._http: httpx.Client | None = None

    @classmethod
    def from_env(cls) -> "TelerivetClient":
        """Create a client from environment variables.

        Required environment variables:
            TELERIVET_API_KEY: The API key.

        Optional environment variables:
            TELERIVET_API_URL: The API base URL.
            TELERIVET_CONNECT_TIMEOUT_MS: Connect timeout in milliseconds.
            TELERIVET_READ_TIMEOUT_MS: Read timeout in milliseconds.
            TELERIVET_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured TelerivetClient.

        Raises:
            TelerivetConfigError: If TELERIVET_API_KEY is not set.
            ValueError: If a timeout variable is not a valid integer.
        """
        api_key = os.environ.get("TELERIVET_API_KEY")
        if not api_key:
            raise TelerivetConfigError("TELERIVET_API_KEY is not set")

        api_url = os.environ.get("TELERIVET_API_URL") or DEFAULT_API_URL
        debug = os.environ.get("TELERIVET_DEBUG", "") == "1"
        connect_timeout_ms = int(
            os.environ.get("TELERIVET_CONNECT_TIMEOUT_MS", str(int(DEFAULT_CONNECT_TIMEOUT * 1000)))
        )
        read_timeout_ms = int(
            os.environ.get("TELERIVET_READ_TIMEOUT_MS", str(int(DEFAULT_READ_TIMEOUT * 1000)))
        )

        return cls(
            api_key,
            api_url,
            connect_timeout=connect_timeout_ms / 1000,
            read_timeout=read_timeout_ms / 1000,
            debug=debug,
        )

    @property
    def num_requests(self) -> int:
        """Number of requests issued by this client."""
        return self._num_requests

    @property
    def api_url(self) -> str:
        """Base URL of the API, without a trailing slash."""
        return self._api_url

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            import sys

            print(f"[telerivet] {message}", file=sys.stderr)

    def _get_http_client(self) -> httpx.Client:
        if self._http is None:
            self._http = create_http_client(
                self._api_key,
                base_url=self._api_url,
                connect_timeout=self._connect_timeout,
                read_timeout=self._read_timeout,
            )
        return self._http

    def close(self) -> None:
        """Close the underlying connection."""
        if self._http is not None:
            self._http.close()
            self._http = None

    def __enter__(self) -> "TelerivetClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def do_request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request to the API and return the decoded JSON response.

        GET and DELETE parameters are encoded in the query string; POST and PUT
        parameters are sent as a JSON body.

        Args:
            method: HTTP method (GET, POST, PUT or DELETE).
            path: Path relative to the API URL, e.g. "/projects/PJ123".
            params: Request parameters.

        Returns:
            The decoded JSON response.

        Raises:
            InvalidParameterError: If the API rejected a parameter.
            NotFoundError: If the referenced resource does not exist.
            TelerivetAPIError: For any other API error or an undecodable response.
        """
        method = method.upper()
        has_body = method in BODY_METHODS

        request_kwargs: dict[str, Any] = {}
        if has_body:
            if params is not None:
                request_kwargs["json"] = params
        elif params:
            request_kwargs["params"] = encode_params(params)

        self._num_requests += 1
        logged = request_kwargs.get("params", params or {})
        self._log_debug(f"{method} {path} {redact_params(logged)}")

        response = self._get_http_client().request(method, path.lstrip("/"), **request_kwargs)

        try:
            result = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self._log_debug(f"Undecodable response with status {response.status_code}")
            raise TelerivetAPIError(
                f"Invalid response from API (HTTP {response.status_code}): {response.text[:200]}",
                status_code=response.status_code,
            ) from e

        if isinstance(result, dict) and "error" in result:
            raise self._build_error(result["error"], response.status_code)

        return result

    def _build_error(self, error_data: Any, status_code: int) -> TelerivetAPIError:
        """Map an `error` object from the API to an exception."""
        try:
            error = ApiErrorPayload.model_validate(error_data)
        except ValidationError:
            error = ApiErrorPayload(message=str(error_data))

        self._log_debug(f"API error {error.code}: {error.message}")

        if error.code == ERROR_INVALID_PARAM:
            error_cls: type[TelerivetAPIError] = InvalidParameterError
        elif error.code == ERROR_NOT_FOUND:
            error_cls = NotFoundError
        else:
            error_cls = TelerivetAPIError
        return error_cls(
            error.message,
            code=error.code,
            param=error.param,
            status_code=status_code,
        )

    def cursor(
        self,
        item_cls: "type[Entity] | None",
        path: str,
        params: dict[str, Any] | None = None,
    ) -> ApiCursor:
        """Create a cursor over a list endpoint."""
        return ApiCursor(self, item_cls, path, params)

    # =========================================================================
    # Projects
    # =========================================================================

    def get_project_by_id(self, id: str) -> "Project":
        """Retrieve the project with the given ID."""
        from telerivet.models.project import Project

        return Project(self, self.do_request("GET", f"/projects/{id}"))

    def init_project_by_id(self, id: str) -> "Project":
        """Initialize the project with the given ID without making an API request."""
        from telerivet.models.project import Project

        return Project(self, {"id": id}, False)

    def query_projects(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query projects accessible by the current API key.

        Args:
            params: Filters such as `name`, `sort`, `sort_dir`, `page_size`, `offset`.

        Returns:
            ApiCursor of Project.
        """
        from telerivet.models.project import Project

        return self.cursor(Project, "/projects", params)

    # =========================================================================
    # Organizations
    # =========================================================================

    def get_organization_by_id(self, id: str) -> "Organization":
        """Retrieve the organization with the given ID."""
        from telerivet.models.organization import Organization

        return Organization(self, self.do_request("GET", f"/organizations/{id}"))

    def init_organization_by_id(self, id: str) -> "Organization":
        """Initialize the organization with the given ID without making an API request."""
        from telerivet.models.organization import Organization

        return Organization(self, {"id": id}, False)

    def query_organizations(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query organizations accessible by the current API key."""
        from telerivet.models.organization import Organization

        return self.cursor(Organization, "/organizations", params)


def get_client() -> TelerivetClient:
    """Get a client configured from environment variables.

    Returns:
        A configured TelerivetClient instance.

    Raises:
        TelerivetConfigError: If TELERIVET_API_KEY is not set.
    """
    return TelerivetClient.from_env()
