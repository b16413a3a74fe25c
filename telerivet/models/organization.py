"""Telerivet organization."""

from typing import Any

from telerivet.cursor import ApiCursor
from telerivet.models.entity import Entity, RemoteField
from telerivet.models.project import Project


class Organization(Entity):
    """Represents a Telerivet organization.

    Fields:
        id: ID of the organization (read-only)
        name: Name of the organization (updatable)
        timezone_id: Billing quota time zone ID (updatable)
    """

    id = RemoteField()
    name = RemoteField(writable=True)
    timezone_id = RemoteField(writable=True)

    def create_project(self, params: dict[str, Any]) -> Project:
        """Create a new project.

        Args:
            params: Project settings: `name` (required), `timezone_id`,
                `url_slug`, `auto_create_contacts`, `vars`.

        Returns:
            The created Project.
        """
        return Project(self._api, self._api.do_request("POST", self.get_base_api_path() + "/projects", params))

    def get_billing_details(self) -> dict[str, Any]:
        """Retrieve information about the organization's service plan and account balance."""
        return self._api.do_request("GET", self.get_base_api_path() + "/billing")

    def get_usage(self, usage_type: str) -> Any:
        """Retrieve the current usage count for a metric on the organization's billing plan.

        Args:
            usage_type: One of `phones`, `projects`, `active_services`, `users`,
                `contacts`, `messages_day`, `stored_messages`, `data_rows`,
                `api_requests_day`.
        """
        return self._api.do_request("GET", self.get_base_api_path() + f"/usage/{usage_type}")

    def get_message_stats(self, params: dict[str, Any]) -> dict[str, Any]:
        """Retrieve statistics about messages sent or received via Telerivet.

        Args:
            params: `start_date` and `end_date` (required, YYYY-MM-DD),
                optional `rollup`, `properties`, `metrics`, `filters`.
        """
        return self._api.do_request("GET", self.get_base_api_path() + "/message_stats", params)

    def query_projects(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query projects in this organization.

        Returns:
            ApiCursor of Project.
        """
        return self._api.cursor(Project, self.get_base_api_path() + "/projects", params)

    def get_base_api_path(self) -> str:
        return f"/organizations/{self.get('id')}"
