"""Telerivet automated service."""

from typing import TYPE_CHECKING, Any

from telerivet.cursor import ApiCursor
from telerivet.models.contact_service_state import ContactServiceState
from telerivet.models.entity import Entity, RemoteField

if TYPE_CHECKING:
    from telerivet.models.contact import Contact


class Service(Entity):
    """Represents an automated service on Telerivet.

    Services can be invoked on messages, contacts, data rows or the project
    itself, and may keep per-contact state.

    Fields:
        id: ID of the service (read-only)
        name: Name of the service (updatable)
        service_type: Type of the service (read-only)
        active: Whether the service is active or inactive (updatable)
        priority: Order in which services are evaluated (updatable)
        contexts: Contexts in which the service can be invoked (read-only)
        vars: Custom variables (updatable)
    """

    id = RemoteField()
    name = RemoteField(writable=True)
    service_type = RemoteField()
    active = RemoteField(writable=True)
    priority = RemoteField(writable=True)
    contexts = RemoteField()
    response_table_id = RemoteField(writable=True)
    phone_ids = RemoteField(writable=True)
    apply_mode = RemoteField(writable=True)
    contact_number_filter = RemoteField(writable=True)
    show_action = RemoteField(writable=True)
    direction = RemoteField(writable=True)
    message_types = RemoteField(writable=True)
    project_id = RemoteField()

    def invoke(self, params: dict[str, Any]) -> dict[str, Any]:
        """Manually invoke this service in a particular context.

        Args:
            params: `context` (required), plus `event`, `message_id`,
                `contact_id`, `phone_id`, `variables` or `route_id` depending
                on the context.

        Returns:
            Dict with `return_value`, `log_entries`, `errors`, `sent_messages`
            and `airtime_transactions`.
        """
        return self._api.do_request("POST", self.get_base_api_path() + "/invoke", params)

    def get_contact_state(self, contact: "Contact") -> ContactServiceState:
        """Get the current state for a particular contact for this service."""
        return ContactServiceState(
            self._api,
            self._api.do_request("GET", self.get_base_api_path() + f"/states/{contact.id}"),
        )

    def set_contact_state(self, contact: "Contact", params: dict[str, Any]) -> ContactServiceState:
        """Initialize or update the current state for a particular contact for this service.

        Args:
            contact: The contact whose state to set.
            params: `id` (the state, required) and optional `vars`.
        """
        return ContactServiceState(
            self._api,
            self._api.do_request("POST", self.get_base_api_path() + f"/states/{contact.id}", params),
        )

    def reset_contact_state(self, contact: "Contact") -> ContactServiceState:
        """Reset the current state for a particular contact for this service."""
        return ContactServiceState(
            self._api,
            self._api.do_request("DELETE", self.get_base_api_path() + f"/states/{contact.id}"),
        )

    def query_contact_states(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query the current states of contacts for this service.

        Returns:
            ApiCursor of ContactServiceState.
        """
        return self._api.cursor(ContactServiceState, self.get_base_api_path() + "/states", params)

    def get_config(self) -> dict[str, Any]:
        """Get configuration specific to the type of automated service."""
        return self._api.do_request("GET", self.get_base_api_path() + "/config")

    def set_config(self, params: dict[str, Any]) -> dict[str, Any]:
        """Update configuration specific to the type of automated service.

        Returns:
            The updated configuration.
        """
        return self._api.do_request("POST", self.get_base_api_path() + "/config", params)

    def delete(self) -> None:
        """Delete this service."""
        self._delete()

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/services/{self.get('id')}"
