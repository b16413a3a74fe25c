"""Telerivet contact."""

from typing import TYPE_CHECKING, Any

from telerivet.cursor import ApiCursor
from telerivet.models.contact_service_state import ContactServiceState
from telerivet.models.data_row import DataRow
from telerivet.models.entity import Entity, RemoteField
from telerivet.models.message import Message
from telerivet.models.scheduled_message import ScheduledMessage

if TYPE_CHECKING:
    from telerivet.models.group import Group


class Contact(Entity):
    """Represents a contact in a project.

    Fields:
        id: ID of the contact (read-only)
        name: Name of the contact (updatable)
        phone_number: Phone number of the contact (updatable)
        send_blocked: True if Telerivet is blocked from sending to this contact (updatable)
        conversation_status: `closed`, `active` or `handled` (updatable)
        default_route_id: ID of the route used by default to send to this contact (updatable)
        group_ids: IDs of the groups this contact belongs to (read-only)
        vars: Custom variables (updatable)

    Timestamps and message counters are read-only.
    """

    id = RemoteField()
    name = RemoteField(writable=True)
    phone_number = RemoteField(writable=True)
    time_created = RemoteField()
    time_updated = RemoteField()
    send_blocked = RemoteField(writable=True)
    conversation_status = RemoteField(writable=True)
    last_message_time = RemoteField()
    last_incoming_message_time = RemoteField()
    last_outgoing_message_time = RemoteField()
    message_count = RemoteField()
    incoming_message_count = RemoteField()
    outgoing_message_count = RemoteField()
    last_message_id = RemoteField()
    default_route_id = RemoteField(writable=True)
    group_ids = RemoteField()
    project_id = RemoteField()

    def set_data(self, data: dict[str, Any]) -> None:
        super().set_data(data)
        self._group_ids_set = set(data.get("group_ids") or [])

    def is_in_group(self, group: "Group") -> bool:
        """Return True if this contact is in the given group."""
        self.load()
        return group.id in self._group_ids_set

    def add_to_group(self, group: "Group") -> None:
        """Add this contact to a group."""
        self._api.do_request("PUT", group.get_base_api_path() + f"/contacts/{self.get('id')}")
        self._group_ids_set.add(group.id)

    def remove_from_group(self, group: "Group") -> None:
        """Remove this contact from a group."""
        self._api.do_request("DELETE", group.get_base_api_path() + f"/contacts/{self.get('id')}")
        self._group_ids_set.discard(group.id)

    def query_messages(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query messages sent or received by this contact.

        Returns:
            ApiCursor of Message.
        """
        return self._api.cursor(Message, self.get_base_api_path() + "/messages", params)

    def query_groups(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query groups for which this contact is a member.

        Returns:
            ApiCursor of Group.
        """
        from telerivet.models.group import Group

        return self._api.cursor(Group, self.get_base_api_path() + "/groups", params)

    def query_scheduled_messages(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query messages scheduled to this contact (not including messages scheduled to groups).

        Returns:
            ApiCursor of ScheduledMessage.
        """
        return self._api.cursor(ScheduledMessage, self.get_base_api_path() + "/scheduled", params)

    def query_data_rows(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query data rows associated with this contact (in any data table).

        Returns:
            ApiCursor of DataRow.
        """
        return self._api.cursor(DataRow, self.get_base_api_path() + "/rows", params)

    def query_service_states(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query this contact's current state for any service.

        Returns:
            ApiCursor of ContactServiceState.
        """
        return self._api.cursor(ContactServiceState, self.get_base_api_path() + "/states", params)

    def delete(self) -> None:
        """Delete this contact."""
        self._delete()

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/contacts/{self.get('id')}"
