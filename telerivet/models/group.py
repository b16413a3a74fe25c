"""Telerivet contact group."""

from typing import Any

from telerivet.cursor import ApiCursor
from telerivet.models.entity import Entity, RemoteField
from telerivet.models.scheduled_message import ScheduledMessage


class Group(Entity):
    """Represents a group used to organize contacts within Telerivet.

    Fields:
        id: ID of the group (read-only)
        name: Name of the group (updatable)
        dynamic: Whether this is a dynamic or normal group (read-only)
        num_members: Number of contacts in the group (read-only)
        time_created: Time the group was created (read-only)
        vars: Custom variables (updatable)
    """

    id = RemoteField()
    name = RemoteField(writable=True)
    dynamic = RemoteField()
    num_members = RemoteField()
    time_created = RemoteField()
    project_id = RemoteField()

    def query_contacts(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query contacts that are members of this group.

        Returns:
            ApiCursor of Contact.
        """
        from telerivet.models.contact import Contact

        return self._api.cursor(Contact, self.get_base_api_path() + "/contacts", params)

    def query_scheduled_messages(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query scheduled messages to this group.

        Returns:
            ApiCursor of ScheduledMessage.
        """
        return self._api.cursor(ScheduledMessage, self.get_base_api_path() + "/scheduled", params)

    def delete(self) -> None:
        """Delete this group (contacts in the group are not deleted)."""
        self._delete()

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/groups/{self.get('id')}"
