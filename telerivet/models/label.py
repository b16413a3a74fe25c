"""Telerivet message label."""

from typing import Any

from telerivet.cursor import ApiCursor
from telerivet.models.entity import Entity, RemoteField
from telerivet.models.message import Message


class Label(Entity):
    """Represents a label used to organize messages within Telerivet.

    Fields:
        id: ID of the label (read-only)
        name: Name of the label (updatable)
        time_created: Time the label was created (read-only)
        vars: Custom variables (updatable)
    """

    id = RemoteField()
    name = RemoteField(writable=True)
    time_created = RemoteField()
    project_id = RemoteField()

    def query_messages(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query messages with this label.

        Returns:
            ApiCursor of Message.
        """
        return self._api.cursor(Message, self.get_base_api_path() + "/messages", params)

    def delete(self) -> None:
        """Delete this label (messages with the label are not deleted)."""
        self._delete()

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/labels/{self.get('id')}"
