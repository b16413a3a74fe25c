"""Telerivet basic route (Android phone)."""

from typing import Any

from telerivet.cursor import ApiCursor
from telerivet.models.entity import Entity, RemoteField
from telerivet.models.message import Message


class Phone(Entity):
    """Represents a basic route (i.e. a phone or gateway) that you use to send and receive messages.

    Fields:
        id: ID of the phone (read-only)
        name: Name of the phone (updatable)
        phone_number: Phone number of the phone (updatable)
        send_paused: True if sending messages is paused (updatable)
        vars: Custom variables (updatable)

    Device details (battery, charging, app_version, ...) are read-only and only
    reported by Android phones.
    """

    id = RemoteField()
    name = RemoteField(writable=True)
    phone_number = RemoteField(writable=True)
    phone_type = RemoteField()
    country = RemoteField()
    send_paused = RemoteField(writable=True)
    time_created = RemoteField()
    last_active_time = RemoteField()
    project_id = RemoteField()
    battery = RemoteField()
    charging = RemoteField()
    internet_type = RemoteField()
    app_version = RemoteField()
    android_sdk = RemoteField()
    mccmnc = RemoteField()
    manufacturer = RemoteField()
    model = RemoteField()
    send_limit = RemoteField()

    def query_messages(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query messages sent or received by this basic route.

        Returns:
            ApiCursor of Message.
        """
        return self._api.cursor(Message, self.get_base_api_path() + "/messages", params)

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/phones/{self.get('id')}"
