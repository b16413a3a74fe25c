"""Telerivet message."""

from typing import TYPE_CHECKING, Any

from telerivet.models.entity import Entity, RemoteField

if TYPE_CHECKING:
    from telerivet.models.label import Label


class Message(Entity):
    """Represents a single message (SMS, MMS, call, or USSD session).

    Fields:
        id: ID of the message (read-only)
        direction: `incoming` or `outgoing` (read-only)
        status: Current status of the message (read-only)
        message_type: `sms`, `mms`, `ussd`, `ussd_session`, `call`, `chat` or `service` (read-only)
        content: Text content of the message (read-only)
        starred: Whether the message is starred (updatable)
        error_message: Error message if the message failed to send (updatable)
        label_ids: IDs of the labels applied to this message (read-only)
        vars: Custom variables (updatable)

    All remaining fields are read-only.
    """

    id = RemoteField()
    direction = RemoteField()
    status = RemoteField()
    message_type = RemoteField()
    source = RemoteField()
    time_created = RemoteField()
    time_sent = RemoteField()
    time_updated = RemoteField()
    from_number = RemoteField()
    to_number = RemoteField()
    content = RemoteField()
    starred = RemoteField(writable=True)
    simulated = RemoteField()
    label_ids = RemoteField()
    route_params = RemoteField()
    priority = RemoteField()
    error_message = RemoteField(writable=True)
    error_code = RemoteField()
    external_id = RemoteField()
    num_parts = RemoteField()
    price = RemoteField()
    price_currency = RemoteField()
    duration = RemoteField()
    ring_time = RemoteField()
    audio_url = RemoteField()
    tts_lang = RemoteField()
    tts_voice = RemoteField()
    track_clicks = RemoteField()
    short_urls = RemoteField()
    network_code = RemoteField()
    media = RemoteField()
    mms_parts = RemoteField()
    time_clicked = RemoteField()
    service_id = RemoteField()
    phone_id = RemoteField()
    contact_id = RemoteField()
    route_id = RemoteField()
    broadcast_id = RemoteField()
    scheduled_id = RemoteField()
    user_id = RemoteField()
    project_id = RemoteField()

    def set_data(self, data: dict[str, Any]) -> None:
        super().set_data(data)
        self._label_ids_set = set(data.get("label_ids") or [])

    def has_label(self, label: "Label") -> bool:
        """Return True if this message has the given label."""
        self.load()
        return label.id in self._label_ids_set

    def add_label(self, label: "Label") -> None:
        """Add a label to this message."""
        self._api.do_request("PUT", label.get_base_api_path() + f"/messages/{self.get('id')}")
        self._label_ids_set.add(label.id)

    def remove_label(self, label: "Label") -> None:
        """Remove a label from this message."""
        self._api.do_request("DELETE", label.get_base_api_path() + f"/messages/{self.get('id')}")
        self._label_ids_set.discard(label.id)

    def get_mms_parts(self) -> list[dict[str, Any]]:
        """Retrieve the parts of an MMS message.

        Each part has `cid`, `type`, `filename`, `size` and `url`.
        """
        return self._api.do_request("GET", self.get_base_api_path() + "/mms_parts")

    def resend(self, params: dict[str, Any] | None = None) -> "Message":
        """Resend a failed outgoing message as a new message.

        Args:
            params: Optional `route_id` to send the new message from.

        Returns:
            The new Message.
        """
        return Message(self._api, self._api.do_request("POST", self.get_base_api_path() + "/resend", params))

    def cancel(self) -> "Message":
        """Cancel sending a message that has not yet been sent.

        Returns:
            The updated Message.
        """
        return Message(self._api, self._api.do_request("POST", self.get_base_api_path() + "/cancel"))

    def delete(self) -> None:
        """Delete this message."""
        self._delete()

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/messages/{self.get('id')}"
