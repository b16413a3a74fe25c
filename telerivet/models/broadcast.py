"""Telerivet broadcast."""

from telerivet.models.entity import Entity, RemoteField


class Broadcast(Entity):
    """Represents a collection of related outgoing messages sent to a group or list of recipients.

    All fields are read-only.
    """

    id = RemoteField()
    recipients = RemoteField()
    title = RemoteField()
    time_created = RemoteField()
    last_message_time = RemoteField()
    last_send_time = RemoteField()
    status_counts = RemoteField()
    message_type = RemoteField()
    content = RemoteField()
    audio_url = RemoteField()
    tts_lang = RemoteField()
    tts_voice = RemoteField()
    replace_variables = RemoteField()
    status = RemoteField()
    source = RemoteField()
    simulated = RemoteField()
    track_clicks = RemoteField()
    clicked_count = RemoteField()
    label_ids = RemoteField()
    media = RemoteField()
    price = RemoteField()
    price_currency = RemoteField()
    reply_count = RemoteField()
    last_reply_time = RemoteField()
    route_id = RemoteField()
    service_id = RemoteField()
    user_id = RemoteField()
    project_id = RemoteField()

    def cancel(self) -> "Broadcast":
        """Cancel sending a broadcast that has not yet been completely sent.

        Returns:
            The updated Broadcast.
        """
        return Broadcast(self._api, self._api.do_request("POST", self.get_base_api_path() + "/cancel"))

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/broadcasts/{self.get('id')}"
