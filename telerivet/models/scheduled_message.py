"""Telerivet scheduled message."""

from telerivet.models.entity import Entity, RemoteField


class ScheduledMessage(Entity):
    """Represents a scheduled message within Telerivet.

    All fields except `vars` are read-only.
    """

    id = RemoteField()
    content = RemoteField()
    rrule = RemoteField()
    timezone_id = RemoteField()
    recipients = RemoteField()
    recipients_str = RemoteField()
    group_id = RemoteField()
    contact_id = RemoteField()
    to_number = RemoteField()
    route_id = RemoteField()
    service_id = RemoteField()
    audio_url = RemoteField()
    tts_lang = RemoteField()
    tts_voice = RemoteField()
    message_type = RemoteField()
    time_created = RemoteField()
    start_time = RemoteField()
    end_time = RemoteField()
    prev_time = RemoteField()
    next_time = RemoteField()
    occurrences = RemoteField()
    is_template = RemoteField()
    track_clicks = RemoteField()
    media = RemoteField()
    route_params = RemoteField()
    label_ids = RemoteField()
    project_id = RemoteField()

    def delete(self) -> None:
        """Cancel this scheduled message."""
        self._delete()

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/scheduled/{self.get('id')}"
