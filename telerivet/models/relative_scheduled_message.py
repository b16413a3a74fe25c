"""Telerivet relative scheduled message."""

from telerivet.models.entity import Entity, RemoteField


class RelativeScheduledMessage(Entity):
    """A message scheduled relative to a date stored as a custom field for each recipient contact.

    The send time for each contact is `date_variable` shifted by `offset_count`
    units of `offset_scale` (D, W, M or Y), at `time_of_day`.
    """

    id = RemoteField()
    content = RemoteField(writable=True)
    time_of_day = RemoteField(writable=True)
    date_variable = RemoteField(writable=True)
    offset_scale = RemoteField(writable=True)
    offset_count = RemoteField(writable=True)
    rrule = RemoteField(writable=True)
    end_time = RemoteField(writable=True)
    timezone_id = RemoteField(writable=True)
    recipients_str = RemoteField()
    group_id = RemoteField(writable=True)
    contact_id = RemoteField(writable=True)
    to_number = RemoteField(writable=True)
    route_id = RemoteField(writable=True)
    service_id = RemoteField(writable=True)
    audio_url = RemoteField(writable=True)
    tts_lang = RemoteField(writable=True)
    tts_voice = RemoteField(writable=True)
    message_type = RemoteField()
    time_created = RemoteField()
    replace_variables = RemoteField(writable=True)
    track_clicks = RemoteField(writable=True)
    media = RemoteField()
    route_params = RemoteField(writable=True)
    label_ids = RemoteField(writable=True)
    project_id = RemoteField()

    def delete(self) -> None:
        """Delete this relative scheduled message."""
        self._delete()

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/relative_scheduled/{self.get('id')}"
