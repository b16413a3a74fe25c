"""Telerivet data table row."""

from telerivet.models.entity import Entity, RemoteField


class DataRow(Entity):
    """Represents a row in a custom data table.

    Row values are stored in the custom variables (`vars`); the column names
    are the variable names.

    Fields:
        id: ID of the row (read-only)
        contact_id: ID of the contact this row is associated with (updatable)
        from_number: Phone number this row is associated with (updatable)
        time_created: Time the row was created (read-only)
        time_updated: Time the row was last updated (read-only)
        table_id: ID of the table this row belongs to (read-only)
    """

    id = RemoteField()
    contact_id = RemoteField(writable=True)
    from_number = RemoteField(writable=True)
    time_created = RemoteField()
    time_updated = RemoteField()
    table_id = RemoteField()
    project_id = RemoteField()

    def delete(self) -> None:
        """Delete this data row."""
        self._delete()

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/tables/{self.get('table_id')}/rows/{self.get('id')}"
