"""Telerivet asynchronous task."""

from telerivet.models.entity import Entity, RemoteField


class Task(Entity):
    """Represents an asynchronous task applied to all entities matching a filter.

    Fields:
        task_type: Type of task, e.g. `update_contact`, `delete_message` (read-only)
        filter_type: How entities are selected, e.g. `query_contacts` (read-only)
        status: `created`, `queued`, `active`, `complete`, `failed` or `cancelled` (read-only)
        total_rows: Number of entities matched by the filter (read-only)
        current_row: Number of entities processed so far (read-only)
    """

    id = RemoteField()
    task_type = RemoteField()
    task_params = RemoteField()
    filter_type = RemoteField()
    filter_params = RemoteField()
    time_created = RemoteField()
    time_active = RemoteField()
    time_complete = RemoteField()
    total_rows = RemoteField()
    current_row = RemoteField()
    status = RemoteField()
    table_id = RemoteField()
    user_id = RemoteField()
    project_id = RemoteField()

    def cancel(self) -> "Task":
        """Cancel a task that is not yet complete.

        Returns:
            The updated Task.
        """
        return Task(self._api, self._api.do_request("POST", self.get_base_api_path() + "/cancel"))

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/tasks/{self.get('id')}"
