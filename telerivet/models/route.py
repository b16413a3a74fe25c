"""Telerivet custom route."""

from telerivet.models.entity import Entity, RemoteField


class Route(Entity):
    """Represents a custom route that can be used to send messages via one or more basic routes (phones)."""

    id = RemoteField()
    name = RemoteField(writable=True)
    project_id = RemoteField()

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/routes/{self.get('id')}"
