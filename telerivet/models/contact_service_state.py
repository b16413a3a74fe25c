"""Telerivet contact service state."""

from telerivet.models.entity import Entity, RemoteField


class ContactServiceState(Entity):
    """Represents the current state of a particular contact for a particular service.

    Fields:
        id: Arbitrary string identifying the state (updatable)
        contact_id: ID of the contact (read-only)
        service_id: ID of the service (read-only)
        vars: Custom variables (updatable)
    """

    id = RemoteField(writable=True)
    contact_id = RemoteField()
    service_id = RemoteField()
    time_created = RemoteField()
    time_updated = RemoteField()
    project_id = RemoteField()

    def reset(self) -> None:
        """Reset the state for this contact and service."""
        self._delete()

    def get_base_api_path(self) -> str:
        return (
            f"/projects/{self.get('project_id')}/services/{self.get('service_id')}"
            f"/states/{self.get('contact_id')}"
        )
