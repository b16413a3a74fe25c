"""Telerivet airtime transaction."""

from telerivet.models.entity import Entity, RemoteField


class AirtimeTransaction(Entity):
    """Represents a transaction where airtime is sent to a mobile phone number.

    All fields are read-only.
    """

    id = RemoteField()
    to_number = RemoteField()
    operator_name = RemoteField()
    country = RemoteField()
    time_created = RemoteField()
    transaction_time = RemoteField()
    status = RemoteField()
    status_text = RemoteField()
    value = RemoteField()
    value_currency = RemoteField()
    price = RemoteField()
    price_currency = RemoteField()
    contact_id = RemoteField()
    service_id = RemoteField()
    project_id = RemoteField()
    external_id = RemoteField()

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/airtime_transactions/{self.get('id')}"
