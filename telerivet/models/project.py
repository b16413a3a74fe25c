"""Telerivet project."""

from typing import Any

from telerivet.cursor import ApiCursor
from telerivet.models.airtime_transaction import AirtimeTransaction
from telerivet.models.broadcast import Broadcast
from telerivet.models.contact import Contact
from telerivet.models.data_table import DataTable
from telerivet.models.entity import Entity, RemoteField
from telerivet.models.group import Group
from telerivet.models.label import Label
from telerivet.models.message import Message
from telerivet.models.phone import Phone
from telerivet.models.relative_scheduled_message import RelativeScheduledMessage
from telerivet.models.route import Route
from telerivet.models.scheduled_message import ScheduledMessage
from telerivet.models.service import Service
from telerivet.models.task import Task


class Project(Entity):
    """Represents a Telerivet project.

    Provides methods for sending and scheduling messages, as well as accessing,
    creating and updating contacts, messages, scheduled messages, groups,
    labels, phones, routes, services, tasks and data tables.

    Fields:
        id: ID of the project (read-only)
        name: Name of the project (updatable)
        timezone_id: Default TZ database timezone ID (read-only)
        url_slug: Component of the project's URL in the web app (read-only)
        organization_id: ID of the organization this project belongs to (read-only)
        vars: Custom variables (updatable)
    """

    id = RemoteField()
    name = RemoteField(writable=True)
    timezone_id = RemoteField()
    url_slug = RemoteField()
    organization_id = RemoteField()

    # =========================================================================
    # Sending
    # =========================================================================

    def send_message(self, params: dict[str, Any]) -> Message:
        """Send one message (SMS, MMS, voice call, or USSD request).

        Args:
            params: Message options, e.g. `content`, `to_number` or `contact_id`,
                `message_type`, `route_id`, `status_url`, `is_template`,
                `track_clicks`, `media_urls`, `label_ids`, `vars`, `priority`,
                `simulated`.

        Returns:
            The queued Message.
        """
        return Message(self._api, self._api.do_request("POST", self.get_base_api_path() + "/messages/send", params))

    def send_broadcast(self, params: dict[str, Any]) -> Broadcast:
        """Send a message to a group, or to a list of up to 500 phone numbers or contacts.

        Returns:
            The created Broadcast.
        """
        return Broadcast(self._api, self._api.do_request("POST", self.get_base_api_path() + "/send_broadcast", params))

    def send_multi(self, params: dict[str, Any]) -> dict[str, Any]:
        """Send up to 100 different messages in a single API request.

        Args:
            params: `messages` (list of message options) plus shared defaults.

        Returns:
            Dict with `messages` (list of message dicts) and optionally `broadcast_id`.
        """
        return self._api.do_request("POST", self.get_base_api_path() + "/send_multi", params)

    def send_messages(self, params: dict[str, Any]) -> dict[str, Any]:
        """Send a message to up to 500 phone numbers or contacts.

        Deprecated by the API in favour of `send_broadcast`.
        """
        return self._api.do_request("POST", self.get_base_api_path() + "/messages/send_batch", params)

    def schedule_message(self, params: dict[str, Any]) -> ScheduledMessage:
        """Schedule a message to a group or single contact.

        Args:
            params: `start_time` or `start_time_offset` plus message options and
                optionally `rrule`, `end_time`, `timezone_id`.
        """
        return ScheduledMessage(
            self._api,
            self._api.do_request("POST", self.get_base_api_path() + "/scheduled", params),
        )

    def create_relative_scheduled_message(self, params: dict[str, Any]) -> RelativeScheduledMessage:
        """Create a message scheduled relative to a date stored in a contact custom variable.

        Args:
            params: `date_variable`, `offset_scale`, `offset_count`, `time_of_day`
                plus message options.
        """
        return RelativeScheduledMessage(
            self._api,
            self._api.do_request("POST", self.get_base_api_path() + "/relative_scheduled", params),
        )

    def receive_message(self, params: dict[str, Any]) -> Message:
        """Add an incoming message to Telerivet, as if it had been received by a phone.

        Args:
            params: `content` and `from_number` (required), optional `phone_id`,
                `to_number`, `simulated`, `vars`, `message_type`, `media`.
        """
        return Message(self._api, self._api.do_request("POST", self.get_base_api_path() + "/messages/receive", params))

    # =========================================================================
    # Contacts
    # =========================================================================

    def get_or_create_contact(self, params: dict[str, Any] | None = None) -> Contact:
        """Retrieve or create a contact by ID or phone number, updating its fields."""
        return Contact(self._api, self._api.do_request("POST", self.get_base_api_path() + "/contacts", params))

    def import_contacts(self, params: dict[str, Any]) -> dict[str, Any]:
        """Create and/or update up to 200 contacts in a single API call.

        Returns:
            Dict with a `contacts` list, in the same order as the request.
        """
        return self._api.do_request("POST", self.get_base_api_path() + "/import_contacts", params)

    def query_contacts(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query contacts within the project.

        Returns:
            ApiCursor of Contact.
        """
        return self._api.cursor(Contact, self.get_base_api_path() + "/contacts", params)

    def get_contact_by_id(self, id: str) -> Contact:
        return Contact(self._api, self._api.do_request("GET", self.get_base_api_path() + f"/contacts/{id}"))

    def init_contact_by_id(self, id: str) -> Contact:
        """Initialize a contact by ID without making an API request."""
        return Contact(self._api, {"project_id": self.id, "id": id}, False)

    # =========================================================================
    # Phones
    # =========================================================================

    def query_phones(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query basic route (phone) records within the project.

        Returns:
            ApiCursor of Phone.
        """
        return self._api.cursor(Phone, self.get_base_api_path() + "/phones", params)

    def get_phone_by_id(self, id: str) -> Phone:
        return Phone(self._api, self._api.do_request("GET", self.get_base_api_path() + f"/phones/{id}"))

    def init_phone_by_id(self, id: str) -> Phone:
        """Initialize a phone by ID without making an API request."""
        return Phone(self._api, {"project_id": self.id, "id": id}, False)

    # =========================================================================
    # Messages
    # =========================================================================

    def query_messages(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query messages within the project.

        Args:
            params: Filters such as `direction`, `message_type`, `source`,
                `starred`, `status`, `time_created[min]`, `contact_id`,
                `phone_id`, `broadcast_id`, `sort_dir`, `page_size`, `offset`.

        Returns:
            ApiCursor of Message.
        """
        return self._api.cursor(Message, self.get_base_api_path() + "/messages", params)

    def get_message_by_id(self, id: str) -> Message:
        return Message(self._api, self._api.do_request("GET", self.get_base_api_path() + f"/messages/{id}"))

    def init_message_by_id(self, id: str) -> Message:
        """Initialize a message by ID without making an API request."""
        return Message(self._api, {"project_id": self.id, "id": id}, False)

    # =========================================================================
    # Broadcasts
    # =========================================================================

    def query_broadcasts(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query broadcasts within the project.

        Returns:
            ApiCursor of Broadcast.
        """
        return self._api.cursor(Broadcast, self.get_base_api_path() + "/broadcasts", params)

    def get_broadcast_by_id(self, id: str) -> Broadcast:
        return Broadcast(self._api, self._api.do_request("GET", self.get_base_api_path() + f"/broadcasts/{id}"))

    def init_broadcast_by_id(self, id: str) -> Broadcast:
        """Initialize a broadcast by ID without making an API request."""
        return Broadcast(self._api, {"project_id": self.id, "id": id}, False)

    # =========================================================================
    # Tasks
    # =========================================================================

    def create_task(self, params: dict[str, Any]) -> Task:
        """Create and start an asynchronous task applied to a filtered set of items.

        Args:
            params: `task_type` (required), `task_params`, `filter_type`,
                `filter_params`, `table_id`.
        """
        return Task(self._api, self._api.do_request("POST", self.get_base_api_path() + "/tasks", params))

    def query_tasks(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query batch tasks within the project.

        Returns:
            ApiCursor of Task.
        """
        return self._api.cursor(Task, self.get_base_api_path() + "/tasks", params)

    def get_task_by_id(self, id: str) -> Task:
        return Task(self._api, self._api.do_request("GET", self.get_base_api_path() + f"/tasks/{id}"))

    def init_task_by_id(self, id: str) -> Task:
        """Initialize a task by ID without making an API request."""
        return Task(self._api, {"project_id": self.id, "id": id}, False)

    # =========================================================================
    # Groups
    # =========================================================================

    def query_groups(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query groups within the project.

        Returns:
            ApiCursor of Group.
        """
        return self._api.cursor(Group, self.get_base_api_path() + "/groups", params)

    def get_or_create_group(self, name: str) -> Group:
        """Retrieve or create a group by name."""
        return Group(self._api, self._api.do_request("POST", self.get_base_api_path() + "/groups", {"name": name}))

    def get_group_by_id(self, id: str) -> Group:
        return Group(self._api, self._api.do_request("GET", self.get_base_api_path() + f"/groups/{id}"))

    def init_group_by_id(self, id: str) -> Group:
        """Initialize a group by ID without making an API request."""
        return Group(self._api, {"project_id": self.id, "id": id}, False)

    # =========================================================================
    # Labels
    # =========================================================================

    def query_labels(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query labels within the project.

        Returns:
            ApiCursor of Label.
        """
        return self._api.cursor(Label, self.get_base_api_path() + "/labels", params)

    def get_or_create_label(self, name: str) -> Label:
        """Retrieve or create a label by name."""
        return Label(self._api, self._api.do_request("POST", self.get_base_api_path() + "/labels", {"name": name}))

    def get_label_by_id(self, id: str) -> Label:
        return Label(self._api, self._api.do_request("GET", self.get_base_api_path() + f"/labels/{id}"))

    def init_label_by_id(self, id: str) -> Label:
        """Initialize a label by ID without making an API request."""
        return Label(self._api, {"project_id": self.id, "id": id}, False)

    # =========================================================================
    # Data tables
    # =========================================================================

    def query_data_tables(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query data tables within the project.

        Returns:
            ApiCursor of DataTable.
        """
        return self._api.cursor(DataTable, self.get_base_api_path() + "/tables", params)

    def get_or_create_data_table(self, name: str) -> DataTable:
        """Retrieve or create a data table by name."""
        return DataTable(self._api, self._api.do_request("POST", self.get_base_api_path() + "/tables", {"name": name}))

    def get_data_table_by_id(self, id: str) -> DataTable:
        return DataTable(self._api, self._api.do_request("GET", self.get_base_api_path() + f"/tables/{id}"))

    def init_data_table_by_id(self, id: str) -> DataTable:
        """Initialize a data table by ID without making an API request."""
        return DataTable(self._api, {"project_id": self.id, "id": id}, False)

    # =========================================================================
    # Scheduled messages
    # =========================================================================

    def query_scheduled_messages(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query scheduled messages within the project.

        Returns:
            ApiCursor of ScheduledMessage.
        """
        return self._api.cursor(ScheduledMessage, self.get_base_api_path() + "/scheduled", params)

    def get_scheduled_message_by_id(self, id: str) -> ScheduledMessage:
        return ScheduledMessage(self._api, self._api.do_request("GET", self.get_base_api_path() + f"/scheduled/{id}"))

    def init_scheduled_message_by_id(self, id: str) -> ScheduledMessage:
        """Initialize a scheduled message by ID without making an API request."""
        return ScheduledMessage(self._api, {"project_id": self.id, "id": id}, False)

    def query_relative_scheduled_messages(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query relative scheduled messages within the project.

        Returns:
            ApiCursor of RelativeScheduledMessage.
        """
        return self._api.cursor(
            RelativeScheduledMessage, self.get_base_api_path() + "/relative_scheduled", params
        )

    def get_relative_scheduled_message_by_id(self, id: str) -> RelativeScheduledMessage:
        return RelativeScheduledMessage(
            self._api,
            self._api.do_request("GET", self.get_base_api_path() + f"/relative_scheduled/{id}"),
        )

    def init_relative_scheduled_message_by_id(self, id: str) -> RelativeScheduledMessage:
        """Initialize a relative scheduled message by ID without making an API request."""
        return RelativeScheduledMessage(self._api, {"project_id": self.id, "id": id}, False)

    # =========================================================================
    # Services and routes
    # =========================================================================

    def query_services(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query services within the project.

        Returns:
            ApiCursor of Service.
        """
        return self._api.cursor(Service, self.get_base_api_path() + "/services", params)

    def get_service_by_id(self, id: str) -> Service:
        return Service(self._api, self._api.do_request("GET", self.get_base_api_path() + f"/services/{id}"))

    def init_service_by_id(self, id: str) -> Service:
        """Initialize a service by ID without making an API request."""
        return Service(self._api, {"project_id": self.id, "id": id}, False)

    def query_routes(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query custom routes within the project.

        Returns:
            ApiCursor of Route.
        """
        return self._api.cursor(Route, self.get_base_api_path() + "/routes", params)

    def get_route_by_id(self, id: str) -> Route:
        return Route(self._api, self._api.do_request("GET", self.get_base_api_path() + f"/routes/{id}"))

    def init_route_by_id(self, id: str) -> Route:
        """Initialize a route by ID without making an API request."""
        return Route(self._api, {"project_id": self.id, "id": id}, False)

    # =========================================================================
    # Users and airtime
    # =========================================================================

    def get_users(self) -> list[dict[str, Any]]:
        """Return the user accounts that have access to this project.

        Each item has `id`, `email` and `name`; `id` matches `Message.user_id`.
        """
        return self._api.do_request("GET", self.get_base_api_path() + "/users")

    def query_airtime_transactions(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query airtime transactions within the project.

        Returns:
            ApiCursor of AirtimeTransaction.
        """
        return self._api.cursor(AirtimeTransaction, self.get_base_api_path() + "/airtime_transactions", params)

    def get_airtime_transaction_by_id(self, id: str) -> AirtimeTransaction:
        return AirtimeTransaction(
            self._api,
            self._api.do_request("GET", self.get_base_api_path() + f"/airtime_transactions/{id}"),
        )

    def init_airtime_transaction_by_id(self, id: str) -> AirtimeTransaction:
        """Initialize an airtime transaction by ID without making an API request."""
        return AirtimeTransaction(self._api, {"project_id": self.id, "id": id}, False)

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('id')}"
