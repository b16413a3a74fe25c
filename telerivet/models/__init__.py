"""Entity classes for Telerivet API resources."""

from telerivet.models.airtime_transaction import AirtimeTransaction
from telerivet.models.broadcast import Broadcast
from telerivet.models.contact import Contact
from telerivet.models.contact_service_state import ContactServiceState
from telerivet.models.data_row import DataRow
from telerivet.models.data_table import DataTable
from telerivet.models.entity import CustomVars, Entity, RemoteField
from telerivet.models.group import Group
from telerivet.models.label import Label
from telerivet.models.message import Message
from telerivet.models.organization import Organization
from telerivet.models.phone import Phone
from telerivet.models.project import Project
from telerivet.models.relative_scheduled_message import RelativeScheduledMessage
from telerivet.models.route import Route
from telerivet.models.scheduled_message import ScheduledMessage
from telerivet.models.service import Service
from telerivet.models.task import Task

__all__ = [
    "Entity",
    "CustomVars",
    "RemoteField",
    "AirtimeTransaction",
    "Broadcast",
    "Contact",
    "ContactServiceState",
    "DataRow",
    "DataTable",
    "Group",
    "Label",
    "Message",
    "Organization",
    "Phone",
    "Project",
    "RelativeScheduledMessage",
    "Route",
    "ScheduledMessage",
    "Service",
    "Task",
]
