"""Tests for Service and ContactServiceState."""

import json

import httpx
import respx

from telerivet.client import TelerivetClient
from telerivet.models import Contact, ContactServiceState, Service

API_URL = "http://test/v1"
SERVICE_URL = f"{API_URL}/projects/PJ1/services/SV1"


def make_client() -> TelerivetClient:
    return TelerivetClient("test-key", API_URL)


def make_service(client) -> Service:
    return Service(client, {"id": "SV1", "project_id": "PJ1", "name": "Survey", "active": True})


def make_contact(client) -> Contact:
    return Contact(client, {"id": "CT1", "project_id": "PJ1"})


class TestServiceInvoke:
    """Tests for invoke()."""

    @respx.mock
    def test_invoke(self):
        """invoke() should POST the context and return the raw result."""
        route = respx.post(f"{SERVICE_URL}/invoke").mock(
            return_value=httpx.Response(200, json={"return_value": None, "sent_messages": []})
        )

        result = make_service(make_client()).invoke({"context": "contact", "contact_id": "CT1"})

        assert result["sent_messages"] == []
        assert json.loads(route.calls.last.request.content) == {"context": "contact", "contact_id": "CT1"}


class TestServiceContactStates:
    """Tests for per-contact state operations."""

    @respx.mock
    def test_get_set_reset_contact_state(self):
        """Contact state operations should use GET, POST and DELETE on the state path."""
        state = {"id": "q2", "contact_id": "CT1", "service_id": "SV1", "project_id": "PJ1"}
        get = respx.get(f"{SERVICE_URL}/states/CT1").mock(return_value=httpx.Response(200, json=state))
        post = respx.post(f"{SERVICE_URL}/states/CT1").mock(return_value=httpx.Response(200, json=state))
        delete = respx.delete(f"{SERVICE_URL}/states/CT1").mock(
            return_value=httpx.Response(200, json={**state, "id": None})
        )

        client = make_client()
        service = make_service(client)
        contact = make_contact(client)

        assert service.get_contact_state(contact).id == "q2"
        updated = service.set_contact_state(contact, {"id": "q2", "vars": {"score": 1}})
        assert isinstance(updated, ContactServiceState)
        assert json.loads(post.calls.last.request.content) == {"id": "q2", "vars": {"score": 1}}
        assert service.reset_contact_state(contact).id is None
        assert get.called and delete.called

    def test_query_contact_states(self):
        """query_contact_states() should return a cursor of states."""
        cursor = make_service(make_client()).query_contact_states({"id": "q2"})
        assert cursor._path == "/projects/PJ1/services/SV1/states"
        assert cursor._item_cls is ContactServiceState

    @respx.mock
    def test_state_entity_save_and_reset(self):
        """A state entity should save its id and reset via DELETE."""
        state_url = f"{SERVICE_URL}/states/CT1"
        save = respx.post(state_url).mock(return_value=httpx.Response(200, json={}))
        reset = respx.delete(state_url).mock(return_value=httpx.Response(200, json={}))

        state = ContactServiceState(
            make_client(), {"id": "q1", "contact_id": "CT1", "service_id": "SV1", "project_id": "PJ1"}
        )
        state.id = "q3"
        state.save()
        state.reset()

        assert json.loads(save.calls.last.request.content) == {"id": "q3"}
        assert reset.called


class TestServiceConfig:
    """Tests for service configuration."""

    @respx.mock
    def test_get_and_set_config(self):
        """get_config()/set_config() should GET and POST the config path."""
        respx.get(f"{SERVICE_URL}/config").mock(return_value=httpx.Response(200, json={"url": "https://a"}))
        post = respx.post(f"{SERVICE_URL}/config").mock(return_value=httpx.Response(200, json={"url": "https://b"}))

        service = make_service(make_client())
        assert service.get_config() == {"url": "https://a"}
        assert service.set_config({"url": "https://b"}) == {"url": "https://b"}
        assert json.loads(post.calls.last.request.content) == {"url": "https://b"}

    @respx.mock
    def test_save_and_delete(self):
        """Service settings should be saved; delete() should DELETE the service."""
        save = respx.post(SERVICE_URL).mock(return_value=httpx.Response(200, json={}))
        delete = respx.delete(SERVICE_URL).mock(return_value=httpx.Response(200, json={}))

        service = make_service(make_client())
        service.active = False
        service.save()
        service.delete()

        assert json.loads(save.calls.last.request.content) == {"active": False}
        assert delete.called
