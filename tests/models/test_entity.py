"""Tests for the Entity base class and CustomVars."""

import json

import httpx
import pytest
import respx

from telerivet.client import TelerivetClient
from telerivet.exceptions import InvalidParameterError, NotFoundError
from telerivet.models.contact import Contact
from telerivet.models.entity import CustomVars, Entity

API_URL = "http://test/v1"
CONTACT_URL = f"{API_URL}/projects/PJ1/contacts/CT1"


def make_client() -> TelerivetClient:
    return TelerivetClient("test-key", API_URL)


def make_contact(data=None, is_loaded=True) -> Contact:
    if data is None:
        data = {"id": "CT1", "project_id": "PJ1", "name": "Jo", "vars": {"age": 30}}
    return Contact(make_client(), data, is_loaded)


class TestLazyLoading:
    """Tests for field reads on stub and loaded entities."""

    @respx.mock
    def test_stub_loads_once_on_unknown_field(self):
        """A stub should fetch exactly once on the first unknown-field read."""
        route = respx.get(CONTACT_URL).mock(
            return_value=httpx.Response(
                200,
                json={"id": "CT1", "project_id": "PJ1", "name": "Jo", "phone_number": "+15555550100"},
            )
        )

        contact = make_contact({"id": "CT1", "project_id": "PJ1"}, is_loaded=False)
        assert contact.is_loaded is False

        assert contact.name == "Jo"
        assert contact.phone_number == "+15555550100"
        assert contact.time_created is None
        assert contact.is_loaded is True
        assert route.call_count == 1

    def test_stub_known_fields_do_not_load(self):
        """Reading identifying fields of a stub should not make a request."""
        contact = make_contact({"id": "CT1", "project_id": "PJ1"}, is_loaded=False)
        assert contact.id == "CT1"
        assert contact.get_base_api_path() == "/projects/PJ1/contacts/CT1"
        assert contact._api.num_requests == 0

    def test_loaded_entity_never_fetches(self):
        """Missing fields on a loaded entity should return None without a request."""
        contact = make_contact()
        assert contact.phone_number is None
        assert contact.get("anything") is None
        assert contact._api.num_requests == 0

    @respx.mock
    def test_stub_loads_vars(self):
        """Loading a stub should populate custom variables."""
        respx.get(CONTACT_URL).mock(
            return_value=httpx.Response(200, json={"id": "CT1", "project_id": "PJ1", "vars": {"age": 41}})
        )

        contact = make_contact({"id": "CT1", "project_id": "PJ1"}, is_loaded=False)
        contact.load()
        contact.load()
        assert contact.vars.age == 41
        assert contact._api.num_requests == 1


class TestFieldWrites:
    """Tests for setting fields."""

    def test_set_marks_dirty_without_request(self):
        """Writable fields should update locally and be marked dirty."""
        contact = make_contact({"id": "CT1", "project_id": "PJ1"}, is_loaded=False)
        contact.name = "Joan"
        assert contact.name == "Joan"
        assert contact._dirty == {"name": "Joan"}
        assert contact._api.num_requests == 0

    def test_read_only_field(self):
        """Assigning a read-only field should raise AttributeError."""
        contact = make_contact()
        with pytest.raises(AttributeError, match="read-only"):
            contact.id = "CT2"
        assert contact.id == "CT1"


class TestSave:
    """Tests for save()."""

    @respx.mock
    def test_save_sends_only_dirty_fields_and_vars(self):
        """save() should send exactly the dirty fields and variables."""
        route = respx.post(CONTACT_URL).mock(return_value=httpx.Response(200, json={}))

        contact = make_contact()
        contact.name = "Joan"
        contact.send_blocked = True
        contact.vars.city = "Lagos"
        contact.save()

        assert json.loads(route.calls.last.request.content) == {
            "name": "Joan",
            "send_blocked": True,
            "vars": {"city": "Lagos"},
        }
        assert contact._dirty == {}
        assert contact.vars.get_dirty_variables() == {}
        assert contact.vars.all() == {"age": 30, "city": "Lagos"}

    @respx.mock
    def test_save_without_changes_sends_empty_update(self):
        """save() with nothing dirty should still succeed with an empty body."""
        route = respx.post(CONTACT_URL).mock(return_value=httpx.Response(200, json={}))

        make_contact().save()

        assert route.call_count == 1
        assert json.loads(route.calls.last.request.content) == {}

    @respx.mock
    def test_second_save_sends_nothing_already_saved(self):
        """Fields saved once should not be resent."""
        route = respx.post(CONTACT_URL).mock(return_value=httpx.Response(200, json={}))

        contact = make_contact()
        contact.name = "Joan"
        contact.save()
        contact.phone_number = "+15555550101"
        contact.save()

        assert json.loads(route.calls.last.request.content) == {"phone_number": "+15555550101"}

    @respx.mock
    def test_failed_save_keeps_dirty_state(self):
        """Dirty state should be kept when the request fails."""
        respx.post(CONTACT_URL).mock(
            return_value=httpx.Response(400, json={"error": {"code": "invalid_param", "message": "Bad name"}})
        )

        contact = make_contact()
        contact.name = ""
        contact.vars["city"] = "Lagos"
        with pytest.raises(InvalidParameterError):
            contact.save()

        assert contact._dirty == {"name": ""}
        assert contact.vars.get_dirty_variables() == {"city": "Lagos"}

    @respx.mock
    def test_save_stub_does_not_load(self):
        """Saving fields set on a stub should not fetch it first."""
        route = respx.post(CONTACT_URL).mock(return_value=httpx.Response(200, json={}))

        contact = make_contact({"id": "CT1", "project_id": "PJ1"}, is_loaded=False)
        contact.conversation_status = "closed"
        contact.save()

        assert contact._api.num_requests == 1
        assert json.loads(route.calls.last.request.content) == {"conversation_status": "closed"}


class TestStubWritesAcrossLoad:
    """Tests for local changes made on a stub before it is loaded."""

    @respx.mock
    def test_writes_survive_load_and_are_saved(self):
        """Fields and vars set before a lazy load should be kept and saved."""
        respx.get(CONTACT_URL).mock(
            return_value=httpx.Response(
                200,
                json={
                    "id": "CT1",
                    "project_id": "PJ1",
                    "name": "Server",
                    "phone_number": "+15555550100",
                    "vars": {"age": 30, "city": "Abuja"},
                },
            )
        )
        save = respx.post(CONTACT_URL).mock(return_value=httpx.Response(200, json={}))

        contact = make_contact({"id": "CT1", "project_id": "PJ1", "vars": {}}, is_loaded=False)
        contact.name = "Local"
        contact.vars.city = "Lagos"

        assert contact.phone_number == "+15555550100"
        assert contact.name == "Local"
        assert contact.vars.city == "Lagos"
        assert contact.vars.age == 30
        assert contact.vars.get_dirty_variables() == {"city": "Lagos"}

        contact.save()

        assert json.loads(save.calls.last.request.content) == {"name": "Local", "vars": {"city": "Lagos"}}
        assert contact._api.num_requests == 2

    @respx.mock
    def test_vars_on_stub_load_first(self):
        """Reading vars of a stub without vars should load it."""
        route = respx.get(CONTACT_URL).mock(
            return_value=httpx.Response(200, json={"id": "CT1", "project_id": "PJ1", "vars": {"score": 7}})
        )

        contact = make_contact({"id": "CT1", "project_id": "PJ1"}, is_loaded=False)
        assert contact.vars.score == 7
        assert contact.vars.score == 7
        assert route.call_count == 1

    @respx.mock
    def test_failed_load_can_be_retried(self):
        """A stub whose load failed should stay a stub and load on the next read."""
        route = respx.get(CONTACT_URL).mock(
            side_effect=[
                httpx.ConnectError("connection refused"),
                httpx.Response(200, json={"id": "CT1", "project_id": "PJ1", "name": "Jo"}),
            ]
        )

        contact = make_contact({"id": "CT1", "project_id": "PJ1"}, is_loaded=False)
        with pytest.raises(httpx.ConnectError):
            contact.load()
        assert contact.is_loaded is False

        assert contact.name == "Jo"
        assert contact.is_loaded is True
        assert route.call_count == 2

    @respx.mock
    def test_not_found_load_can_be_retried(self):
        """A NotFoundError during a lazy read should leave the stub unloaded."""
        respx.get(CONTACT_URL).mock(
            side_effect=[
                httpx.Response(404, json={"error": {"code": "not_found", "message": "Contact not found"}}),
                httpx.Response(200, json={"id": "CT1", "project_id": "PJ1", "name": "Jo"}),
            ]
        )

        contact = make_contact({"id": "CT1", "project_id": "PJ1"}, is_loaded=False)
        with pytest.raises(NotFoundError):
            contact.name
        assert contact.is_loaded is False
        assert contact.name == "Jo"


class TestEntityMisc:
    """Tests for helpers on Entity."""

    def test_base_path_is_abstract(self):
        """The base class should not define a path."""
        with pytest.raises(NotImplementedError):
            Entity(make_client(), {}).get_base_api_path()

    def test_to_dict_is_a_copy(self):
        """to_dict() should return a copy of the cached fields."""
        contact = make_contact()
        data = contact.to_dict()
        data["name"] = "changed"
        assert contact.name == "Jo"

    def test_repr(self):
        """repr() should show the class, load state and data."""
        stub = make_contact({"id": "CT1", "project_id": "PJ1"}, is_loaded=False)
        assert repr(stub) == 'Contact (not loaded) JSON: {"id": "CT1", "project_id": "PJ1"}'
        assert repr(make_contact({"id": "CT1"})) == 'Contact JSON: {"id": "CT1"}'


class TestCustomVars:
    """Tests for CustomVars."""

    def test_item_and_attribute_access(self):
        """Variables should be readable by item and attribute."""
        vars = CustomVars({"age": 30})
        assert vars["age"] == 30
        assert vars.age == 30
        assert vars.get("missing") is None
        assert vars.missing is None
        assert "age" in vars

    def test_set_tracks_dirty(self):
        """Setting variables should track them as dirty."""
        vars = CustomVars({"age": 30})
        vars.age = 31
        vars["city"] = "Lagos"
        vars.set("tags", ["a"])
        assert vars.get_dirty_variables() == {"age": 31, "city": "Lagos", "tags": ["a"]}
        assert vars.all() == {"age": 31, "city": "Lagos", "tags": ["a"]}

        vars.clear_dirty_variables()
        assert vars.get_dirty_variables() == {}
        assert vars.age == 31

    def test_private_attributes_not_variables(self):
        """Underscore attributes should not be looked up as variables."""
        vars = CustomVars({})
        with pytest.raises(AttributeError):
            vars._unknown
