"""Tests for DataTable and DataRow."""

import json

import httpx
import respx

from telerivet.client import TelerivetClient
from telerivet.models import DataRow, DataTable

API_URL = "http://test/v1"
TABLE_URL = f"{API_URL}/projects/PJ1/tables/DT1"


def make_table() -> DataTable:
    return DataTable(TelerivetClient("test-key", API_URL), {"id": "DT1", "project_id": "PJ1", "name": "Survey"})


class TestDataTableRows:
    """Tests for row operations."""

    def test_query_rows(self):
        """query_rows() should return a cursor of rows."""
        cursor = make_table().query_rows({"vars": {"age": {"gte": 18}}})
        assert cursor._path == "/projects/PJ1/tables/DT1/rows"
        assert cursor._item_cls is DataRow

    @respx.mock
    def test_create_row(self):
        """create_row() should POST the row values."""
        route = respx.post(f"{TABLE_URL}/rows").mock(
            return_value=httpx.Response(
                200, json={"id": "DR1", "table_id": "DT1", "project_id": "PJ1", "vars": {"q1": "yes"}}
            )
        )

        row = make_table().create_row({"from_number": "+15555550100", "vars": {"q1": "yes"}})

        assert isinstance(row, DataRow)
        assert row.vars.q1 == "yes"
        assert json.loads(route.calls.last.request.content) == {"from_number": "+15555550100", "vars": {"q1": "yes"}}

    @respx.mock
    def test_get_row_by_id(self):
        """get_row_by_id() should fetch the row."""
        respx.get(f"{TABLE_URL}/rows/DR1").mock(
            return_value=httpx.Response(200, json={"id": "DR1", "table_id": "DT1", "project_id": "PJ1"})
        )

        assert make_table().get_row_by_id("DR1").id == "DR1"

    def test_init_row_by_id(self):
        """init_row_by_id() should build a stub with the table's identifiers."""
        table = make_table()
        row = table.init_row_by_id("DR1")
        assert row.is_loaded is False
        assert row.get_base_api_path() == "/projects/PJ1/tables/DT1/rows/DR1"
        assert table._api.num_requests == 0

    @respx.mock
    def test_row_save_and_delete(self):
        """Row updates should send dirty values; delete() should DELETE the row."""
        respx.get(f"{TABLE_URL}/rows/DR1").mock(
            return_value=httpx.Response(200, json={"id": "DR1", "table_id": "DT1", "project_id": "PJ1"})
        )
        save = respx.post(f"{TABLE_URL}/rows/DR1").mock(return_value=httpx.Response(200, json={}))
        delete = respx.delete(f"{TABLE_URL}/rows/DR1").mock(return_value=httpx.Response(200, json={}))

        row = make_table().init_row_by_id("DR1")
        row.contact_id = "CT1"
        row.vars["q2"] = 4
        row.save()
        row.delete()

        assert json.loads(save.calls.last.request.content) == {"contact_id": "CT1", "vars": {"q2": 4}}
        assert delete.called


class TestDataTableFields:
    """Tests for field metadata operations."""

    @respx.mock
    def test_get_fields(self):
        """get_fields() should return the raw field list."""
        fields = [{"name": "Q1", "variable": "q1", "type": "text", "order": 0}]
        respx.get(f"{TABLE_URL}/fields").mock(return_value=httpx.Response(200, json=fields))

        assert make_table().get_fields() == fields

    @respx.mock
    def test_set_field_metadata(self):
        """set_field_metadata() should POST to the field path."""
        route = respx.post(f"{TABLE_URL}/fields/q1").mock(
            return_value=httpx.Response(200, json={"name": "Question 1", "variable": "q1"})
        )

        result = make_table().set_field_metadata("q1", {"name": "Question 1"})

        assert result["name"] == "Question 1"
        assert json.loads(route.calls.last.request.content) == {"name": "Question 1"}

    @respx.mock
    def test_count_rows_by_value(self):
        """count_rows_by_value() should GET with the variable in the query string."""
        route = respx.get(f"{TABLE_URL}/count_rows_by_value").mock(
            return_value=httpx.Response(200, json={"yes": 3, "no": 1})
        )

        assert make_table().count_rows_by_value("q1") == {"yes": 3, "no": 1}
        assert route.calls.last.request.url.params["variable"] == "q1"


class TestDataTableSettings:
    """Tests for table settings."""

    @respx.mock
    def test_save_settings_and_delete(self):
        """Writable settings should be saved; delete() should DELETE the table."""
        save = respx.post(TABLE_URL).mock(return_value=httpx.Response(200, json={}))
        delete = respx.delete(TABLE_URL).mock(return_value=httpx.Response(200, json={}))

        table = make_table()
        table.show_stats = False
        table.show_add_row = True
        table.save()
        table.delete()

        assert json.loads(save.calls.last.request.content) == {"show_stats": False, "show_add_row": True}
        assert delete.called
