"""Telerivet custom data table."""

from typing import Any

from telerivet.cursor import ApiCursor
from telerivet.models.data_row import DataRow
from telerivet.models.entity import Entity, RemoteField


class DataTable(Entity):
    """Represents a custom data table that can store arbitrary rows.

    Fields:
        id: ID of the data table (read-only)
        name: Name of the data table (updatable)
        num_rows: Number of rows in the table (read-only)
        show_add_row: Whether to allow adding rows in the web app (updatable)
        show_stats: Whether to show summary charts in the web app (updatable)
        show_contact_columns: Whether to show contact columns in the web app (updatable)
        vars: Custom variables (updatable)
    """

    id = RemoteField()
    name = RemoteField(writable=True)
    num_rows = RemoteField()
    show_add_row = RemoteField(writable=True)
    show_stats = RemoteField(writable=True)
    show_contact_columns = RemoteField(writable=True)
    project_id = RemoteField()

    def query_rows(self, params: dict[str, Any] | None = None) -> ApiCursor:
        """Query rows in this data table.

        Args:
            params: Filters such as `time_created[min]`, `contact_id`,
                `vars` (e.g. {"age": {"gte": 18}}), `sort`, `page_size`, `offset`.

        Returns:
            ApiCursor of DataRow.
        """
        return self._api.cursor(DataRow, self.get_base_api_path() + "/rows", params)

    def create_row(self, params: dict[str, Any] | None = None) -> DataRow:
        """Add a new row to this data table.

        Args:
            params: Optional `contact_id`, `from_number` and `vars` (column values).
        """
        return DataRow(self._api, self._api.do_request("POST", self.get_base_api_path() + "/rows", params))

    def get_row_by_id(self, id: str) -> DataRow:
        """Retrieve a row from this data table."""
        return DataRow(self._api, self._api.do_request("GET", self.get_base_api_path() + f"/rows/{id}"))

    def init_row_by_id(self, id: str) -> DataRow:
        """Initialize a row by ID without making an API request."""
        return DataRow(self._api, {"project_id": self.project_id, "table_id": self.id, "id": id}, False)

    def get_fields(self) -> list[dict[str, Any]]:
        """Return the fields (columns) stored in this data table.

        Each item has `name`, `variable`, `type` and `order`.
        """
        return self._api.do_request("GET", self.get_base_api_path() + "/fields")

    def set_field_metadata(self, variable: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Update the metadata of a field in this data table.

        Args:
            variable: Variable name of the field.
            params: `name`, `type`, `order`, `items`, `readonly`, `lookup_key`.
        """
        return self._api.do_request("POST", self.get_base_api_path() + f"/fields/{variable}", params)

    def count_rows_by_value(self, variable: str) -> dict[str, int]:
        """Return the number of rows for each value of a given variable.

        Only practical for variables with a small number of distinct values.
        """
        return self._api.do_request(
            "GET", self.get_base_api_path() + "/count_rows_by_value", {"variable": variable}
        )

    def delete(self) -> None:
        """Permanently delete this data table, including all of its rows."""
        self._delete()

    def get_base_api_path(self) -> str:
        return f"/projects/{self.get('project_id')}/tables/{self.get('id')}"
