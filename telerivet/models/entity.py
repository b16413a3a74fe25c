"""Base class for Telerivet entities.

An entity wraps the JSON representation of one remote object. Fields are read
from a local cache; an entity created as a stub (only its identifying fields
known) loads its full representation the first time an unknown field is read.
Writes are kept locally as dirty fields until `save()` sends them.
"""

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from telerivet.client import TelerivetClient


class RemoteField:
    """Descriptor exposing one API field of an entity as an attribute.

    Read-only fields raise AttributeError on assignment; writable fields mark
    the value dirty through `Entity.set`.
    """

    def __init__(self, *, writable: bool = False) -> None:
        self.writable = writable
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: "Entity | None", objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj.get(self.name)

    def __set__(self, obj: "Entity", value: Any) -> None:
        if not self.writable:
            raise AttributeError(f"{type(obj).__name__}.{self.name} is read-only")
        obj.set(self.name, value)


class CustomVars:
    """Custom variables stored on an entity, with dirty tracking.

    Variables can be accessed as items or attributes:

        contact.vars["birthdate"] = "1990-01-01"
        contact.vars.nickname = "Jo"
    """

    def __init__(self, vars: dict[str, Any]) -> None:
        object.__setattr__(self, "_vars", vars)
        object.__setattr__(self, "_dirty", {})

    def all(self) -> dict[str, Any]:
        return self._vars

    def get(self, name: str) -> Any:
        return self._vars.get(name)

    def set(self, name: str, value: Any) -> None:
        self._vars[name] = value
        self._dirty[name] = value

    def get_dirty_variables(self) -> dict[str, Any]:
        return self._dirty

    def clear_dirty_variables(self) -> None:
        object.__setattr__(self, "_dirty", {})

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __repr__(self) -> str:
        return f"CustomVars({self._vars!r})"


class Entity:
    """Local proxy for one remote Telerivet object."""

    def __init__(
        self,
        api: "TelerivetClient",
        data: dict[str, Any],
        is_loaded: bool = True,
    ) -> None:
        """Initialize the entity.

        Args:
            api: Client used for requests made on behalf of this entity.
            data: Field mapping as returned by the API.
            is_loaded: False for a stub holding only its identifying fields.
        """
        self._api = api
        self._data: dict[str, Any] = {}
        self._dirty: dict[str, Any] = {}
        self._vars = CustomVars({})
        self.set_data(data)
        self._is_loaded = is_loaded

    def set_data(self, data: dict[str, Any]) -> None:
        """Replace the cached field mapping."""
        self._data = data
        self._vars = CustomVars(data.get("vars") or {})

    def load(self) -> None:
        """Fetch the full representation if this entity is a stub.

        Fields and custom variables set locally before the load are kept,
        and stay dirty until the next `save()`. If the request fails the
        entity remains a stub, so `load()` can be called again.
        """
        if self._is_loaded:
            return

        data = self._api.do_request("GET", self.get_base_api_path())
        dirty_vars = self._vars.get_dirty_variables()

        self.set_data(data)
        self._data.update(self._dirty)
        for name, value in dirty_vars.items():
            self._vars.set(name, value)
        self._is_loaded = True

    @property
    def vars(self) -> CustomVars:
        """Custom variables stored for this entity.

        A stub without a `vars` field is loaded first.
        """
        if not self._is_loaded and "vars" not in self._data:
            self.load()
        return self._vars

    @property
    def is_loaded(self) -> bool:
        return self._is_loaded

    def get(self, name: str) -> Any:
        """Return a field value, loading the entity first if it is a stub."""
        if name in self._data:
            return self._data[name]
        if self._is_loaded:
            return None

        self.load()
        return self._data.get(name)

    def set(self, name: str, value: Any) -> None:
        """Set a field value locally; it is sent to the API by `save()`."""
        self._data[name] = value
        self._dirty[name] = value

    def save(self) -> None:
        """Save fields and custom variables changed since the last save.

        Only dirty values are sent. Dirty state is cleared once the request
        succeeds.
        """
        params = dict(self._dirty)
        dirty_vars = self._vars.get_dirty_variables()
        if dirty_vars:
            params["vars"] = dict(dirty_vars)

        self._api.do_request("POST", self.get_base_api_path(), params)

        self._dirty = {}
        self._vars.clear_dirty_variables()

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the cached fields."""
        return dict(self._data)

    def get_base_api_path(self) -> str:
        raise NotImplementedError

    def _delete(self) -> None:
        self._api.do_request("DELETE", self.get_base_api_path())

    def __repr__(self) -> str:
        res = type(self).__name__
        if not self._is_loaded:
            res += " (not loaded)"
        return f"{res} JSON: {json.dumps(self._data, default=str)}"
