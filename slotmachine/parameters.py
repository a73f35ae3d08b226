"""Request parameters a slot machine reads card indices from."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Any, Protocol

_INTEGER = re.compile(r"[+-]?[0-9]+")

Scalar = str | int | float


class ParameterSource(Protocol):
    """Anything able to tell whether a parameter is set and read it as an int."""

    def has_scalar(self, name: str) -> bool: ...

    def get_int(self, name: str, default: int = 0) -> int: ...


class QueryParameters(Mapping[str, Any]):
    """Read-only view over request query parameters.

    Values are scalars (strings or numbers) or structured values (lists and
    dicts). Only scalar values count as set when picking a card index; an
    empty string or ``"0"`` is still a set value.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = dict(values or {})

    @classmethod
    def from_query_params(cls, query_params) -> QueryParameters:
        """Build parameters from a Starlette ``QueryParams`` multi-dict.

        Bracketed names such as ``k[]`` or ``k[a]`` collect into a list under
        ``k``. A plain name given several times keeps its last value.
        """
        values: dict[str, Any] = {}
        for raw_name, value in query_params.multi_items():
            name, bracket, _ = raw_name.partition("[")
            if bracket and name and raw_name.endswith("]"):
                group = values.get(name)
                if not isinstance(group, list):
                    group = values[name] = []
                group.append(value)
            else:
                values[raw_name] = value
        return cls(values)

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"QueryParameters({self._values!r})"

    def get_scalar(self, name: str) -> Scalar | None:
        """Return the parameter if it is set to a scalar, else None."""
        value = self._values.get(name)
        return value if isinstance(value, Scalar) else None

    def has_scalar(self, name: str) -> bool:
        return self.get_scalar(name) is not None

    def get_int(self, name: str, default: int = 0) -> int:
        """Return the parameter as an integer, or ``default`` when unset or not numeric."""
        value = self.get_scalar(name)
        if value is None:
            return default
        if isinstance(value, str):
            value = value.strip()
            if not _INTEGER.fullmatch(value):
                return default
        try:
            return int(value)
        except (OverflowError, ValueError):
            # non-finite floats, digit strings past the int conversion limit
            return default
