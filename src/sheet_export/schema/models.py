"""Schema data model: column specs, resolved schemas and record descriptors."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

# Key under which per-field options live in ``dataclasses.field(metadata=...)``
FIELD_METADATA_KEY = "sheet_export"
# Class attribute that overrides the sheet name of a dataclass record type
SHEET_NAME_ATTR = "__sheet_name__"

Accessor = Callable[[Any], Any]


def default_accessor(field_id: str) -> Accessor:
    """Return an accessor reading ``field_id`` by key from mappings, by attribute otherwise."""

    def _access(record: Any) -> Any:
        if isinstance(record, Mapping):
            return record[field_id]
        return getattr(record, field_id)

    _access.__name__ = f"access_{field_id}"
    return _access


@dataclass(frozen=True)
class ColumnSpec:
    """One output column.

    Attributes:
        display_name: Header text (duplicates across columns are allowed)
        source_field_id: Field the value comes from; None for explicit headers
        included: False when the field was marked skip
        accessor: Callable extracting the value from a record
    """

    display_name: str
    source_field_id: str | None = None
    included: bool = True
    accessor: Accessor | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Schema:
    """Ordered, resolved columns of one export call plus the sheet name."""

    columns: tuple[ColumnSpec, ...]
    sheet_name: str

    @property
    def headers(self) -> list[str]:
        return [column.display_name for column in self.columns]

    @property
    def projectable(self) -> bool:
        """True when every column has an accessor, i.e. the schema came from a descriptor."""
        return all(column.accessor is not None for column in self.columns)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[ColumnSpec]:
        return iter(self.columns)


@dataclass(frozen=True)
class FieldOptions:
    """Caller-supplied description of one record field.

    Attributes:
        name: Field identifier, also the fallback header text
        display_name: Header override; ignored when blank
        skip: Leave the field out of the sheet
        accessor: Custom extraction function; defaults to key/attribute lookup of ``name``
    """

    name: str
    display_name: str | None = None
    skip: bool = False
    accessor: Accessor | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class RecordDescriptor:
    """Ordered field list of a record type, with an optional sheet name override."""

    fields: tuple[FieldOptions, ...]
    sheet_name: str | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of FieldOptions (lists read better at call sites).
        object.__setattr__(self, "fields", tuple(self.fields))

    @classmethod
    def from_dataclass(cls, record_type: type, sheet_name: str | None = None) -> RecordDescriptor:
        """Build a descriptor from a dataclass's declared fields.

        Per-field options are read from ``field(metadata={"sheet_export": {"name": ..., "skip": ...}})``.
        The sheet name is ``sheet_name`` if given, else the class attribute ``__sheet_name__``.

        Raises:
            TypeError: If ``record_type`` is not a dataclass type
        """
        if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
            raise TypeError(f"{record_type!r} is not a dataclass type")

        options = []
        for dc_field in dataclasses.fields(record_type):
            meta = dc_field.metadata.get(FIELD_METADATA_KEY, {})
            options.append(
                FieldOptions(
                    name=dc_field.name,
                    display_name=meta.get("name"),
                    skip=bool(meta.get("skip", False)),
                    accessor=meta.get("accessor"),
                )
            )

        if sheet_name is None:
            sheet_name = getattr(record_type, SHEET_NAME_ATTR, None)
        return cls(fields=tuple(options), sheet_name=sheet_name)


def column(name: str | None = None, *, skip: bool = False, **field_kwargs: Any) -> Any:
    """``dataclasses.field`` wrapper carrying sheet-export column options.

    Usage:
        @dataclass
        class Order:
            __sheet_name__ = "Orders"
            order_id: int = column("Order ID")
            internal_note: str = column(skip=True, default="")
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[FIELD_METADATA_KEY] = {"name": name, "skip": skip}
    return field(metadata=metadata, **field_kwargs)
