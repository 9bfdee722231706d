"""
Schema model node definitions.

These nodes mirror the content schema handed over by a schema provider:
document and object type definitions with their typed fields. They are
read-only snapshots for the duration of one generation run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass
class FieldDef:
    """Base class for all field definitions."""

    # Wire name of the field kind ("string", "list", ...)
    type: ClassVar[str] = ""

    name: str = ""
    required: bool = False
    description: str | None = None
    default: Any = None


@dataclass
class BooleanFieldDef(FieldDef):
    type: ClassVar[str] = "boolean"


@dataclass
class StringFieldDef(FieldDef):
    type: ClassVar[str] = "string"


@dataclass
class DateFieldDef(FieldDef):
    type: ClassVar[str] = "date"


@dataclass
class ImageFieldDef(FieldDef):
    type: ClassVar[str] = "image"


@dataclass
class MarkdownFieldDef(FieldDef):
    type: ClassVar[str] = "markdown"


@dataclass
class ReferenceFieldDef(FieldDef):
    """A field pointing at a document by its id."""

    type: ClassVar[str] = "reference"

    document_name: str = ""


@dataclass
class ObjectFieldDef(FieldDef):
    """A field embedding a named object type."""

    type: ClassVar[str] = "object"

    object_name: str = ""


@dataclass
class InlineObjectFieldDef(FieldDef):
    """A field embedding an anonymous record with its own fields."""

    type: ClassVar[str] = "inline_object"

    field_defs: list[FieldDef] = field(default_factory=list)


@dataclass
class EnumFieldDef(FieldDef):
    type: ClassVar[str] = "enum"

    options: list[str] = field(default_factory=list)


@dataclass
class UnknownFieldDef(FieldDef):
    """A field whose kind is not supported by the generator."""

    # Shadows the class-level kind with the kind found in the schema
    type: str = ""  # type: ignore[misc]

    # Kind-specific keys, kept as found in the schema
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class ListFieldDefItem:
    """Base class for the kinds allowed as list members."""

    type: ClassVar[str] = ""


@dataclass
class BooleanListItem(ListFieldDefItem):
    type: ClassVar[str] = "boolean"


@dataclass
class StringListItem(ListFieldDefItem):
    type: ClassVar[str] = "string"


@dataclass
class ObjectListItem(ListFieldDefItem):
    type: ClassVar[str] = "object"

    object_name: str = ""


@dataclass
class EnumListItem(ListFieldDefItem):
    type: ClassVar[str] = "enum"

    options: list[str] = field(default_factory=list)


@dataclass
class InlineObjectListItem(ListFieldDefItem):
    type: ClassVar[str] = "inline_object"

    field_defs: list[FieldDef] = field(default_factory=list)


@dataclass
class ReferenceListItem(ListFieldDefItem):
    type: ClassVar[str] = "reference"

    document_name: str = ""


@dataclass
class UnknownListItem(ListFieldDefItem):
    type: str = ""  # type: ignore[misc]

    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class ListFieldDef(FieldDef):
    type: ClassVar[str] = "list"

    of: ListFieldDefItem | None = None


@dataclass
class PolymorphicListFieldDef(FieldDef):
    type: ClassVar[str] = "polymorphic_list"

    of: list[ListFieldDefItem] = field(default_factory=list)


@dataclass
class ComputedField:
    """A derived document field; its type text is emitted verbatim."""

    name: str = ""
    type: str = ""
    description: str | None = None


@dataclass
class DocumentDef:
    """A top-level content type with an id and computed fields."""

    name: str = ""
    label: str = ""
    description: str | None = None
    field_defs: list[FieldDef] = field(default_factory=list)
    computed_fields: list[ComputedField] = field(default_factory=list)

    # Glob of source files this document type is read from
    file_path_pattern: str | None = None


@dataclass
class ObjectDef:
    """A nested content type, only reachable through document fields."""

    name: str = ""
    label: str = ""
    description: str | None = None
    field_defs: list[FieldDef] = field(default_factory=list)


@dataclass
class SchemaDef:
    """Root of the content schema."""

    document_def_map: dict[str, DocumentDef] = field(default_factory=dict)
    object_def_map: dict[str, ObjectDef] = field(default_factory=dict)


# Kind name -> node class, used when loading schemas from their JSON form
FIELD_DEF_CLASSES: dict[str, type[FieldDef]] = {
    cls.type: cls
    for cls in (
        BooleanFieldDef,
        StringFieldDef,
        DateFieldDef,
        ImageFieldDef,
        MarkdownFieldDef,
        ReferenceFieldDef,
        ObjectFieldDef,
        InlineObjectFieldDef,
        ListFieldDef,
        PolymorphicListFieldDef,
        EnumFieldDef,
    )
}

LIST_ITEM_CLASSES: dict[str, type[ListFieldDefItem]] = {
    cls.type: cls
    for cls in (
        BooleanListItem,
        StringListItem,
        ObjectListItem,
        EnumListItem,
        InlineObjectListItem,
        ReferenceListItem,
    )
}
