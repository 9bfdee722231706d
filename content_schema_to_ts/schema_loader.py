"""
Schema loader that builds the schema model from its JSON form.

The JSON form is the one written to the `schema.json` artifact: a
`documentDefMap` and an `objectDefMap`, each definition carrying camelCase
keys (`fieldDefs`, `computedFields`, `objectName`, ...).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .schema import (
    FIELD_DEF_CLASSES,
    LIST_ITEM_CLASSES,
    ComputedField,
    DocumentDef,
    EnumFieldDef,
    EnumListItem,
    FieldDef,
    InlineObjectFieldDef,
    InlineObjectListItem,
    ListFieldDef,
    ListFieldDefItem,
    ObjectDef,
    ObjectFieldDef,
    ObjectListItem,
    PolymorphicListFieldDef,
    ReferenceFieldDef,
    ReferenceListItem,
    SchemaDef,
    UnknownFieldDef,
    UnknownListItem,
)

logger = logging.getLogger(__name__)

# Keys shared by every field kind
COMMON_FIELD_KEYS = {"type", "name", "required", "description", "default"}


class SchemaLoadError(ValueError):
    """Raised when a schema document is structurally malformed."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class SchemaLoader:
    """Parses the JSON form of a content schema into a SchemaDef."""

    def parse(self, data: dict[str, Any]) -> SchemaDef:
        """
        Parse a schema dictionary.

        Args:
            data: Dictionary with `documentDefMap` and `objectDefMap` keys

        Returns:
            SchemaDef with all document and object definitions

        Raises:
            SchemaLoadError: If a definition or field is malformed
        """
        if not isinstance(data, dict):
            raise SchemaLoadError("schema must be an object", "#")

        schema = SchemaDef()

        for key, raw in self._get_map(data, "documentDefMap").items():
            path = f"#/documentDefMap/{key}"
            raw = self._expect_object(raw, path)
            doc_def = DocumentDef(
                name=raw.get("name", key),
                label=raw.get("label", ""),
                description=raw.get("description"),
                field_defs=self._parse_field_defs(raw.get("fieldDefs", []), f"{path}/fieldDefs"),
                computed_fields=self._parse_computed_fields(raw.get("computedFields", []), f"{path}/computedFields"),
                file_path_pattern=raw.get("filePathPattern"),
            )
            schema.document_def_map[doc_def.name] = doc_def

        for key, raw in self._get_map(data, "objectDefMap").items():
            path = f"#/objectDefMap/{key}"
            raw = self._expect_object(raw, path)
            obj_def = ObjectDef(
                name=raw.get("name", key),
                label=raw.get("label", ""),
                description=raw.get("description"),
                field_defs=self._parse_field_defs(raw.get("fieldDefs", []), f"{path}/fieldDefs"),
            )
            schema.object_def_map[obj_def.name] = obj_def

        logger.debug(
            "Loaded schema with %d document types and %d object types",
            len(schema.document_def_map),
            len(schema.object_def_map),
        )
        return schema

    def _get_map(self, data: dict[str, Any], key: str) -> dict[str, Any]:
        value = data.get(key) or {}
        if not isinstance(value, dict):
            raise SchemaLoadError(f"'{key}' must be an object", f"#/{key}")
        return value

    def _expect_object(self, value: Any, path: str) -> dict[str, Any]:
        if not isinstance(value, dict):
            raise SchemaLoadError(f"expected an object, got {type(value).__name__}", path)
        return value

    def _expect_list(self, value: Any, path: str) -> list[Any]:
        if not isinstance(value, list):
            raise SchemaLoadError(f"expected a list, got {type(value).__name__}", path)
        return value

    def _parse_computed_fields(self, raw_fields: Any, path: str) -> list[ComputedField]:
        computed_fields = []
        for i, raw in enumerate(self._expect_list(raw_fields, path)):
            raw = self._expect_object(raw, f"{path}/{i}")
            if "name" not in raw or "type" not in raw:
                raise SchemaLoadError("computed field requires 'name' and 'type'", f"{path}/{i}")
            computed_fields.append(
                ComputedField(
                    name=raw["name"],
                    type=raw["type"],
                    description=raw.get("description"),
                )
            )
        return computed_fields

    def _parse_field_defs(self, raw_fields: Any, path: str) -> list[FieldDef]:
        return [self._parse_field_def(raw, f"{path}/{i}") for i, raw in enumerate(self._expect_list(raw_fields, path))]

    def _parse_field_def(self, raw: Any, path: str) -> FieldDef:
        """
        Parse a single field definition.

        Unsupported kinds become UnknownFieldDef so that generation can
        continue with a placeholder type.
        """
        raw = self._expect_object(raw, path)
        if "name" not in raw or "type" not in raw:
            raise SchemaLoadError("field requires 'name' and 'type'", path)

        kind = raw["type"]
        common = {
            "name": raw["name"],
            "required": bool(raw.get("required", False)),
            "description": raw.get("description"),
            "default": raw.get("default"),
        }

        cls = FIELD_DEF_CLASSES.get(kind)
        if cls is None:
            logger.debug("Unsupported field kind '%s' at %s", kind, path)
            extra = {k: v for k, v in raw.items() if k not in COMMON_FIELD_KEYS}
            return UnknownFieldDef(type=kind, extra=extra, **common)

        if cls is ObjectFieldDef:
            return ObjectFieldDef(object_name=raw.get("objectName", ""), **common)
        if cls is ReferenceFieldDef:
            return ReferenceFieldDef(document_name=raw.get("documentName", ""), **common)
        if cls is InlineObjectFieldDef:
            return InlineObjectFieldDef(field_defs=self._parse_field_defs(raw.get("fieldDefs", []), f"{path}/fieldDefs"), **common)
        if cls is EnumFieldDef:
            return EnumFieldDef(options=list(self._expect_list(raw.get("options", []), f"{path}/options")), **common)
        if cls is ListFieldDef:
            return ListFieldDef(of=self._parse_list_item(raw.get("of"), f"{path}/of"), **common)
        if cls is PolymorphicListFieldDef:
            items = self._expect_list(raw.get("of", []), f"{path}/of")
            return PolymorphicListFieldDef(of=[self._parse_list_item(item, f"{path}/of/{i}") for i, item in enumerate(items)], **common)

        return cls(**common)

    def _parse_list_item(self, raw: Any, path: str) -> ListFieldDefItem:
        raw = self._expect_object(raw, path)
        if "type" not in raw:
            raise SchemaLoadError("list item requires 'type'", path)

        kind = raw["type"]
        cls = LIST_ITEM_CLASSES.get(kind)
        if cls is None:
            logger.debug("Unsupported list item kind '%s' at %s", kind, path)
            return UnknownListItem(type=kind, extra={k: v for k, v in raw.items() if k != "type"})

        if cls is ObjectListItem:
            return ObjectListItem(object_name=raw.get("objectName", ""))
        if cls is ReferenceListItem:
            return ReferenceListItem(document_name=raw.get("documentName", ""))
        if cls is EnumListItem:
            return EnumListItem(options=list(self._expect_list(raw.get("options", []), f"{path}/options")))
        if cls is InlineObjectListItem:
            return InlineObjectListItem(field_defs=self._parse_field_defs(raw.get("fieldDefs", []), f"{path}/fieldDefs"))

        return cls()


def load_schema(path: str | Path) -> SchemaDef:
    """Read a schema JSON file and parse it."""
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"invalid JSON: {e}") from e
    return SchemaLoader().parse(data)


def _dump_field_def(field_def: FieldDef) -> dict[str, Any]:
    out: dict[str, Any] = {"type": field_def.type, "name": field_def.name, "required": field_def.required}
    if field_def.description is not None:
        out["description"] = field_def.description
    if field_def.default is not None:
        out["default"] = field_def.default

    if isinstance(field_def, ObjectFieldDef):
        out["objectName"] = field_def.object_name
    elif isinstance(field_def, ReferenceFieldDef):
        out["documentName"] = field_def.document_name
    elif isinstance(field_def, InlineObjectFieldDef):
        out["fieldDefs"] = [_dump_field_def(f) for f in field_def.field_defs]
    elif isinstance(field_def, EnumFieldDef):
        out["options"] = list(field_def.options)
    elif isinstance(field_def, ListFieldDef):
        out["of"] = _dump_list_item(field_def.of) if field_def.of is not None else None
    elif isinstance(field_def, PolymorphicListFieldDef):
        out["of"] = [_dump_list_item(item) for item in field_def.of]
    elif isinstance(field_def, UnknownFieldDef):
        out.update(field_def.extra)
    return out


def _dump_list_item(item: ListFieldDefItem) -> dict[str, Any]:
    out: dict[str, Any] = {"type": item.type}
    if isinstance(item, ObjectListItem):
        out["objectName"] = item.object_name
    elif isinstance(item, ReferenceListItem):
        out["documentName"] = item.document_name
    elif isinstance(item, EnumListItem):
        out["options"] = list(item.options)
    elif isinstance(item, InlineObjectListItem):
        out["fieldDefs"] = [_dump_field_def(f) for f in item.field_defs]
    elif isinstance(item, UnknownListItem):
        out.update(item.extra)
    return out


def dump_schema(schema: SchemaDef) -> dict[str, Any]:
    """Convert a SchemaDef back to its JSON form."""
    document_def_map = {}
    for name, doc_def in schema.document_def_map.items():
        raw: dict[str, Any] = {"name": doc_def.name, "label": doc_def.label}
        if doc_def.description is not None:
            raw["description"] = doc_def.description
        if doc_def.file_path_pattern is not None:
            raw["filePathPattern"] = doc_def.file_path_pattern
        raw["fieldDefs"] = [_dump_field_def(f) for f in doc_def.field_defs]
        raw["computedFields"] = [
            {"name": c.name, "type": c.type, **({"description": c.description} if c.description is not None else {})} for c in doc_def.computed_fields
        ]
        document_def_map[name] = raw

    object_def_map = {}
    for name, obj_def in schema.object_def_map.items():
        raw = {"name": obj_def.name, "label": obj_def.label}
        if obj_def.description is not None:
            raw["description"] = obj_def.description
        raw["fieldDefs"] = [_dump_field_def(f) for f in obj_def.field_defs]
        object_def_map[name] = raw

    return {"documentDefMap": document_def_map, "objectDefMap": object_def_map}
