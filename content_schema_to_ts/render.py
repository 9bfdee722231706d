"""
Field type rendering.

Maps field definitions and list member definitions to TypeScript type
expressions. Rendering is total: kinds without a dedicated rule become a
`'todo <kind>'` literal type so generation never aborts.
"""

from __future__ import annotations

from .schema import (
    BooleanFieldDef,
    BooleanListItem,
    DateFieldDef,
    EnumFieldDef,
    EnumListItem,
    FieldDef,
    ImageFieldDef,
    InlineObjectFieldDef,
    InlineObjectListItem,
    ListFieldDef,
    ListFieldDefItem,
    MarkdownFieldDef,
    ObjectFieldDef,
    ObjectListItem,
    PolymorphicListFieldDef,
    ReferenceFieldDef,
    ReferenceListItem,
    StringFieldDef,
    StringListItem,
)

INDENT = "  "

IMAGE_TYPE = "Image"
MARKDOWN_TYPE = "Markdown"


def doc_comment(text: str, indent: str = "") -> str:
    """Render a one-line `/** ... */` comment."""
    return f"{indent}/** {text} */"


def todo_type(kind: str) -> str:
    """Placeholder for kinds the generator does not support yet."""
    return f"'todo {kind}'"


def render_literal_union(options: list[str]) -> str:
    return " | ".join(f"'{option}'" for option in options)


def render_inline_object(field_defs: list[FieldDef]) -> str:
    """Render an anonymous record literal, one field line per member."""
    return "{\n" + "\n".join(render_field_line(f) for f in field_defs) + "\n}"


def render_field_line(field_def: FieldDef) -> str:
    """
    Render a field as a record member.

    Args:
        field_def: The field definition

    Returns:
        Optional description comment line, then `name: type`, with
        `| undefined` appended for optional fields
    """
    line = f"{INDENT}{field_def.name}: {render_field_type(field_def)}"
    if not field_def.required:
        line += " | undefined"
    if field_def.description:
        return doc_comment(field_def.description, INDENT) + "\n" + line
    return line


def render_field_type(field_def: FieldDef) -> str:
    """Render the type expression of a field."""
    if isinstance(field_def, (BooleanFieldDef, StringFieldDef)):
        return field_def.type
    if isinstance(field_def, DateFieldDef):
        # Dates are serialized as ISO strings
        return "string"
    if isinstance(field_def, ImageFieldDef):
        return IMAGE_TYPE
    if isinstance(field_def, MarkdownFieldDef):
        return MARKDOWN_TYPE
    if isinstance(field_def, InlineObjectFieldDef):
        return render_inline_object(field_def.field_defs)
    if isinstance(field_def, ObjectFieldDef):
        return field_def.object_name
    if isinstance(field_def, ReferenceFieldDef):
        # References hold the id of the target document
        return "string"
    if isinstance(field_def, PolymorphicListFieldDef):
        return "(" + " | ".join(render_list_item_type(item) for item in field_def.of) + ")[]"
    if isinstance(field_def, ListFieldDef) and field_def.of is not None:
        return render_list_item_type(field_def.of) + "[]"
    if isinstance(field_def, EnumFieldDef):
        return render_literal_union(field_def.options)

    return todo_type(field_def.type)


def render_list_item_type(item: ListFieldDefItem) -> str:
    """Render the type expression of a list member."""
    if isinstance(item, (BooleanListItem, StringListItem)):
        return item.type
    if isinstance(item, ObjectListItem):
        return item.object_name
    if isinstance(item, EnumListItem):
        return "(" + render_literal_union(item.options) + ")"
    if isinstance(item, InlineObjectListItem):
        return render_inline_object(item.field_defs)
    if isinstance(item, ReferenceListItem):
        return item.document_name

    return todo_type(item.type)
