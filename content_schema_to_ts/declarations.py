"""
Type declaration building.

Turns one document or object definition into an exported TypeScript
record type. Documents carry an `_id` member and their computed fields;
objects do not.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .render import INDENT, doc_comment, render_field_line
from .schema import ComputedField, DocumentDef, ObjectDef
from .templating import get_template

logger = logging.getLogger(__name__)

TYPE_TEMPLATE = "type.d.ts.jinja2"


@dataclass(frozen=True)
class TypeDeclaration:
    """A rendered declaration, keyed by its type name."""

    name: str
    declaration_text: str


def render_computed_field_line(computed_field: ComputedField) -> str:
    line = f"{INDENT}{computed_field.name}: {computed_field.type}"
    if computed_field.description:
        return doc_comment(computed_field.description, INDENT) + "\n" + line
    return line


def _render_declaration(type_name: str, description: str | None, member_lines: list[str], with_id: bool) -> str:
    return get_template(TYPE_TEMPLATE).render(
        type_name=type_name,
        description=description,
        member_lines=member_lines,
        with_id=with_id,
    )


def build_document_type(doc_def: DocumentDef) -> TypeDeclaration:
    """
    Build the declaration of a document type.

    Args:
        doc_def: The document definition

    Returns:
        TypeDeclaration with the `export type` block
    """
    member_lines = [render_field_line(f) for f in doc_def.field_defs]
    member_lines += [render_computed_field_line(c) for c in doc_def.computed_fields]
    logger.debug("Building document type %s (%d members)", doc_def.name, len(member_lines))

    text = _render_declaration(doc_def.name, doc_def.description or doc_def.label, member_lines, with_id=True)
    return TypeDeclaration(name=doc_def.name, declaration_text=text)


def build_object_type(obj_def: ObjectDef) -> TypeDeclaration:
    """Build the declaration of an object type."""
    member_lines = [render_field_line(f) for f in obj_def.field_defs]
    logger.debug("Building object type %s (%d members)", obj_def.name, len(member_lines))

    text = _render_declaration(obj_def.name, obj_def.description or obj_def.label, member_lines, with_id=False)
    return TypeDeclaration(name=obj_def.name, declaration_text=text)
