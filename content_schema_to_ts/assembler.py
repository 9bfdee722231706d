"""
Module assembly.

Combines the preamble, the union and lookup aliases, and every document
and object declaration into the text of one `.d.ts` module. Definitions
are sorted by name first so the output only depends on the schema content.
"""

from __future__ import annotations

import logging

from . import __version__
from .config import TypegenConfig
from .declarations import TypeDeclaration, build_document_type, build_object_type
from .schema import SchemaDef
from .templating import get_template

logger = logging.getLogger(__name__)

PREFIX_TEMPLATE = "prefix.d.ts.jinja2"

# Stands in for a union without members
EMPTY_UNION = "never"


def render_union(type_names: list[str]) -> str:
    return " | ".join(type_names) if type_names else EMPTY_UNION


class ModuleAssembler:
    """Builds the declaration module for a schema."""

    def __init__(self, config: TypegenConfig | None = None):
        self.config = config or TypegenConfig()

    def _generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""
        return f"// NOTE This file is auto-generated by content_schema_to_ts v{__version__}"

    def render_prefix(self) -> str:
        """Render the fixed preamble the declarations depend on."""
        return get_template(PREFIX_TEMPLATE).render(
            generation_comment=self._generation_comment(),
            markdown_import_module=self.config.markdown_import_module,
            interface_prefix=self.config.global_interface_prefix,
        )

    def assemble(self, schema: SchemaDef) -> str:
        """
        Generate the module source for a schema.

        Args:
            schema: The schema definition

        Returns:
            TypeScript declaration source, ending with a newline
        """
        document_defs = sorted(schema.document_def_map.values(), key=lambda d: d.name)
        object_defs = sorted(schema.object_def_map.values(), key=lambda d: d.name)

        document_types: list[TypeDeclaration] = [build_document_type(d) for d in document_defs]
        object_types: list[TypeDeclaration] = [build_object_type(o) for o in object_defs]
        logger.debug("Assembling %d document types and %d object types", len(document_types), len(object_types))

        document_names = [t.name for t in document_types]
        object_names = [t.name for t in object_types]

        type_map = "\n".join(f"  {name}: {name}" for name in document_names)

        sections = [
            self.render_prefix(),
            f"export type DocumentTypes = {render_union(document_names)}\n" "export type DocumentTypeNames = DocumentTypes['_typeName']",
            "export type AllTypes = DocumentTypes | ObjectTypes\n" "export type AllTypeNames = DocumentTypeNames | ObjectTypeNames",
            "export type DocumentTypeMap = {\n" + (type_map + "\n" if type_map else "") + "}",
            "/** Document types */",
            *(t.declaration_text for t in document_types),
            "/** Object types */",
            f"export type ObjectTypes = {render_union(object_names)}\n" "export type ObjectTypeNames = ObjectTypes['_typeName']",
            *(t.declaration_text for t in object_types),
        ]
        return "\n\n".join(sections) + "\n"


def build_source(schema: SchemaDef, config: TypegenConfig | None = None) -> str:
    """Generate the declaration module text for a schema."""
    return ModuleAssembler(config).assemble(schema)
