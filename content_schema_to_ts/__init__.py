"""Content Schema to TypeScript

A Python package for generating TypeScript declarations from content
schemas: one exported record type per document and object type, plus
the union and lookup aliases tying them together.
"""

__version__ = "0.1.0"

from .assembler import ModuleAssembler, build_source
from .config import OutputConfig, OutputMode, TypegenConfig
from .declarations import TypeDeclaration, build_document_type, build_object_type
from .generate import generate_types
from .render import render_field_line, render_field_type, render_list_item_type
from .schema_loader import SchemaLoader, SchemaLoadError, dump_schema, load_schema
from .writer import AtomicWriter, OutputValidationError

__all__ = [
    "ModuleAssembler",
    "build_source",
    "TypegenConfig",
    "OutputConfig",
    "OutputMode",
    "TypeDeclaration",
    "build_document_type",
    "build_object_type",
    "generate_types",
    "render_field_line",
    "render_field_type",
    "render_list_item_type",
    "SchemaLoader",
    "SchemaLoadError",
    "load_schema",
    "dump_schema",
    "AtomicWriter",
    "OutputValidationError",
]
