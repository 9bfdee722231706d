"""
Type generation command: schema in, declaration file out.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .assembler import build_source
from .config import OutputMode, TypegenConfig
from .schema import SchemaDef
from .writer import AtomicWriter, write_schema_json

logger = logging.getLogger(__name__)


def generate_types(schema: SchemaDef, config: TypegenConfig | None = None) -> Path:
    """
    Generate the declaration file for a schema.

    Args:
        schema: The schema supplied by the schema provider
        config: Generation and output configuration

    Returns:
        Path of the written declaration file

    Raises:
        FileExistsError: If the file exists and the output mode forbids overwriting
        OutputValidationError: If the generated declarations fail validation
    """
    config = config or TypegenConfig()
    output = config.output

    if config.generate_schema_json:
        write_schema_json(schema, output.artifacts_dir)

    source = build_source(schema, config)

    target_path = output.target_path
    writer = AtomicWriter(atomic=output.atomic_write)
    if output.mode == OutputMode.ERROR_IF_EXISTS:
        writer.write_if_not_exists(target_path, source, validate=output.validate_before_write)
    else:
        writer.write(target_path, source, validate=output.validate_before_write)

    logger.info("Type file successfully written to %s", target_path)
    return target_path
