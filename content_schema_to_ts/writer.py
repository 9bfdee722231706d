"""
Atomic file writer for generated declarations and side artifacts.

Ensures that file writes are atomic so that an interrupted generation
never leaves a truncated declaration file behind.
"""

from __future__ import annotations

import json
import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from .schema import SchemaDef
from .schema_loader import dump_schema

logger = logging.getLogger(__name__)

SCHEMA_JSON_FILE = "schema.json"

# Comments and string literals may hold unbalanced braces
_NON_STRUCTURAL = re.compile(r"""/\*.*?\*/|'[^'\n]*'|"[^"\n]*"|`[^`]*`""", re.DOTALL)


class OutputValidationError(Exception):
    """Raised when generated declarations fail validation."""


def validate_declarations(content: str) -> None:
    """Check that generated declarations are structurally sound.

    Raises:
        OutputValidationError: If validation fails
    """
    if "export type " not in content:
        raise OutputValidationError("Generated declarations contain no type definitions")

    skeleton = _NON_STRUCTURAL.sub("", content)
    open_braces = skeleton.count("{")
    close_braces = skeleton.count("}")
    if open_braces != close_braces:
        raise OutputValidationError(f"Generated declarations have unbalanced braces: {open_braces} open, {close_braces} close")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate: Callable[[str], None] | None = None, atomic: bool = True):
        """Initialize the atomic writer.

        Args:
            validate: Optional validation function for the written content
            atomic: Write through a temporary file; when False, write in place
        """
        self._validate = validate or validate_declarations
        self._atomic = atomic

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file, replacing any existing content.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        if not self._atomic:
            if validate:
                self._validate(content)
            path.write_text(content, encoding="utf-8")
            return

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate(content)

            temp_path.replace(path)
        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_path)
            raise

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content only if the file doesn't exist.

        Raises:
            FileExistsError: If the file already exists
            OutputValidationError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        self.write(path, content, validate)


def make_artifacts_dir(path: str | Path) -> Path:
    """Create the artifacts directory if needed and return it."""
    artifacts_dir = Path(path)
    artifacts_dir.mkdir(parents=True, exist_ok=True)
    return artifacts_dir


def write_schema_json(schema: SchemaDef, artifacts_dir: str | Path) -> Path:
    """Write the schema as indented JSON next to the other artifacts."""
    path = make_artifacts_dir(artifacts_dir) / SCHEMA_JSON_FILE
    AtomicWriter().write(path, json.dumps(dump_schema(schema), indent=2), validate=False)
    logger.info("Schema written to %s", path)
    return path
