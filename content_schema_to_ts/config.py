"""
Configuration for type generation and output handling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    FORCE = "force"  # Default: replace the previous declarations
    ERROR_IF_EXISTS = "error"  # Raise error if file exists


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        target_dir: Directory receiving the declaration file
        file_name: Name of the declaration file
        artifacts_dir: Directory receiving side artifacts such as schema.json
        mode: How to handle an existing declaration file
        validate_before_write: Whether to check the declarations before writing
        atomic_write: Whether to write through a temporary file
    """

    target_dir: str = str(Path("node_modules") / "@types" / "contentlayer" / "types")
    file_name: str = "index.d.ts"
    artifacts_dir: str = ".contentlayer"
    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True
    atomic_write: bool = True

    @property
    def target_path(self) -> Path:
        return Path(self.target_dir) / self.file_name


@dataclass
class TypegenConfig:
    """Configuration options for type generation."""

    # Add "auto-generated" comment at top of file
    add_generation_comment: bool = True

    # Module the Markdown type is imported from
    markdown_import_module: str = "@contentlayer/core"

    # Prefix of the global interfaces (<prefix>GenTypes, <prefix>Gen)
    global_interface_prefix: str = "Contentlayer"

    # Also write the raw schema as schema.json into the artifacts directory
    generate_schema_json: bool = False

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> TypegenConfig:
        """Create a config from a dictionary."""
        config = TypegenConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                defaults = OutputConfig()
                mode = v.get("mode", defaults.mode)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    target_dir=v.get("target_dir", defaults.target_dir),
                    file_name=v.get("file_name", defaults.file_name),
                    artifacts_dir=v.get("artifacts_dir", defaults.artifacts_dir),
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "add_generation_comment": self.add_generation_comment,
            "markdown_import_module": self.markdown_import_module,
            "global_interface_prefix": self.global_interface_prefix,
            "generate_schema_json": self.generate_schema_json,
            "output": {
                "target_dir": self.output.target_dir,
                "file_name": self.output.file_name,
                "artifacts_dir": self.output.artifacts_dir,
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
