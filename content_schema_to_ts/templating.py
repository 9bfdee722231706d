"""
Jinja2 environment for the TypeScript templates.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import jinja2

TEMPLATE_DIR = Path(__file__).parent / "templates" / "typescript"


@lru_cache(maxsize=1)
def get_environment() -> jinja2.Environment:
    """Build the shared template environment.

    Templates are plain text, so autoescaping stays off and block tags do
    not leave blank lines behind.
    """
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        lstrip_blocks=True,
        trim_blocks=True,
        autoescape=False,
    )


def get_template(name: str) -> jinja2.Template:
    return get_environment().get_template(name)
