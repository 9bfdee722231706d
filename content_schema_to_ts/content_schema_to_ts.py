import json
import logging

import click

from .config import OutputMode, TypegenConfig
from .generate import generate_types
from .schema_loader import SchemaLoadError, load_schema
from .writer import OutputValidationError


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--output-dir", "-o", default=None, type=click.Path(file_okay=False, resolve_path=True), help="Directory receiving index.d.ts")
@click.option(
    "--schema-json",
    is_flag=True,
    default=False,
    help="Also write the schema as schema.json into the artifacts directory",
)
@click.option("--force/--no-force", default=None, help="Overwrite (default) or refuse to replace an existing declaration file")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def content_schema_to_ts(config, output_dir, schema_json, force, verbose, path):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = TypegenConfig.from_dict(json.load(f))
    else:
        config = TypegenConfig()

    # CLI flags override the config file
    if schema_json:
        config.generate_schema_json = True
    if output_dir is not None:
        config.output.target_dir = output_dir
    if force is not None:
        config.output.mode = OutputMode.FORCE if force else OutputMode.ERROR_IF_EXISTS

    try:
        schema = load_schema(path)
        target_path = generate_types(schema, config)
    except (SchemaLoadError, OutputValidationError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Type file successfully written to {target_path}")
