import json
import logging
from pathlib import Path

import click
import yaml

from .pipeline import CodeGeneratorConfig, DocumentError, PipelineGenerator
from .pipeline.backends import BACKENDS


def load_document(path: str):
    """Load a JSON document, or a YAML one for any other extension."""
    with open(path) as f:
        if Path(path).suffix.lower() == ".json":
            return json.load(f)
        return yaml.safe_load(f)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--language", "-l", default="rust", type=click.Choice(sorted(BACKENDS)))
@click.option("--no-helpers", is_flag=True, default=False, help="Do not emit the import/helper block before the models")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every step of the generation")
@click.option("--quiet", "-q", is_flag=True, default=False, help="Only log errors")
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True))
def swagger_to_code(config, language, no_helpers, verbose, quiet, path, output):
    """Generate model declarations from the Swagger 2.0 document at PATH."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        document = load_document(path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise click.ClickException(f"cannot decode {path}: {e}") from e

    if config is not None:
        with open(config) as f:
            config = json.load(f)
            config = CodeGeneratorConfig.from_dict(config)
    else:
        config = CodeGeneratorConfig()

    # Apply CLI flag (overrides config file if set)
    if no_helpers:
        config.include_helpers = False

    try:
        codegen = PipelineGenerator(document, config, language)
    except DocumentError as e:
        raise click.ClickException(str(e)) from e

    out = codegen.generate()
    if output is None:
        click.echo(out, nl=False)
    else:
        with open(output, "w") as f:
            f.write(out)
