import json
from pathlib import Path

import click

from .pipeline import AtomicWriter, CodeGeneratorConfig, OutputMode, PipelineGenerator


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--format", "format_code", is_flag=True, default=False, help="Format the generated module with ruff")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def metamodel_to_code(config, force, format_code, path, output):
    with open(path, encoding="utf-8") as f:
        document = json.load(f)

    if config is not None:
        with open(config, encoding="utf-8") as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if force:
        config.output.mode = OutputMode.FORCE
    if format_code:
        config.formatter.enabled = True

    codegen = PipelineGenerator(document, config)
    model = codegen.model

    click.echo(f"LSP Version: {model.version}")
    click.echo(f"Structures: {len(model.structures)}")
    click.echo(f"Enumerations: {len(model.enumerations)}")
    click.echo(f"Type Aliases: {len(model.type_aliases)}")
    click.echo(f"Requests: {len(model.requests)}")
    click.echo(f"Notifications: {len(model.notifications)}")

    out = codegen.generate()

    click.echo(f"Writing to {output}...")
    AtomicWriter().write_output(Path(output), out, config.output)
    click.echo("Done!")
