import json
import logging
from pathlib import Path

import click
import yaml

from hemtt_config.errors import ConfigError
from hemtt_config.models.project import ProjectConfig
from hemtt_config.services.project_loader import find_project_file, load_project_config


class AliasedGroup(click.Group):
    _aliases = {"c": "check", "f": "files", "s": "show"}

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, self._aliases.get(cmd_name, cmd_name))


_config_option = click.option(
    "--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to project.toml (default: discovered from the current directory)",
)


@click.group(cls=AliasedGroup)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose):
    """Project configuration tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@_config_option
def check(config):
    """Load and validate the project configuration."""
    project = _load_config(config)
    click.echo(f"Project {project.name} ({project.prefix}) is valid.")


@cli.command()
@_config_option
def files(config):
    """Print the files that will be copied into the mod root."""
    project = _load_config(config)
    for name in project.files():
        click.echo(name)


@cli.command()
@_config_option
@click.option("--format", "-f", "fmt", type=click.Choice(["json", "yaml"]), default="json", help="Output format")
def show(config, fmt):
    """Print the loaded configuration with defaults filled in."""
    project = _load_config(config)
    data = project.to_dict()
    if fmt == "yaml":
        click.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), nl=False)
    else:
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _load_config(config_path: Path | None) -> ProjectConfig:
    try:
        if config_path is None:
            config_path = find_project_file(Path.cwd())
        return load_project_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e))
