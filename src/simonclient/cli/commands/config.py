"""Configuration commands: show, init and path."""

import logging
from pathlib import Path

import click

from simonclient.exceptions import SimonClientError
from simonclient.models import (
    AnalogInputConfig,
    ClientConfig,
    Color,
    ConsoleOutputConfig,
    DigitalInputConfig,
    MidiOutputConfig,
)
from simonclient.models.config import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)

# Note numbers used by the templates written by 'config init'
TEMPLATE_NOTES = {Color.RED: 60, Color.GREEN: 62, Color.YELLOW: 64, Color.BLUE: 65}
TEMPLATE_CONTROLS = {Color.RED: 20, Color.GREEN: 21, Color.YELLOW: 22, Color.BLUE: 23}
TEMPLATE_LEDS = {Color.RED: 36, Color.GREEN: 38, Color.YELLOW: 40, Color.BLUE: 41}


def build_template(input_type: str) -> ClientConfig:
    """Example configuration for one input modality."""
    if input_type == "digital":
        return ClientConfig(
            input=DigitalInputConfig(buttons=dict(TEMPLATE_NOTES)),
            output=MidiOutputConfig(leds=dict(TEMPLATE_LEDS)),
        )
    if input_type == "analog":
        return ClientConfig(
            input=AnalogInputConfig(sensors=dict(TEMPLATE_CONTROLS)),
            output=ConsoleOutputConfig(),
        )
    return ClientConfig()


@click.group(name="config")
def config():
    """Manage the client configuration file."""
    pass


@config.command(name="show")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {DEFAULT_CONFIG_PATH})",
)
def show_config(config_path: Path | None):
    """Print the effective configuration as JSON."""
    path = config_path or DEFAULT_CONFIG_PATH
    try:
        cfg = ClientConfig.load_or_default(path)
    except SimonClientError as e:
        raise click.ClickException(e.get_full_message()) from e
    if not path.exists():
        click.echo(f"# {path} does not exist, showing defaults", err=True)
    click.echo(cfg.model_dump_json(indent=2))


@config.command(name="init")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Where to write the file (default: {DEFAULT_CONFIG_PATH})",
)
@click.option(
    "--input", "input_type",
    type=click.Choice(["keyboard", "digital", "analog"], case_sensitive=False),
    default="keyboard",
    help="Input device to write a template for",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init_config(config_path: Path | None, input_type: str, force: bool):
    """Write a configuration template."""
    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")

    build_template(input_type.lower()).save(path)
    logger.info(f"Wrote {input_type} configuration template to {path}")
    click.echo(f"Wrote {input_type} configuration to {path}")
    if input_type.lower() != "keyboard":
        click.echo("Run 'simonclient midi list' and adjust the port names and note numbers.")


@config.command(name="path")
def config_path_cmd():
    """Print the default configuration file path."""
    click.echo(str(DEFAULT_CONFIG_PATH))
