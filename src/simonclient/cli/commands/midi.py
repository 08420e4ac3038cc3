"""MIDI command implementations."""

import contextlib
import logging
import time
from datetime import datetime
from pathlib import Path

import click
import mido

from simonclient.exceptions import SimonClientError
from simonclient.midi import find_port, list_input_ports, list_output_ports
from simonclient.models import ClientConfig

logger = logging.getLogger(__name__)

# What a MIDI port is used for, by input/output config type
PORT_ROLES = {"digital": "buttons", "analog": "sensors", "midi": "LEDs"}


@click.group(name="midi")
def midi_group():
    """MIDI device commands."""


def _echo_ports(title: str, ports: list[str], device) -> None:
    """Print ``ports`` and mark the one ``device`` would open."""
    role = PORT_ROLES.get(device.type)
    chosen = find_port(ports, device.port) if role else None

    click.echo(f"{title}:\n")
    if not ports:
        click.echo("  No ports found.")
    for i, port in enumerate(ports):
        if port == chosen:
            click.secho(f"  [{i}] {port}  <- {role}", bold=True)
        else:
            click.echo(f"  [{i}] {port}")

    if role and chosen is None:
        wanted = f"matching {device.port!r}" if device.port else "at all"
        click.secho(f"  No port {wanted}: the {role} cannot be opened.", fg="yellow")


@midi_group.command(name="list")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config whose port filters are checked (default: ~/.simonclient/config.json)",
)
def list_midi(config_path: Path | None):
    """
    List MIDI ports and show which ones a game would use.

    The port picked for the configured buttons, sensors or LEDs is marked.
    """
    try:
        cfg = ClientConfig.load_or_default(config_path)
    except SimonClientError as e:
        raise click.ClickException(e.get_full_message()) from e

    _echo_ports("MIDI Input Ports", list_input_ports(), cfg.input)
    click.echo()
    _echo_ports("MIDI Output Ports", list_output_ports(), cfg.output)


@midi_group.command(name="monitor")
@click.option(
    "--filter-clock/--no-filter-clock",
    default=True,
    help="Filter out clock messages (default: enabled)",
)
def monitor_midi(filter_clock: bool):
    """
    Print incoming MIDI messages from every input port.

    Handy for finding the note and CC numbers to put in the button,
    sensor and LED mappings of the configuration.

    Press Ctrl+C to stop monitoring.
    """
    ports = list_input_ports()

    if not ports:
        click.echo("No MIDI input ports found.")
        return

    click.echo(f"Monitoring {len(ports)} MIDI input port(s):")
    for port in ports:
        click.echo(f"  - {port}")
    click.echo("\nPress Ctrl+C to stop\n")

    def make_callback(name: str):
        def callback(msg: mido.Message) -> None:
            if filter_clock and msg.type == "clock":
                return
            timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
            click.echo(f"[{timestamp}] {name}: {msg}")

        return callback

    opened = []
    try:
        for port_name in ports:
            opened.append(mido.open_input(port_name, callback=make_callback(port_name)))

        while True:
            time.sleep(0.1)

    except KeyboardInterrupt:
        click.echo("\n\nStopping monitor...")

    finally:
        for port in opened:
            with contextlib.suppress(Exception):
                port.close()
