"""Main CLI entry point."""

import asyncio
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from simonclient import __version__

from .commands import config, midi_group

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path.home() / ".simonclient" / "logs"
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where log records go for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "simonclient-debug.log"
    return DEFAULT_LOG_DIR / "simonclient.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path]) -> Path:
    """
    Configure logging for the application.

    The terminal UI owns stdout, so records always go to a rotating file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG level to ./simonclient-debug.log
        log_file: Custom log file path (optional)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


def load_config(config_path: Optional[Path]):
    """
    Load the configuration for a session.

    Without a path the default location is used and may be missing. An
    explicit path must exist.

    Raises:
        ConfigurationError: If an explicit config file does not exist
    """
    from simonclient.exceptions import ConfigurationError
    from simonclient.models import ClientConfig

    if config_path is None:
        return ClientConfig.load_or_default()
    try:
        return ClientConfig.load(config_path)
    except FileNotFoundError as e:
        raise ConfigurationError(
            user_message=f"Configuration file not found: {config_path}",
            technical_message=str(e),
            recovery_hint=f"Check the path, or run 'simonclient config init --config {config_path}'",
        ) from e


def apply_overrides(cfg, server: Optional[str], port: Optional[int], player_id: Optional[str]):
    """Return a copy of ``cfg`` with command line overrides applied."""
    server_update = {}
    if server:
        server_update["host"] = server
    if port:
        server_update["port"] = port

    update = {}
    if server_update:
        update["server"] = cfg.server.model_copy(update=server_update)
    if player_id:
        update["player_id"] = player_id
    return cfg.model_copy(update=update) if update else cfg


def run_session(cfg) -> int:
    """Run one session with the configured devices; returns the exit code."""
    if cfg.uses_tui:
        from simonclient.tui import SimonSaysApp

        app = SimonSaysApp(cfg)
        app.run()
        if app.error is not None:
            raise app.error
        return app.return_code or 0

    from simonclient.core import SessionController
    from simonclient.outputs import ConsoleMessages

    session = SessionController(cfg)
    session.add_observer(ConsoleMessages())
    click.echo(f"Playing as {session.player.id} on {cfg.server.url} (Ctrl+C to quit)")
    return asyncio.run(session.run())


@click.group()
@click.version_option(version=__version__, prog_name="simonclient")
def cli():
    """
    Simon Says - client for the two-player memory game.

    Join a game on a server, watch the color pattern and repeat it with
    your keyboard, MIDI buttons or analog touch sensors.

    \b
    Examples:
      # Play in the terminal with the a/s/d/f keys
      simonclient play --server game.example.org

      # Write a template for MIDI buttons, then edit it
      simonclient config init --input digital

      # Find your MIDI device names
      simonclient midi list
    """
    pass


@cli.command()
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.simonclient/config.json)'
)
@click.option('--server', '-s', type=str, default=None, help='Game server host name')
@click.option('--port', '-p', type=click.IntRange(1, 65535), default=None, help='Game server port')
@click.option('--player-id', type=str, default=None, help='Player id (default: random Player<n>)')
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./simonclient-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
def play(
    config_path: Optional[Path],
    server: Optional[str],
    port: Optional[int],
    player_id: Optional[str],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
):
    """Join a game and play until the server ends the stream."""
    from simonclient.exceptions import SimonClientError, format_error_for_display

    log_path = setup_logging(verbose, debug, log_file)
    logger.info("Starting Simon Says client")

    try:
        cfg = load_config(config_path)
        cfg = apply_overrides(cfg, server, port, player_id)
        code = run_session(cfg)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        click.echo("\nShutting down...", err=True)
        sys.exit(EXIT_INTERRUPTED)
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Error running session")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "="*70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("="*70, err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)

        sys.exit(e.exit_code if isinstance(e, SimonClientError) else EXIT_ERROR)

    logger.info(f"Session ended with exit code {code}")
    sys.exit(code)


cli.add_command(config)
cli.add_command(midi_group)

if __name__ == "__main__":
    cli()
