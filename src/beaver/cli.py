"""Command-line interface for Beaver.

Only the shell options (``--verbose``, ``--config``, ``--version``,
``--help``) are handled by click, and only before the command word.
Everything from the command word on is passed untouched to
:func:`beaver.parser.analyze`.
"""

import logging
import sys
from pathlib import Path

import click
from rich.markup import escape

from . import __version__
from .commands import ExecutionContext, build_command
from .config import load_config
from .errors import BeaverError
from .parser import CommandKind, analyze
from .storage import Storage
from .theme import get_themed_console, show_quick_help

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, prog_name="beaver")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(config_path, verbose, args):
    """Beaver - a small personal todo list.

    \b
    Commands:
      add <title> [-p=H|M|L]                 Add a todo
      edit <id> [-t=<title>] [-p=H|M|L]      Edit an active todo
      done <id>                              Complete a todo
      fetch <id>                             Show one todo
      list [-s=<order>] [-a]                 List todos
      next                                   Show the next todo to work on
      remove <id>                            Delete an active todo
      purge                                  Delete all completed todos

    \b
    Sort orders: PriorityDESC (default), Priority, CreationTimeDESC, CreationTime
    """
    configure_logging(verbose)
    config = load_config(config_path)
    console = get_themed_console(no_color=config.no_color)

    parsed = analyze(list(args))
    if parsed is None:
        logger.debug("No command provided")
        show_quick_help(console)
        return

    try:
        command = build_command(parsed)
        if command is None:
            if parsed.command is CommandKind.DELETE:
                console.print("[error]The delete command is not supported, use remove[/error]")
            else:
                console.print(f"[error]Unknown command '{escape(args[0].strip())}'[/error]")
            sys.exit(1)

        logger.debug(f"Running {parsed.command.value} with value={parsed.value!r} "
                     f"options={dict(parsed.options)!r}")
        context = ExecutionContext(
            storage=Storage.from_config(config),
            console=console,
            config=config,
        )
        command.execute(context)
    except BeaverError as e:
        logger.debug(f"Command failed: {e!r}")
        console.print(f"[error]Command failed: {escape(str(e))}[/error]")
        sys.exit(1)


if __name__ == "__main__":
    main()
