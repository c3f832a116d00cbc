"""
cli.py
======
Command line entry point: render selector descriptions stored as JSON.
"""

import argparse
import logging
from pathlib import Path

import logfire
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from csscraft.builder import Combinator
from csscraft.config import Settings, configure_logfire
from csscraft.exceptions import DeserializationError
from csscraft.models import SelectorChain, SelectorSpec
from csscraft.serialization import from_json
from csscraft.utils.logging import setup_local_logging

logger = logging.getLogger(__name__)

THEME = Theme(
    {
        'info': 'dim cyan',
        'warning': 'magenta',
        'danger': 'bold red',
        'success': 'bold green',
    }
)


def load_chain(text: str) -> SelectorChain:
    """Load a selector chain, or a single compound selector, from JSON text.

    Raises:
        DeserializationError: If the text matches neither shape.

    """
    try:
        return from_json(SelectorChain, text)
    except DeserializationError:
        return SelectorChain(head=from_json(SelectorSpec, text))


def parts_table(chain: SelectorChain) -> Table:
    """Build a table listing every part of every compound selector in the chain."""
    table = Table(title='Selector Parts')
    table.add_column('#', style='cyan', justify='right')
    table.add_column('Combinator', style='magenta')
    table.add_column('Part', style='green')
    table.add_column('Token')

    combinators = [''] + [_combinator_label(link.combinator) for link in chain.links]
    for idx, (combinator, spec) in enumerate(zip(combinators, chain.selectors), 1):
        for row, (label, token) in enumerate(spec.rows()):
            table.add_row(str(idx) if row == 0 else '', combinator if row == 0 else '', label, escape(token))

    return table


def _combinator_label(token: str) -> str:
    for combinator in Combinator:
        if combinator.value == token:
            return f'{combinator.name.lower().replace("_", " ")} ({token!r})'
    return repr(token)


def render_file(path: Path, console: Console, show_table: bool = False) -> int:
    """Render the selector described in a JSON file.

    Args:
        path: JSON file holding a SelectorChain or a SelectorSpec
        console: Rich console for output
        show_table: Also print the parts of each compound selector

    Returns:
        Process exit status.

    """
    with logfire.span('render_file', path=str(path)):
        if not path.exists():
            logger.error(f'File not found: {path}')
            console.print(f'[danger]File not found: {escape(str(path))}[/danger]')
            return 1

        try:
            chain = load_chain(path.read_text(encoding='utf-8'))
            selector = chain.build()
        except DeserializationError as e:
            logfire.error('Invalid selector description', path=str(path), error=str(e))
            logger.error(f'Invalid selector description in {path}: {e}')
            console.print(f'[danger]Invalid selector description: {escape(str(e))}[/danger]')
            return 1

        if show_table:
            console.print(parts_table(chain))

        rendered = selector.stringify()
        logfire.info('Selector rendered', path=str(path), selector=rendered)
        logger.info(f'Selector rendered from {path}: {rendered}')
        console.print(rendered, markup=False, highlight=False, soft_wrap=True)
        return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(prog='csscraft', description='Build CSS selectors from structured descriptions')
    parser.add_argument('--log-level', type=str, help='Write a local log file at this level (e.g. DEBUG, INFO)')

    subparsers = parser.add_subparsers(dest='command', required=True)
    render = subparsers.add_parser('render', help='Render a selector described in a JSON file')
    render.add_argument('file', type=Path, help='JSON file with a selector chain or a single selector')
    render.add_argument('--table', action='store_true', help='Also show a table of selector parts')

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    console = Console(theme=THEME)

    try:
        settings = Settings.from_env()
        if args.log_level:
            settings = Settings(log_level=args.log_level, logfire_token=settings.logfire_token)
    except ValueError as e:
        console.print(f'[danger]{escape(str(e))}[/danger]')
        return 1

    configure_logfire(settings)
    if settings.log_level:
        log_file = setup_local_logging(settings.log_level)
        console.print(f'[info]Logging to {escape(str(log_file))}[/info]')

    return render_file(args.file, console, show_table=args.table)
