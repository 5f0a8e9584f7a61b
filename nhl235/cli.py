# nhl235/cli.py
"""
Command line entry point:

    235 [--nocolors] [--highlight] [--stats] [--debug] [--version]

Fetch, parse, format and print happen once, then the process exits.
"""

import argparse
import os
import sys

from . import __version__, log
from .api import fetch_scores
from .colors import is_tty, render
from .config import read_highlights
from .errors import NHL235Error
from .formatting import format_scoreboard
from .models import HighlightConfig, parse_scoreboard


def build_parser():
    parser = argparse.ArgumentParser(
        prog='235',
        description='Display live or previous NHL match results on command line',
        epilog='Homepage: https://hamatti.github.io/nhl-235/',
    )
    parser.add_argument('--version', help='Current version', action='store_true')
    parser.add_argument('--nocolors', help='Disable terminal colors', action='store_true')
    parser.add_argument(
        '--highlight',
        help='Highlight players based on $HOME/.235.config file. If --nocolors is enabled, does nothing',
        action='store_true',
    )
    parser.add_argument(
        '--stats',
        help='Display stats (goals + assists) for players defined in $HOME/.235.config file',
        action='store_true',
    )
    parser.add_argument('--debug', help='Write request diagnostics to stderr', action='store_true')
    return parser


def main(argv=None):
    """Run once and return the process exit code."""
    args = build_parser().parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if args.debug:
        log.DEBUG = True

    use_colors = not args.nocolors and is_tty()
    highlights = HighlightConfig.from_names(read_highlights())

    try:
        document = fetch_scores()
        scoreboard = parse_scoreboard(document)
        lines = format_scoreboard(
            scoreboard,
            highlights=highlights,
            show_highlights=args.highlight,
            show_stats=args.stats,
        )
        render(lines, use_colors)
    except NHL235Error as e:
        print(f"ERROR: {e.message}")
        if e.details:
            log.debug('ERROR', e.details)
        return 1
    except KeyboardInterrupt:
        print("\nProgram interrupted by user.")
        return 130
    except BrokenPipeError:
        # Reader went away (e.g. piped into head), point stdout at devnull
        # so the interpreter does not fail again flushing it on exit
        _silence_stdout()
        return 0
    return 0


def _silence_stdout():
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)


def run():
    sys.exit(main())
