"""Print the renderings of a global passing siteswap.

    passing-siteswap 2 633 --format prechac
"""

import argparse
import logging
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from passing_siteswap import formatters
from passing_siteswap.errors import SiteswapError
from passing_siteswap.pattern import Pattern

console = Console(highlight=False)
logger = logging.getLogger(__name__)

FORMATS = ('local', 'joepass', 'prechac', 'describe')

def render(pattern, fmt, html=False):
    line_end = '<br/>' if html else '\n'
    if fmt == 'local':
        return formatters.local_siteswap_html(pattern) if html else formatters.local_siteswap(pattern)
    if fmt == 'joepass':
        return formatters.joepass(pattern, line_end=line_end)
    if fmt == 'prechac':
        return formatters.prechac(pattern)
    if fmt == 'describe':
        return formatters.describe(pattern, line_end=line_end)
    raise ValueError('Unknown format: %s' % fmt)

def build_parser():
    parser = argparse.ArgumentParser(
        prog='passing-siteswap',
        description='Translate a global passing siteswap into local, JoePass and Prechac notation')
    parser.add_argument('jugglers', type=int, help='Number of jugglers sharing the pattern')
    parser.add_argument('notation', help='Global siteswap, one digit or letter per beat')
    parser.add_argument('--format', choices=FORMATS + ('all',), default='all',
                        help='Rendering to print (default: all)')
    parser.add_argument('--layout', choices=('even', 'odd'), help='Force the hand layout')
    parser.add_argument('--html', action='store_true', help='Emit HTML line breaks and entities')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser

def main(argv=None):
    """Run the command line, returning the exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        pattern = Pattern(args.jugglers, args.notation, hand_layout=args.layout)
        formats = FORMATS if args.format == 'all' else (args.format,)
        output = [(fmt, render(pattern, fmt, html=args.html)) for fmt in formats]
    except (SiteswapError, ValidationError) as e:
        logger.debug('Rejected %r for %d jugglers', args.notation, args.jugglers)
        console.print('[red]ERROR: %s[/red]' % escape(str(e)))
        return 1

    for fmt, text in output:
        if len(output) > 1:
            console.print('[bold]%s[/bold]' % fmt)
        console.print(escape(text.rstrip('\n')))
    return 0

if __name__ == '__main__':
    sys.exit(main())
