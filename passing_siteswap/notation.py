import re

from .errors import ParseError

DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'

def parse_swaps(text):
    """Parse a global siteswap string such as '633' or '9a7' into swap values."""
    if not text:
        raise ParseError('No siteswap was given')
    bad = re.search(r'[^0-9A-Za-z]', text)
    if bad:
        raise ParseError('Invalid character %r used in siteswap string' % bad.group())
    return tuple(DIGITS.index(ch) for ch in text.lower())

def format_swaps(swaps):
    try:
        return ''.join(DIGITS[v] for v in swaps)
    except IndexError:
        raise ParseError('Throw heights above %d have no single-character form' % (len(DIGITS) - 1))
