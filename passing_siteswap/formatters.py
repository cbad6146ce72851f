"""Text renderings of a constructed Pattern.

Every function here only reads the pattern. Line endings are chosen by the
caller so the same text can go to a terminal ("\\n") or into an HTML page
("<br/>").
"""

import html

from .errors import LabelError
from .siteswap import format_swap

# a self 3 is the plain single throw, passing talk has no other name for it
SELF_NAMES = ['empty', 'zip', 'hold', 'single', 'double-hef', 'triple']
PASS_NAMES = ['zap', 'zap', 'zap', 'pass', 'double', 'triple']
HIGHER = 'quad or higher'

def juggler_letter(juggler):
    if juggler >= 26:
        raise LabelError('Juggler %d has no letter, only 26 jugglers can be lettered' % (juggler + 1))
    return chr(ord('A') + juggler)

def local_siteswap(pattern):
    """The local siteswap of every juggler, e.g. '< 1.5d 3 1.5d | 1.5a 3 1.5a >'."""
    jugglers = [' '.join(str(site) for site in pattern.juggler_siteswaps(j))
                for j in range(pattern.num_jugglers)]
    return '< %s >' % ' | '.join(jugglers)

def local_siteswap_html(pattern):
    return html.escape(local_siteswap(pattern), quote=False)

def _joepass_throw(site, num_jugglers):
    token = format_swap(site.swap)
    if site.is_pass:
        token += 'p'
        if num_jugglers > 2:
            token += str(site.destination_juggler + 1)
    if site.requires_cross_sign:
        token += 'x'
    return token

def joepass(pattern, line_end='\n'):
    """Render the pattern as a JoePass file.

    Juggler j starts j / num_jugglers of a beat after the first juggler, so
    fractional passes land on the catcher's beat. After the header there is
    one <..|..> block per local beat.
    """
    n = pattern.num_jugglers
    lines = ['#sx', '#objectCount %d' % pattern.num_props]
    lines += ['#jugglerDelay %d %s' % (j + 1, format_swap(j / n)) for j in range(n)]
    lines.append('#D -')
    for beat in range(0, len(pattern.siteswaps), n):
        throws = pattern.siteswaps[beat:beat + n]
        lines.append('< %s >' % ' | '.join(_joepass_throw(site, n) for site in throws))
    return ''.join(line + line_end for line in lines)

def _prechac_throw(site):
    token = format_swap(site.swap)
    if site.is_pass:
        token += 'p'
    if site.requires_cross_sign:
        token += 'x'
    if site.is_pass:
        token += juggler_letter(site.destination_juggler)
    return token

def _starts_right(pattern, juggler):
    sides = pattern.sides
    return sides[juggler] == 'R' and sides[juggler + pattern.num_jugglers] == 'L'

def prechac(pattern):
    """Prechac notation, e.g. '<3.5pB 3.5pB | 3.5pA 3.5pA>'.

    Throws read R L R L .. for each juggler; a juggler whose hands do not
    start that way has every throw prefixed with its side.
    """
    jugglers = []
    for j in range(pattern.num_jugglers):
        marked = not _starts_right(pattern, j)
        jugglers.append(' '.join((site.source_side if marked else '') + _prechac_throw(site)
                                 for site in pattern.juggler_siteswaps(j)))
    return '<%s>' % ' | '.join(jugglers)

def height_name(site):
    names = PASS_NAMES if site.is_pass else SELF_NAMES
    if site.rounded >= len(names):
        return HIGHER
    return names[site.rounded]

def describe_throw(site):
    name = height_name(site)
    if site.value == 0:
        return name
    if not site.is_pass:
        return 'self ' + name
    return '%s %s to %s' % ('diagonal' if site.is_diagonal else 'straight',
                            name, juggler_letter(site.destination_juggler))

def describe(pattern, line_end='\n'):
    """Describe each juggler's throws in words.

    e.g. 'Juggler A: R straight pass to B, L self double-hef, ...'

    The side letters come from the hand table in use. After the odd table
    was chosen for two jugglers, each juggler has both hands on one side
    and every throw of that juggler shows the same letter.
    """
    lines = []
    for j in range(pattern.num_jugglers):
        throws = ['%s %s' % (site.source_side, describe_throw(site))
                  for site in pattern.juggler_siteswaps(j)]
        lines.append('Juggler %s: %s' % (juggler_letter(j), ', '.join(throws)))
    return ''.join(line + line_end for line in lines)
