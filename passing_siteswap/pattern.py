import logging

from .config import PatternConfig
from .errors import JugglerCountError, NoPassError
from .hands import HandLayout, opposite_layout
from .notation import format_swaps, parse_swaps
from .siteswap import generate_siteswaps
from .validate import validate_swaps

logger = logging.getLogger(__name__)

class Pattern:
    """A passing pattern built from a global siteswap.

    num_jugglers - the number of jugglers in the pattern
    num_hands - the number of hands in the pattern (2 per juggler)
    swaps - the global siteswap values, rotated so the pattern starts with a pass
    num_props - the number of props used in the pattern
    sides - the side ('R' or 'L') of each hand
    siteswaps - the local throws, one per beat over lcm(period, num_hands) beats
    invert_hand_order - whether the opposite hand layout was chosen so that
        the first pass is straight
    """

    def __init__(self, num_jugglers, notation, hand_layout=None, hand_sides=None):
        if num_jugglers < 1:
            raise JugglerCountError('There must be at least 1 juggler in the pattern')
        self.config = PatternConfig(num_jugglers=num_jugglers, hand_layout=hand_layout,
                                    hand_sides=hand_sides)
        self.swaps = parse_swaps(notation)
        self.num_props = validate_swaps(self.swaps)
        self.invert_hand_order = False
        self.calculate_siteswaps()
        self._start_with_pass()
        self._straighten_first_pass()

    @property
    def num_jugglers(self):
        return self.config.num_jugglers

    @property
    def num_hands(self):
        return self.config.num_hands

    @property
    def period(self):
        return len(self.swaps)

    @property
    def layout(self):
        if self.invert_hand_order:
            return opposite_layout(self.config.layout)
        return self.config.layout

    def calculate_siteswaps(self):
        # reshuffling is about as expensive as starting again, so always rebuild
        self.sides = self.config.sides(self.layout)
        self.siteswaps = generate_siteswaps(self.swaps, self.num_jugglers, self.sides)
        return self.siteswaps

    def rotate_left(self, count=1):
        count %= self.period
        self.swaps = self.swaps[count:] + self.swaps[:count]
        return self.calculate_siteswaps()

    def rotate_right(self, count=1):
        return self.rotate_left(-count)

    def _start_with_pass(self):
        tries = self.period
        while not self.siteswaps[0].is_pass:
            tries -= 1
            if not tries:
                raise NoPassError('The siteswap %s has no passes for %d jugglers'
                                  % (format_swaps(self.swaps), self.num_jugglers))
            self.rotate_left()
            logger.debug('Rotated swaps to %s to start on a pass', format_swaps(self.swaps))

    def _straighten_first_pass(self):
        if self.config.layout == HandLayout.EXPLICIT or not self.siteswaps[0].is_diagonal:
            return
        self.invert_hand_order = True
        self.calculate_siteswaps()
        logger.debug('First pass was diagonal, switched to the %s hand layout', self.layout.value)

    def juggler_siteswaps(self, juggler):
        """The local throws made by one juggler, in the order they are thrown."""
        return self.siteswaps[juggler::self.num_jugglers]

    def __str__(self):
        return format_swaps(self.swaps)

    def __repr__(self):
        return 'Pattern(%d, %r)' % (self.num_jugglers, str(self))
