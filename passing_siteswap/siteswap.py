import logging
import math
from functools import reduce

from .errors import LabelError

logger = logging.getLogger(__name__)

def format_swap(ss):
    return ('%.3f' % ss).rstrip('0').rstrip('.')

def gcd(a, b):
    while b:
        a, b = b, a % b
    return a

def lcm(*values):
    return reduce(lambda a, b: a * b // gcd(a, b), values)

def hand_letter(hand):
    if hand >= 26:
        raise LabelError('Hand %d has no letter, only 26 hands can be lettered' % (hand + 1))
    return chr(ord('a') + hand)

class Siteswap:
    """A single local throw from one hand to another.

    source - the hand the prop is thrown from
    destination - the hand the prop is caught by
    value - the global siteswap of the throw
    swap - the local (Prechac) siteswap, value / number of jugglers
    isPass - does the prop go to another juggler
    """

    def __init__(self, source, value, num_jugglers, sides):
        num_hands = len(sides)
        self.source = source
        self.value = value
        self.num_jugglers = num_jugglers
        self.destination = (source + value) % num_hands
        self.swap = value / num_jugglers
        self.source_juggler = source % num_jugglers
        self.destination_juggler = self.destination % num_jugglers
        self.source_side = sides[self.source]
        self.destination_side = sides[self.destination]
        # the hand the catcher throws with on the thrower's local beat
        self.catcher_side = sides[self.destination_juggler + source - self.source_juggler]
        self.is_pass = value % num_jugglers != 0
        self.is_diagonal = self.is_pass and self.source_side == self.destination_side

    @property
    def rounded(self):
        # halves round up, 1.5p is thrown like a 2
        return math.floor(self.swap + 0.5)

    @property
    def height(self):
        """Whole beats of the catcher between throw and catch.

        Juggler j starts j / num_jugglers of a beat late, so the swap is
        shifted by the difference of thrower and catcher delays.
        """
        return (self.value + self.source_juggler - self.destination_juggler) // self.num_jugglers

    @property
    def requires_cross_sign(self):
        # odd heights change side, a catcher on the other hand that beat flips it again
        if not self.is_pass:
            return False
        crossed = self.source_side != self.destination_side
        diff_hand = self.catcher_side != self.source_side
        return crossed ^ diff_hand ^ (self.height % 2 == 1)

    def __eq__(self, other):
        if not isinstance(other, Siteswap):
            return NotImplemented
        return vars(self) == vars(other)

    def __hash__(self):
        return hash((self.source, self.value, self.destination, self.destination_side))

    def __str__(self):
        ss = format_swap(self.swap)
        if self.is_pass:
            ss += hand_letter(self.destination)
        return ss

    def __repr__(self):
        return 'Siteswap(%r)' % str(self)

def generate_siteswaps(swaps, num_jugglers, sides):
    """Spread the global swaps over the hands, one throw per beat.

    The hand and swap cursors both start at zero and step together until
    they are back at zero at the same time, after lcm(period, hands) beats.
    """
    num_hands = len(sides)
    num_sites = lcm(len(swaps), num_hands)
    logger.debug('Generating %d local throws for %d swaps over %d hands',
                 num_sites, len(swaps), num_hands)
    siteswaps = []
    cur_hand = cur_swap = 0
    for _ in range(num_sites):
        siteswaps.append(Siteswap(cur_hand, swaps[cur_swap], num_jugglers, sides))
        cur_hand = (cur_hand + 1) % num_hands
        cur_swap = (cur_swap + 1) % len(swaps)
    return tuple(siteswaps)
