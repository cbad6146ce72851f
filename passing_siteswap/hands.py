from enum import Enum

RIGHT, LEFT = 'R', 'L'

class HandLayout(str, Enum):
    EVEN = 'even'      # R R .. L L ..
    ODD = 'odd'        # R L R L ..
    EXPLICIT = 'explicit'

def default_layout(num_jugglers):
    return HandLayout.EVEN if num_jugglers % 2 == 0 else HandLayout.ODD

def opposite_layout(layout):
    if layout == HandLayout.EXPLICIT:
        raise ValueError('An explicit hand layout has no opposite')
    return HandLayout.ODD if layout == HandLayout.EVEN else HandLayout.EVEN

def assign_hands(num_jugglers, layout):
    """Return the side ('R' or 'L') of every hand in the pattern.

    Juggler j owns hands j and j + num_jugglers.
    """
    num_hands = 2 * num_jugglers
    if layout == HandLayout.EVEN:
        return tuple(RIGHT if hand < num_jugglers else LEFT for hand in range(num_hands))
    if layout == HandLayout.ODD:
        return tuple(LEFT if hand % 2 else RIGHT for hand in range(num_hands))
    raise ValueError('Explicit hand layouts must be given as a list of sides')
