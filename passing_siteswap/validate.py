from .errors import CollisionError, EmptySequenceError, FractionalPropCountError

def check_collisions(swaps):
    """Simulate one period and make sure every beat catches exactly one prop.

    Each beat starts with one free landing spot; a throw landing on a beat
    whose spot is already taken is a collision.
    """
    period = len(swaps)
    lands = [1] * period
    for beat, ss in enumerate(swaps):
        beat_to = (beat + ss) % period
        if not lands[beat_to]:
            raise CollisionError(ss, beat + 1)
        lands[beat_to] -= 1

def average_throw(swaps):
    if not swaps:
        raise EmptySequenceError('Unable to calculate the number of props, the siteswap is empty')
    return sum(swaps) / len(swaps)

def count_props(swaps):
    average = average_throw(swaps)
    if not average.is_integer():
        raise FractionalPropCountError('Seems like a bad siteswap, the average throw %s is not '
                                       'a whole number of props' % ('%.3f' % average).rstrip('0'))
    return int(average)

def validate_swaps(swaps):
    """Return the number of props, raising if the siteswap is not juggleable."""
    check_collisions(swaps)
    return count_props(swaps)
