class SiteswapError(Exception): pass

class ParseError(SiteswapError): pass

class EmptySequenceError(SiteswapError): pass

class FractionalPropCountError(SiteswapError): pass

class NoPassError(SiteswapError): pass

class JugglerCountError(SiteswapError): pass

class CollisionError(SiteswapError):
    def __init__(self, height, position):
        self.height = height
        self.position = position
        super().__init__('The throw of height %d at position %d lands on a beat '
                         'that is already caught' % (height, position))

class LabelError(SiteswapError): pass
