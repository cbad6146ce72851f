"""Translate global passing siteswaps into local, JoePass and Prechac notation."""

from .config import PatternConfig
from .errors import (CollisionError, EmptySequenceError, FractionalPropCountError, LabelError,
                     JugglerCountError, NoPassError, ParseError, SiteswapError)
from .hands import HandLayout
from .pattern import Pattern
from .siteswap import Siteswap

__version__ = '0.1.0'
