from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .hands import HandLayout, assign_hands, default_layout

class PatternConfig(BaseModel):
    """Juggler count and hand layout of a passing pattern.

    hand_layout forces one of the two layout tables, None picks it from
    the juggler count. hand_sides gives the side of every hand explicitly
    and overrides hand_layout.
    """

    model_config = ConfigDict(extra='forbid', frozen=True)

    num_jugglers: int = Field(ge=1)
    hands_per_juggler: Literal[2] = 2
    hand_layout: HandLayout | None = None
    hand_sides: tuple[Literal['R', 'L'], ...] | None = None

    @model_validator(mode='after')
    def _check_sides(self):
        if self.hand_layout == HandLayout.EXPLICIT and self.hand_sides is None:
            raise ValueError('an explicit hand layout needs hand_sides')
        if self.hand_sides is not None and len(self.hand_sides) != self.num_hands:
            raise ValueError('hand_sides lists %d hands, the pattern has %d'
                             % (len(self.hand_sides), self.num_hands))
        return self

    @property
    def num_hands(self):
        return self.num_jugglers * self.hands_per_juggler

    @property
    def layout(self):
        # before any crossing correction
        if self.hand_sides is not None:
            return HandLayout.EXPLICIT
        return self.hand_layout or default_layout(self.num_jugglers)

    def sides(self, layout=None):
        layout = layout or self.layout
        if layout == HandLayout.EXPLICIT:
            return tuple(self.hand_sides)
        return assign_hands(self.num_jugglers, layout)
