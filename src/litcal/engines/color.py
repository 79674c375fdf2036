from __future__ import annotations
from typing import Optional, Sequence

from ..core.types import Color, Proper


def find_color(*candidates: Optional[Sequence[Proper]]) -> Optional[Color]:
    """Color of the first entry of the first non-empty candidate list.

    Candidates are taken strictly in the order given; ``None`` counts as an
    empty list. Callers drop the festivals list on Sundays themselves.
    """
    for propers in candidates:
        if propers:
            return propers[0].color
    return None
