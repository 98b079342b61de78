"""DiffConfig and MatchStrategy for semantic diff configuration.

DiffConfig is a frozen (immutable) dataclass holding the engine parameters.
MatchStrategy selects how array elements are paired: greedy sort-and-claim
(the default) or optimal assignment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

MATCH_THRESHOLD: float = 0.4
DEFAULT_INDENT: int = 3


class MatchStrategy(StrEnum):
    """How candidate element pairs are chosen from the similarity matrix.

    - GREEDY:  Sort candidates by similarity (ties in discovery order) and
               claim each pair whose endpoints are both still free.
    - OPTIMAL: Maximum total similarity via the Hungarian algorithm.  Can
               classify ambiguous inputs differently from GREEDY.
    """

    GREEDY = auto()
    OPTIMAL = auto()


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for the semantic diff engine.

    Attributes:
        match_threshold: Minimum object similarity for two array elements to
            be paired.  Pairs scoring exactly the threshold are matched.
        indent: Indentation width of the pretty-printed renderings that line
            numbers refer to.
        match_strategy: How array elements are paired.
    """

    match_threshold: float = MATCH_THRESHOLD
    indent: int = DEFAULT_INDENT
    match_strategy: MatchStrategy = MatchStrategy.GREEDY

    def __post_init__(self) -> None:
        if not 0.0 <= self.match_threshold <= 1.0:
            msg = f"match_threshold must be in [0, 1], got {self.match_threshold}"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
