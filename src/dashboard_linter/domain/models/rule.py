"""Rule entity — a compiled pattern paired with the warning it raises."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Rule:
    """A single line rule.

    The pattern is searched anywhere in a rendered line; a match produces
    ``message`` as a warning.
    """

    pattern: re.Pattern[str]
    message: str

    @classmethod
    def compile(cls, pattern: str, message: str) -> Rule:
        return cls(pattern=re.compile(pattern), message=message)

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None
