"""Value types and errors shared by the editor and the inflectors.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'Inflection',
    'Rule',
    # Errors
    'EditorError',
    'InvalidTextError',
    'InvalidRuleError',
    'RuleFileError'
]

import re
from dataclasses import dataclass, field
from enum import Enum

class EditorError(ValueError):
    """Base class for all errors raised by `placemat`."""

class InvalidTextError(EditorError):
    """Raised when input text cannot be decoded or encoded as Unicode."""

class InvalidRuleError(EditorError):
    """Raised when an inflection rule is malformed or its pattern does not compile."""

class RuleFileError(EditorError):
    """Raised when a rule file does not have the expected layout."""

class Inflection(Enum):
    """
    Direction of an inflection, used to pick the rule list and cache in a
    `placemat.inflectors.RuleTable`.
    """
    PLURAL = "plural"
    SINGULAR = "singular"

@dataclass(frozen=True)
class Rule:
    """
    A single ordered inflection rule.

    Args:
        pattern: Uncompiled regex matched against the lowercased word
        replacement: `re.sub` template applied to the first match, e.g. `'\\1ies'`

    The pattern and the replacement template are both checked on
    construction, so a bad rule fails where it is declared rather than on
    first use.

    Example:
        >>> Rule('([^aeiouy]|qu)y$', '\\\\1ies').apply('city')
        'cities'
    """
    pattern: str
    replacement: str
    compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.pattern, str) or not isinstance(self.replacement, str):
            raise InvalidRuleError(
                f'Rule pattern and replacement must be strings: {self.pattern!r} => {self.replacement!r}'
            )
        try:
            compiled = re.compile(self.pattern)
        except re.error as e:
            raise InvalidRuleError(f'Invalid rule pattern {self.pattern!r}: {e}') from e
        object.__setattr__(self, 'compiled', compiled)
        self._check_replacement()

    def _check_replacement(self):
        # Expand the template against an empty match with the same groups
        names = {index: name for name, index in self.compiled.groupindex.items()}
        dummy = ''.join(
            f'(?P<{names[i]}>)' if i in names else '()'
            for i in range(1, self.compiled.groups + 1)
        )
        try:
            re.compile(dummy).sub(self.replacement, '', count=1)
        except (re.error, IndexError) as e:
            raise InvalidRuleError(
                f'Invalid replacement {self.replacement!r} for rule {self.pattern!r}: {e}'
            ) from e

    @classmethod
    def from_pair(cls, pair) -> 'Rule':
        """Build a rule from a `(pattern, replacement)` pair or an existing `Rule`."""
        if isinstance(pair, cls):
            return pair
        if isinstance(pair, str):
            raise InvalidRuleError(f'Expected a (pattern, replacement) pair, got {pair!r}')
        try:
            pattern, replacement = pair
        except (TypeError, ValueError) as e:
            raise InvalidRuleError(f'Expected a (pattern, replacement) pair, got {pair!r}') from e
        return cls(pattern, replacement)

    def matches(self, word: str) -> bool:
        return self.compiled.search(word) is not None

    def apply(self, word: str) -> str:
        return self.compiled.sub(self.replacement, word, count=1)
