"""Rule-based pluralization and singularization of English nouns.

A `RuleTable` holds four tables: ordered plural rules, ordered singular
rules, irregular singular/plural pairs and uncountable words, plus one
cache per direction. An `Inflector` applies a table to a single word.

Tables are ordinary objects owned by the caller. Share one table between
inflectors to share its caches and custom rules; build separate tables to
keep them apart.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'RuleTable',
    'Inflector',
    # Functions
    'pluralize',
    'singularize'
]

import logging
import threading
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union
from placemat.entities import Inflection, InvalidRuleError, Rule
from placemat.lookups import RuleData, english_data

logger = logging.getLogger(__name__)

RuleSpec = Union[Mapping[str, str], Iterable[Tuple[str, str]]]

def _build_rules(rules: RuleSpec) -> Tuple[Rule, ...]:
    if isinstance(rules, Mapping):
        rules = rules.items()
    return tuple(map(Rule.from_pair, rules))

def _check_words(words: Iterable[str]) -> Tuple[str, ...]:
    words = tuple(words)
    for word in words:
        if not isinstance(word, str) or not word:
            raise InvalidRuleError(f'Expected a non-empty word, got {word!r}')
    return tuple(word.lower() for word in words)

class RuleTable:
    """
    Ordered inflection rules, irregular pairs, uncountable words and caches.

    Lookup order for a word (see `RuleTable.inflect`):
        1. Cached result for the direction
        2. Uncountable words are returned unchanged
        3. Irregular pairs (inverted when singularizing)
        4. The first rule whose pattern matches, in registration order
        5. Otherwise the word is returned unchanged

    Only results of step 4 are cached. Caches are never invalidated by rule
    registration; call `RuleTable.clear_caches` after changing rules that
    may already have been used.

    All registration and lookup is guarded by a re-entrant lock, so a table
    may be shared between threads.

    Args:
        plural: Ordered plural rules, as a mapping or `(pattern, replacement)` pairs
        singular: Ordered singular rules, in the same form
        irregular: Singular to plural mapping
        uncountable: Words that never inflect

    Raises:
        InvalidRuleError: If a rule pattern or replacement is invalid

    Example:
        >>> table = RuleTable(plural=[('$', 's')], irregular={'goose': 'geese'})
        >>> table.inflect('cat', Inflection.PLURAL)
        'cats'
        >>> table.inflect('geese', Inflection.SINGULAR)
        'goose'
    """

    def __init__(
        self,
        plural: RuleSpec = (),
        singular: RuleSpec = (),
        irregular: Optional[Mapping[str, str]] = None,
        uncountable: Iterable[str] = ()
    ):
        self._lock = threading.RLock()
        self._rules: Dict[Inflection, Tuple[Rule, ...]] = {
            Inflection.PLURAL: (),
            Inflection.SINGULAR: ()
        }
        self._irregular: Dict[str, str] = {}
        self._uncountable: frozenset = frozenset()
        self._caches: Dict[Inflection, Dict[str, str]] = {
            Inflection.PLURAL: {},
            Inflection.SINGULAR: {}
        }
        self.add_plural_rules(plural)
        self.add_singular_rules(singular)
        self.add_irregular_rules(irregular or {})
        self.add_uncountable_rules(uncountable)

    @classmethod
    def from_data(cls, data: RuleData) -> 'RuleTable':
        return cls(data.plural, data.singular, data.irregular, data.uncountable)

    @classmethod
    def from_yaml(cls, path) -> 'RuleTable':
        """
        Build a table from a rule file.

        The file is a mapping with the optional sections `plural` and
        `singular` (lists of `[pattern, replacement]`), `irregular`
        (singular: plural) and `uncountable` (list of words).
        """
        return cls.from_data(RuleData(path))

    @classmethod
    def english(cls) -> 'RuleTable':
        """A new table loaded with the bundled English rules."""
        return cls.from_data(english_data())

    def __repr__(self):
        return (
            f'{type(self).__name__}(plural={len(self._rules[Inflection.PLURAL])}, '
            f'singular={len(self._rules[Inflection.SINGULAR])}, '
            f'irregular={len(self._irregular)}, uncountable={len(self._uncountable)})'
        )

    # Registration
    def _add_rules(self, inflection: Inflection, rules: RuleSpec):
        built = _build_rules(rules)
        with self._lock:
            self._rules[inflection] = self._rules[inflection] + built
        if built:
            logger.debug('Registered %d %s rules', len(built), inflection.value)

    def add_plural_rules(self, rules: RuleSpec):
        """
        Append plural rules after the existing ones.

        Appended rules have lower priority than every rule already in the
        table. The whole batch is validated before any rule is added.

        Raises:
            InvalidRuleError: If any pattern or replacement is invalid
        """
        self._add_rules(Inflection.PLURAL, rules)

    def add_singular_rules(self, rules: RuleSpec):
        """Append singular rules after the existing ones. See `RuleTable.add_plural_rules`."""
        self._add_rules(Inflection.SINGULAR, rules)

    def add_irregular_rules(self, rules: Mapping[str, str]):
        """Add singular to plural pairs, replacing any existing pair for the same singular."""
        if not isinstance(rules, Mapping):
            raise InvalidRuleError(f'Irregular rules must be a mapping, got {type(rules).__name__}')
        singulars = _check_words(rules.keys())
        plurals = _check_words(rules.values())
        with self._lock:
            self._irregular.update(zip(singulars, plurals))
        if singulars:
            logger.debug('Registered %d irregular rules', len(singulars))

    def add_uncountable_rules(self, words: Iterable[str]):
        """Add words that are never inflected."""
        if isinstance(words, str):
            words = [words]
        words = _check_words(words)
        with self._lock:
            self._uncountable = self._uncountable.union(words)
        if words:
            logger.debug('Registered %d uncountable words', len(words))

    def clear_caches(self):
        with self._lock:
            for cache in self._caches.values():
                cache.clear()

    # Inspection
    @property
    def plural_rules(self) -> Tuple[Rule, ...]:
        return self._rules[Inflection.PLURAL]

    @property
    def singular_rules(self) -> Tuple[Rule, ...]:
        return self._rules[Inflection.SINGULAR]

    @property
    def irregular(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._irregular)

    @property
    def uncountable(self) -> frozenset:
        return self._uncountable

    def cached(self, inflection: Inflection) -> Dict[str, str]:
        """A copy of the cache for one direction."""
        with self._lock:
            return dict(self._caches[inflection])

    # Lookup
    def is_uncountable(self, word: str) -> bool:
        return word.lower() in self._uncountable

    def inflect(self, word: str, inflection: Inflection) -> str:
        """
        Inflect a single lowercased word.

        Args:
            word: Word to inflect; lowercased before lookup
            inflection: `Inflection.PLURAL` or `Inflection.SINGULAR`

        Returns:
            The inflected word, or the word itself when nothing applies
        """
        word = word.lower()
        with self._lock:
            cache = self._caches[inflection]
            if word in cache:
                logger.debug('%s cache hit for %r', inflection.value, word)
                return cache[word]

            if word in self._uncountable:
                return word

            if inflection is Inflection.PLURAL:
                irregular = self._irregular
            else:
                irregular = {plural: singular for singular, plural in self._irregular.items()}
            if word in irregular:
                return irregular[word]

            for rule in self._rules[inflection]:
                if rule.matches(word):
                    cache[word] = rule.apply(word)
                    return cache[word]

        return word

class Inflector:
    """
    Inflects one word with a `RuleTable`.

    Args:
        word: Word to inflect; lowercased on construction
        rules: Table to use. Defaults to a new table of the bundled English
            rules, built for this inflector alone: its rules are compiled again
            and its cache starts empty, so repeated calls only hit the cache
            when the same table is passed each time.

    Example:
        >>> Inflector('Goose').pluralize()
        'geese'
        >>> Inflector('sheep').pluralize()
        'sheep'
        >>> Inflector('cities').singularize()
        'city'
    """

    def __init__(self, word: str, rules: Optional[RuleTable] = None):
        self._word = word.lower()
        self.rules = rules if rules is not None else RuleTable.english()

    def __repr__(self):
        return f'{type(self).__name__}({self._word!r})'

    @property
    def word(self) -> str:
        return self._word

    def is_uncountable(self) -> bool:
        return self.rules.is_uncountable(self._word)

    def is_countable(self) -> bool:
        return not self.is_uncountable()

    def pluralize(self) -> str:
        return self.rules.inflect(self._word, Inflection.PLURAL)

    def singularize(self) -> str:
        return self.rules.inflect(self._word, Inflection.SINGULAR)

def pluralize(word: str, rules: Optional[RuleTable] = None) -> str:
    """
    Plural form of a word.

    Without `rules`, a new English table is built for every call and no
    result is cached between calls. Pass a shared `RuleTable` when
    inflecting many words.

    Example:
        >>> pluralize('box')
        'boxes'
    """
    return Inflector(word, rules).pluralize()

def singularize(word: str, rules: Optional[RuleTable] = None) -> str:
    """
    Singular form of a word. See `pluralize` for the `rules` default.

    Example:
        >>> singularize('people')
        'person'
    """
    return Inflector(word, rules).singularize()
