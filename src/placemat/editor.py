"""Chainable, character-indexed text editing.

`Editor` owns a single piece of text and exposes editing operations that
modify it in place and return the editor, so operations can be chained:

    >>> Editor.create('  hellö world ').trim().upper_case_first().text
    'Hellö world'

Every position and length is counted in characters (Unicode code points),
never in encoded bytes, so a multi-byte character is never split. Indices
that fall outside the text never raise: they produce clamped or empty
results instead.
"""

__docformat__ = 'google'

__all__ = [
    'Editor'
]

from typing import Iterable, List, Optional, Union
from unidecode import unidecode
from placemat.entities import InvalidTextError
from placemat.inflectors import Inflector, RuleTable
from placemat.patterns import (
    ELLIPSIS,
    SLUG_SEPARATOR,
    WORD_START_PATTERN,
    CASE_SEPARATOR_PATTERN,
    NON_ALNUM_PATTERN,
    glob_pattern,
    limit_words_pattern,
    separator_edges_pattern
)
from placemat.titlecase import title_case, upper_case_first

def _split_humps(word: str) -> List[str]:
    # 'helloWorld' -> ['hello', 'World']
    parts = []
    start = 0
    for index in range(1, len(word)):
        previous = word[index - 1]
        if word[index].isupper() and (previous.islower() or previous.isdigit()):
            parts.append(word[start:index])
            start = index
    parts.append(word[start:])
    return parts

class Editor:
    """
    A mutable text buffer with chainable, character-indexed operations.

    Args:
        text: Text to edit. `bytes` are decoded with `encoding`.
        encoding: Encoding used to decode `bytes` input

    Raises:
        InvalidTextError: If bytes cannot be decoded, or the text contains
            code points that cannot be encoded (e.g. lone surrogates)
        TypeError: If `text` is not text

    Example:
        >>> Editor.create('hellö world').slice(1, 9).text
        'ellö worl'
        >>> Editor.create('hellö world').chunk(2)
        ['he', 'll', 'ö ', 'wo', 'rl', 'd']
    """

    def __init__(self, text: Union[str, bytes, 'Editor'] = '', encoding: str = 'utf-8'):
        self._text = self._decode(text, encoding)

    @classmethod
    def create(cls, text: Union[str, bytes, 'Editor'] = '', encoding: str = 'utf-8') -> 'Editor':
        return cls(text, encoding)

    @staticmethod
    def _decode(text, encoding: str) -> str:
        if isinstance(text, Editor):
            return text.text
        if isinstance(text, (bytes, bytearray)):
            try:
                return bytes(text).decode(encoding)
            except (UnicodeDecodeError, LookupError) as e:
                raise InvalidTextError(f'Text could not be decoded as {encoding}: {e}') from e
        if not isinstance(text, str):
            raise TypeError(f'Expected str or bytes, got {type(text).__name__}')
        try:
            text.encode('utf-8')
        except UnicodeEncodeError as e:
            raise InvalidTextError(f'Text contains invalid code points: {e}') from e
        return text

    # Queries
    @property
    def text(self) -> str:
        """The current text."""
        return self._text

    def __str__(self):
        return self._text

    def __repr__(self):
        return f'{type(self).__name__}({self._text!r})'

    def __len__(self):
        return len(self._text)

    def __eq__(self, other):
        if isinstance(other, Editor):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None

    def copy(self) -> 'Editor':
        """A new editor holding the same text, for branching a chain."""
        return type(self)(self._text)

    def length(self) -> int:
        """Number of characters in the text."""
        return len(self._text)

    def is_empty(self) -> bool:
        return not self._text

    def contains(self, needle: str, case_sensitive: bool = True) -> bool:
        if case_sensitive:
            return needle in self._text
        return needle.casefold() in self._text.casefold()

    def starts_with(self, prefix: str) -> bool:
        return self._text.startswith(prefix)

    def ends_with(self, suffix: str) -> bool:
        return self._text.endswith(suffix)

    def matches(self, pattern: str) -> bool:
        """
        Check if the whole text matches a glob in which `*` matches anything.

        Example:
            >>> Editor('hellö world').matches('*ö world')
            True
            >>> Editor('hellö world').matches('*o world')
            False
        """
        return glob_pattern(pattern).fullmatch(self._text) is not None

    def chunk(self, size: int) -> List[str]:
        """
        Split the text into pieces of `size` characters; the last may be shorter.

        Returns an empty list for empty text or a size below 1.
        """
        if size < 1:
            return []
        return [self._text[i:i + size] for i in range(0, len(self._text), size)]

    def split_words(self) -> List[str]:
        """Whitespace-delimited words, with punctuation left attached."""
        return self._text.split()

    def case_words(self) -> List[str]:
        """
        Words as seen by the camel, studly, snake and kebab conversions.

        Words are separated by whitespace, hyphens, underscores and by a
        capital letter following a lower-case letter or digit.

        Example:
            >>> Editor('hellö_world-fooBar').case_words()
            ['hellö', 'world', 'foo', 'Bar']
        """
        words = []
        for part in CASE_SEPARATOR_PATTERN.split(self._text):
            words.extend(_split_humps(part))
        return [word for word in words if word]

    # Slicing
    def _position(self, index: int) -> int:
        size = len(self._text)
        if index < 0:
            return max(size + index, 0)
        return min(index, size)

    def _span(self, start: int, length: Optional[int]):
        begin = self._position(start)
        if length is None:
            end = len(self._text)
        elif length < 0:
            end = max(len(self._text) + length, begin)
        else:
            end = min(begin + length, len(self._text))
        return begin, end

    def slice(self, start: int, length: Optional[int] = None) -> 'Editor':
        """
        Keep `length` characters starting at `start`.

        Args:
            start: First character to keep; negative values count from the end
            length: Number of characters to keep. `None` keeps the rest of the
                text; a negative value leaves that many characters off the end.

        Out of range or inverted spans leave the text empty.
        """
        begin, end = self._span(start, length)
        self._text = self._text[begin:end] if end > begin else ''
        return self

    def replace_sub(self, replacement: str, start: int, length: Optional[int] = None) -> 'Editor':
        """
        Replace `length` characters starting at `start` with `replacement`.

        The replacement may be longer or shorter than the span it replaces.
        Spans are interpreted as in `Editor.slice`.

        Example:
            >>> Editor('hellö world').replace_sub('💩', 0, 2).text
            '💩llö world'
        """
        begin, end = self._span(start, length)
        end = max(end, begin)
        self._text = self._text[:begin] + replacement + self._text[end:]
        return self

    def after(self, needle: str) -> 'Editor':
        """Keep the text after the first `needle`; unchanged if `needle` is absent."""
        index = self._text.find(needle) if needle else -1
        if index >= 0:
            self._text = self._text[index + len(needle):]
        return self

    def before(self, needle: str) -> 'Editor':
        """Keep the text before the first `needle`; unchanged if `needle` is absent."""
        index = self._text.find(needle) if needle else -1
        if index >= 0:
            self._text = self._text[:index]
        return self

    def start_with(self, prefix: str) -> 'Editor':
        """Prepend `prefix` unless the text already starts with it."""
        if not self._text.startswith(prefix):
            self._text = prefix + self._text
        return self

    def finish_with(self, suffix: str) -> 'Editor':
        """Append `suffix` unless the text already ends with it."""
        if not self._text.endswith(suffix):
            self._text = self._text + suffix
        return self

    # Replacing
    def replace(self, search: str, replacement: str) -> 'Editor':
        if search:
            self._text = self._text.replace(search, replacement)
        return self

    def replace_first(self, search: str, replacement: str) -> 'Editor':
        if search:
            self._text = self._text.replace(search, replacement, 1)
        return self

    def replace_last(self, search: str, replacement: str) -> 'Editor':
        index = self._text.rfind(search) if search else -1
        if index >= 0:
            self._text = self._text[:index] + replacement + self._text[index + len(search):]
        return self

    def remove(self, search: str) -> 'Editor':
        return self.replace(search, '')

    def remove_first(self, search: str) -> 'Editor':
        return self.replace_first(search, '')

    def remove_last(self, search: str) -> 'Editor':
        return self.replace_last(search, '')

    # Trimming and truncation
    def trim(self, characters: Optional[str] = None) -> 'Editor':
        """Strip leading and trailing whitespace, or the given characters."""
        self._text = self._text.strip(characters)
        return self

    def limit_characters(self, limit: int, end: str = ELLIPSIS) -> 'Editor':
        """
        Truncate to at most `limit` characters, `end` marker included.

        The marker is only added when the text was actually truncated. A
        marker longer than `limit` is itself cut to `limit` characters.

        Example:
            >>> Editor('hellö world').limit_characters(6).text
            'hellö…'
            >>> Editor('ab').limit_characters(1, end='...').text
            '.'
        """
        if len(self._text) <= limit:
            return self
        limit = max(limit, 0)
        keep = max(limit - len(end), 0)
        self._text = (self._text[:keep].rstrip() + end)[:limit]
        return self

    def limit_words(self, words: int, end: str = ELLIPSIS) -> 'Editor':
        """
        Truncate to the first `words` words, adding `end` when words were dropped.

        Example:
            >>> Editor('hellö world').limit_words(1).text
            'hellö…'
        """
        if not self._text.strip():
            return self
        if words < 1:
            self._text = end
            return self
        kept = limit_words_pattern(words).match(self._text).group()
        if len(kept) < len(self._text):
            self._text = kept.rstrip() + end
        return self

    # Case
    def lower_case(self) -> 'Editor':
        self._text = self._text.lower()
        return self

    def lower_case_first(self) -> 'Editor':
        self._text = self._text[:1].lower() + self._text[1:]
        return self

    def lower_case_words(self) -> 'Editor':
        """Lower-case the first character of every word."""
        self._text = WORD_START_PATTERN.sub(lambda m: m.group(1).lower(), self._text)
        return self

    def upper_case(self) -> 'Editor':
        self._text = self._text.upper()
        return self

    def upper_case_first(self) -> 'Editor':
        self._text = upper_case_first(self._text)
        return self

    def upper_case_words(self) -> 'Editor':
        """Upper-case the first character of every word."""
        self._text = WORD_START_PATTERN.sub(lambda m: m.group(1).upper(), self._text)
        return self

    def title_case(self, ignore: Optional[Iterable[str]] = None) -> 'Editor':
        """
        Convert to English title case. See `placemat.titlecase.title_case`.

        Args:
            ignore: Words that keep their exact input form
        """
        self._text = title_case(self._text, ignore)
        return self

    def camel_case(self) -> 'Editor':
        words = self.case_words()
        self._text = ''.join(
            word.lower() if index == 0 else upper_case_first(word)
            for index, word in enumerate(words)
        )
        return self

    def studly_case(self) -> 'Editor':
        self._text = ''.join(map(upper_case_first, self.case_words()))
        return self

    def snake_case(self) -> 'Editor':
        self._text = '_'.join(word.lower() for word in self.case_words())
        return self

    def kebab_case(self) -> 'Editor':
        self._text = '-'.join(word.lower() for word in self.case_words())
        return self

    # Transliteration
    def ascii(self) -> 'Editor':
        """Transliterate to ASCII, e.g. 'hellö' becomes 'hello'."""
        self._text = unidecode(self._text)
        return self

    def slug(self, separator: str = SLUG_SEPARATOR) -> 'Editor':
        """
        Convert to a URL slug.

        Operations performed:
            1. Transliterate to ASCII and lower-case
            2. Replace each run of other characters with `separator`
            3. Strip separators from both ends

        Example:
            >>> Editor('hellö world').slug().text
            'hello-world'
        """
        slug = NON_ALNUM_PATTERN.sub(lambda _: separator, unidecode(self._text).lower())
        if separator:
            slug = separator_edges_pattern(separator).sub('', slug)
        self._text = slug
        return self

    # Inflection
    def pluralize(self, rules: Optional[RuleTable] = None) -> 'Editor':
        """
        Replace the text with its plural form.

        Args:
            rules: Rule table to use. Defaults to a new table of the bundled
                English rules for this call only, so nothing is cached between
                calls unless a table is passed.
        """
        self._text = Inflector(self._text, rules).pluralize()
        return self

    def singularize(self, rules: Optional[RuleTable] = None) -> 'Editor':
        """Replace the text with its singular form. See `Editor.pluralize`."""
        self._text = Inflector(self._text, rules).singularize()
        return self
