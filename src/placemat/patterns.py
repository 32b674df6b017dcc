"""Regex patterns and constants for editing and title-casing text.

All patterns operate on `str` and are Unicode-aware: letters are matched
with `[^\\W\\d_]` rather than `[A-Za-z]`, so accented and non-Latin words
are treated like any other word.
"""

__docformat__ = 'google'

import re
from functools import cache
from typing import FrozenSet, Iterable, List

# Base character sets for patterns
ALPHA = "[^\\W\\d_]"
"""@private"""

INNER_PUNCTUATION: str = "'’()[]{}"
"""Punctuation that may appear inside a word without splitting it (e.g. 'Vapo(u)rware')."""

## Editor
# Constants
ELLIPSIS: str = '…'
"""Marker appended by `placemat.editor.Editor.limit_characters` and
`placemat.editor.Editor.limit_words` when text is actually truncated."""

SLUG_SEPARATOR: str = '-'
"""Default separator used by `placemat.editor.Editor.slug`."""

# Patterns
WORD_START_PATTERN: re.Pattern = re.compile(r'(?:^|(?<=\s))(\S)')
"""Compiled regex matching the first character of every whitespace-delimited word.

Capture groups:
    * first character

Used in `placemat.editor.Editor.lower_case_words` and `placemat.editor.Editor.upper_case_words`."""

CASE_SEPARATOR_PATTERN: re.Pattern = re.compile(r'[\s\-_]+')
"""Compiled regex matching the separators recognised between words when
converting between camel, studly, snake and kebab case.

Used in `placemat.editor.Editor.case_words`."""

NON_ALNUM_PATTERN: re.Pattern = re.compile(r'[^a-z0-9]+')
"""Compiled regex matching runs of characters that cannot appear in a slug.

Applied after transliteration and lowercasing, so ASCII classes suffice.

Used in `placemat.editor.Editor.slug`."""

# Factory functions
@cache
def glob_pattern(pattern: str) -> re.Pattern:
    """
    Compile a glob in which `*` matches any sequence of characters, including none.

    Every other character is literal. The result must match the whole text.

    Example:
        >>> glob_pattern('*ö world').fullmatch('hellö world') is not None
        True
    """
    parts = map(re.escape, pattern.split('*'))
    return re.compile('.*'.join(parts), re.S)

@cache
def separator_edges_pattern(separator: str) -> re.Pattern:
    """
    Compile a pattern matching runs of `separator` at either end of the text.

    Used in `placemat.editor.Editor.slug`.

    Example:
        >>> separator_edges_pattern('--').sub('', '----a--b--')
        'a--b'
    """
    run = f'(?:{re.escape(separator)})+'
    return re.compile(f'\\A{run}|{run}\\Z')

@cache
def limit_words_pattern(words: int) -> re.Pattern:
    """Compile a pattern matching the first `words` whitespace-delimited words."""
    return re.compile(f'\\A\\s*(?:\\S+\\s*){{1,{words}}}')


## Title case
# Constants
SMALL_WORDS: List[str] = [
    '(?<!q&)a',
    'an',
    'and',
    'as',
    'at(?!&t)',
    'but',
    'by',
    'en',
    'for',
    'if',
    'in',
    'nor',
    'of',
    'on',
    'or',
    'per',
    'the',
    'to',
    'v[.]?',
    'via',
    'vs[.]?',
    'with'
]
"""Words kept in lower case by `placemat.titlecase.title_case`, as regex alternatives.

Articles, short conjunctions and prepositions, and the comparative
abbreviations v, v., vs and vs.

Two entries carry guards so that ampersand acronyms survive:
    * 'a' is not small in 'Q&A'
    * 'at' is not small in 'AT&T'

Small words are still capitalised at the start or end of the title,
after a colon or other sentence punctuation, inside an opening quote
or bracket, and next to a hyphen in compound words."""

# Building blocks
SMALL_WORD: str = f"(?:{'|'.join(SMALL_WORDS)})"
""" Uncompiled regex building block matching any small word."""

APOSTROPHE: str = f"(?:['’]{ALPHA}*)?"
""" Uncompiled regex building block matching an optional possessive or
contraction tail (e.g. 's, ’ll)."""

FILE_PATH: str = f"(?<=[ ][/\\\\]){ALPHA}+(?:[-_/\\\\]|{ALPHA})+"
""" Uncompiled regex building block matching a path segment after ' /', e.g. '/var/run'."""

URL: str = f"(?:[-_]|{ALPHA})+[@.:](?:[-_@.:/]|{ALPHA})+{APOSTROPHE}"
""" Uncompiled regex building block matching a URL, domain, file name or email address."""

WORD: str = f"{ALPHA}(?:{ALPHA}|[{re.escape(INNER_PUNCTUATION)}])*{APOSTROPHE}"
""" Uncompiled regex building block matching a word, including brackets and
apostrophes inside it (e.g. 'Vapo(u)rware', 'hair[cut')."""

NEVER: str = '(?!)'
"""@private"""

# Patterns
SUBPHRASE_START_PATTERN: re.Pattern = re.compile(
    f"""
    (  \\A [^\\w\\s]*              # start of title...
    |  [:.;?!][ ]+                 # or of subsentence...
    |  [ ]['"“‘(\\[][ ]* )         # or of inserted subphrase...
    ( {SMALL_WORD} ) \\b           # ...followed by small word
    """,
    re.I | re.X
)
"""Compiled regex matching a small word that opens the title, a subsentence or a quoted subphrase.

Capture groups:
    * opening context
    * small word

Used in `placemat.titlecase.capitalize_small_words`."""

SUBPHRASE_END_PATTERN: re.Pattern = re.compile(
    f"""
    \\b ( {SMALL_WORD} )           # small word...
    (?= [^\\w\\s]* \\Z             # ...at the end of the title...
    |   ['"’”)\\]][ ] )            # ...or of an inserted subphrase
    """,
    re.I | re.X
)
"""Compiled regex matching a small word that closes the title or a quoted subphrase.

Capture groups:
    * small word

Used in `placemat.titlecase.capitalize_small_words`."""

HYPHEN_PREFIX_PATTERN: re.Pattern = re.compile(
    f"""
    \\b (?<!-)                     # not itself after a hyphen (man-in-the-middle)
    ( {SMALL_WORD} )
    (?= -{ALPHA} )                 # ...followed by -word (in-flight)
    """,
    re.I | re.X
)
"""Compiled regex matching a small word that opens a hyphenated compound.

Capture groups:
    * small word

Used in `placemat.titlecase.capitalize_small_words`."""

HYPHEN_SUFFIX_PATTERN: re.Pattern = re.compile(
    f"""
    \\b ( {ALPHA}+- )              # first word and hyphen, already capped
    ( {SMALL_WORD} )               # ...followed by small word
    (?! - )                        # that does not continue the compound (stand-in)
    """,
    re.I | re.X
)
"""Compiled regex matching a small word that closes a two-part hyphenated compound.

Capture groups:
    * leading word and hyphen
    * small word

Used in `placemat.titlecase.capitalize_small_words`."""

# Factory functions
def ignored_word(ignore: Iterable[str]) -> str:
    """
    Uncompiled regex building block matching any word a caller asked to leave untouched.

    Ignored words may start or end with punctuation ('c++', 'c#', 'cafe.'),
    so they are delimited by the absence of adjacent word characters rather
    than by `\\b`.

    Capture groups:
        * ignored word, with any possessive or contraction tail
    """
    words = sorted(filter(None, set(ignore)), key=len, reverse=True)
    if not words:
        return f'({NEVER})'
    alternatives = '|'.join(map(re.escape, words))
    return f'(?<!\\w)((?i:{alternatives}){APOSTROPHE})(?!\\w)'

@cache
def ignored_words_pattern(ignore: FrozenSet[str] = frozenset()) -> re.Pattern:
    """
    Compile `ignored_word` on its own.

    Used in `placemat.titlecase.lower_case_capitals` and
    `placemat.titlecase.capitalize_small_words`.
    """
    return re.compile(ignored_word(ignore))

@cache
def title_words_pattern(ignore: FrozenSet[str] = frozenset()) -> re.Pattern:
    """
    Compile the main title-case tokenizer.

    Args:
        ignore: Words to match before any other alternative

    Returns:
        Compiled pattern matching one word per match, with the kind of word
        recorded by which capture group participated

    Capture groups:
        * ignored word
        * leading underscores
        * file path, URL, domain or email
        * small word
        * any other word
        * trailing underscores

    Used in `placemat.titlecase.capitalize_words`.
    """
    return re.compile(
        f"""
        {ignored_word(ignore)}                              # ignored word, or
        | \\b (_*) (?:                                      # leading underscore and
            ( {FILE_PATH} | {URL} )                         # file path, URL, domain or email, or
            | ( (?i: {SMALL_WORD} ) {APOSTROPHE} )          # small word (case-insensitive), or
            | ( {WORD} )                                    # any other word
        ) (_*) \\b                                          # with trailing underscore
        """,
        re.X
    )
