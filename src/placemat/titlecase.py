"""English title-casing for headlines and titles.

This module capitalizes a phrase following the usual headline conventions:
the first and last words are always capitalized, short function words
("small words", see `placemat.patterns.SMALL_WORDS`) stay in lower case,
and everything else gets a leading capital. Words that already carry
deliberate capitalization (iPhone, AT&T, SEC's), URLs, email addresses,
file names and file paths are left exactly as written.

The heuristic is the one popularised by John Gruber's Title Case script.
It is a heuristic: acronym detection in particular only looks at the
shape of each word.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'title_case',
    'capitalize_words',
    'capitalize_small_words',
    'lower_case_capitals',
    'upper_case_first'
]

import re
from typing import FrozenSet, Iterable, Optional
from placemat.patterns import (
    INNER_PUNCTUATION,
    SUBPHRASE_START_PATTERN,
    SUBPHRASE_END_PATTERN,
    HYPHEN_PREFIX_PATTERN,
    HYPHEN_SUFFIX_PATTERN,
    ignored_words_pattern,
    title_words_pattern
)

def upper_case_first(word: str) -> str:
    """
    Upper-case the first character of a string and leave the rest alone.

    Example:
        >>> upper_case_first('hellö world')
        'Hellö world'
    """
    return word[:1].upper() + word[1:]

def _is_word_character(char: str) -> bool:
    # Same definition as \b uses for str patterns
    return char.isalnum() or char == '_'

def _lowercase_prefix(word: str) -> int:
    """
    Length of the longest prefix of `word` that can be capitalized as a plain word.

    The prefix must have no capital after its first letter and must end on a
    word boundary. Returns 0 when the word has internal capitals and should
    pass through unchanged.
    """
    run = 1
    while run < len(word) and (word[run].islower() or word[run] in INNER_PUNCTUATION):
        run += 1
    for end in range(run, 0, -1):
        if end == len(word) or _is_word_character(word[end - 1]) != _is_word_character(word[end]):
            return end
    return 0

def _normalize_ignore(ignore: Optional[Iterable[str]]) -> FrozenSet[str]:
    if ignore is None:
        return frozenset()
    if isinstance(ignore, str):
        ignore = [ignore]
    return frozenset(word for word in ignore if word)

def lower_case_capitals(text: str, ignore: FrozenSet[str] = frozenset()) -> str:
    """
    Lower-case text written entirely in capitals, leaving ignored words as they are.

    Text with at least one lower-case letter is returned unchanged, so mixed
    case (and the acronyms in it) survives.

    Example:
        >>> lower_case_capitals('IF IT’S ALL CAPS, FIX IT')
        'if it’s all caps, fix it'
        >>> lower_case_capitals('WATCH DVDS', frozenset(['DVDS']))
        'watch DVDS'
        >>> lower_case_capitals('Mixed CASE')
        'Mixed CASE'
    """
    if any(char.islower() for char in text):
        return text
    if not ignore:
        return text.lower()
    pieces = ignored_words_pattern(ignore).split(text)
    # split() puts the captured (ignored) words at odd indices
    return ''.join(
        piece if index % 2 else piece.lower()
        for index, piece in enumerate(pieces)
    )

def capitalize_words(text: str, ignore: FrozenSet[str] = frozenset()) -> str:
    """
    Capitalize every word except small words, which are lower-cased.

    Ignored words, URLs, email addresses, file names, file paths and words
    with internal capitals pass through unchanged. Leading and trailing
    underscores around a word are preserved.

    Args:
        text: Phrase to capitalize
        ignore: Words to leave untouched

    Returns:
        Phrase with the main capitalization applied but without the small
        word exceptions of `capitalize_small_words`

    Example:
        >>> capitalize_words('the sec’s apple probe')
        'the Sec’s Apple Probe'
        >>> capitalize_words('email someone@gmail.com about iPhone')
        'Email someone@gmail.com About iPhone'
        >>> capitalize_words('your hair[cut] looks (nice)')
        'Your Hair[cut] Looks (Nice)'
    """
    pattern = title_words_pattern(ignore)
    pieces = []
    position = 0
    match = pattern.search(text)
    while match:
        ignored, leading, address, small, word, trailing = match.groups()
        pieces.append(text[position:match.start()])
        position = match.end()
        if ignored or address:
            pieces.append(match.group())
        elif small:
            pieces.append(leading + small.lower() + trailing)
        else:
            end = _lowercase_prefix(word)
            if end == len(word):
                pieces.append(leading + upper_case_first(word) + trailing)
            elif end:
                # Capitalize up to the boundary and rescan the rest of the word
                pieces.append(leading + upper_case_first(word[:end]))
                position = match.start(5) + end
            else:
                pieces.append(match.group())
        match = pattern.search(text, position)
    pieces.append(text[position:])
    return ''.join(pieces)

def capitalize_small_words(text: str, ignore: FrozenSet[str] = frozenset()) -> str:
    """
    Capitalize small words in the positions where headline style demands it.

    Operations performed:
        1. Small words at the start of the title, after sentence punctuation
            (': ', '. ', '? '...) or after an opening quote or bracket
        2. Small words at the end of the title or before a closing quote
        3. Small words opening a hyphenated compound ('in-flight')
        4. Small words closing a two-part hyphenated compound ('stand-in')

    Ignored words are never changed.

    Example:
        >>> capitalize_small_words('a Trick: the Sequel to Be Afraid of')
        'A Trick: The Sequel to Be Afraid Of'
        >>> capitalize_small_words('in-Flight Stand-in')
        'In-Flight Stand-In'
    """
    passes = [
        (SUBPHRASE_START_PATTERN, lambda m: m.group(1) + upper_case_first(m.group(2))),
        (SUBPHRASE_END_PATTERN, lambda m: upper_case_first(m.group(1))),
        (HYPHEN_PREFIX_PATTERN, lambda m: upper_case_first(m.group(1))),
        (HYPHEN_SUFFIX_PATTERN, lambda m: m.group(1) + upper_case_first(m.group(2)))
    ]
    for pattern, replace in passes:
        text = pattern.sub(_keep_ignored(text, ignore, replace), text)
    return text

def _keep_ignored(text: str, ignore: FrozenSet[str], replace):
    # Small words inside an ignored word ('to' in 'to-do') keep their case
    spans = []
    if ignore:
        spans = [match.span(1) for match in ignored_words_pattern(ignore).finditer(text)]

    def replacement(match: re.Match) -> str:
        start, end = match.span(match.lastindex)
        if any(first <= start and end <= last for first, last in spans):
            return match.group()
        return replace(match)
    return replacement

def title_case(text: str, ignore: Optional[Iterable[str]] = None) -> str:
    """
    Convert a phrase to English title case.

    Operations performed:
        1. Trim leading and trailing whitespace
        2. Lower-case the phrase if it is written entirely in capitals
        3. Capitalize words, lower-case small words, pass through words
            with internal capitals, URLs, emails and paths
        4. Re-capitalize small words at phrase boundaries and in hyphenated
            compounds

    Args:
        text: Phrase to convert
        ignore: Words (matched case-insensitively) that keep their exact
            input form regardless of position

    Returns:
        Title-cased phrase, with internal whitespace preserved

    Example:
        >>> title_case('testing the method')
        'Testing the Method'
        >>> title_case('What is AT&T\\'s problem?')
        "What Is AT&T's Problem?"
        >>> title_case('this vs. that')
        'This vs. That'
        >>> title_case('i like to watch DVDs at home', ['watch'])
        'I Like to watch DVDs at Home'
    """
    ignore = _normalize_ignore(ignore)
    text = lower_case_capitals(text.strip(), ignore)
    text = capitalize_words(text, ignore)
    return capitalize_small_words(text, ignore)
