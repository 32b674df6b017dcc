"""
Chainable, Unicode-safe text editing with English title-casing and
rule-based noun inflection.

    >>> from placemat import Editor
    >>> Editor.create('what is AT&T\\'s problem?').title_case().text
    "What Is AT&T's Problem?"

See individual module documentation for detailed information.
"""
from . import editor
from . import entities
from . import inflectors
from . import patterns
from . import titlecase
from .editor import Editor
from .entities import EditorError, InvalidTextError, InvalidRuleError, RuleFileError
from .inflectors import Inflector, RuleTable, pluralize, singularize
from .titlecase import title_case

__all__ = [
    'editor',
    'entities',
    'inflectors',
    'patterns',
    'titlecase',
    'Editor',
    'Inflector',
    'RuleTable',
    'pluralize',
    'singularize',
    'title_case',
    'EditorError',
    'InvalidTextError',
    'InvalidRuleError',
    'RuleFileError'
]
