"""Word inflection utilities.

This module provides rule tables and inflectors for turning English nouns
into their plural or singular forms.
"""

from .inflectors import __all__
from .inflectors import *
