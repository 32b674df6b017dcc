"""Loading of inflection rule tables from YAML rule files.
"""

__docformat__ = 'google'

__all__ = [
    'RuleData',
    'english_data'
]

import logging
from functools import cache
from pathlib import Path
from typing import Dict, List, Tuple
import yaml
from placemat.connections import RuleDataSource
from placemat.entities import RuleFileError

logger = logging.getLogger(__name__)

class RuleData(RuleDataSource):
    """
    Raw contents of a rule file.

    Args:
        path: Rule file to read. Defaults to the bundled English rules.

    Attributes:
        plural: Ordered `(pattern, replacement)` pairs for pluralization
        singular: Ordered `(pattern, replacement)` pairs for singularization
        irregular: Singular to plural mapping
        uncountable: Words that never inflect

    Raises:
        RuleFileError: If the file is not a mapping or a section has the wrong type
    """
    plural: List[Tuple[str, str]]
    singular: List[Tuple[str, str]]
    irregular: Dict[str, str]
    uncountable: List[str]

    def __init__(self, path=None):
        if path is None:
            path = self.yaml_path()
        logger.debug('Loading inflection rules from %s', path)
        if isinstance(path, str):
            path = Path(path)
        with path.open('r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise RuleFileError(f'Could not parse rule file {path}: {e}') from e
        self._assign_sections(data or {}, path)

    def _assign_sections(self, data, path):
        if not isinstance(data, dict):
            raise RuleFileError(f'Rule file {path} must contain a mapping, got {type(data).__name__}')
        self.plural = [tuple(pair) for pair in self._section(data, 'plural', list, path)]
        self.singular = [tuple(pair) for pair in self._section(data, 'singular', list, path)]
        self.irregular = dict(self._section(data, 'irregular', dict, path))
        self.uncountable = list(self._section(data, 'uncountable', list, path))
        logger.debug(
            'Loaded %d plural, %d singular, %d irregular and %d uncountable rules from %s',
            len(self.plural), len(self.singular), len(self.irregular), len(self.uncountable), path
        )

    @staticmethod
    def _section(data, key, kind, path):
        section = data.get(key) or kind()
        if not isinstance(section, kind):
            raise RuleFileError(f'Section {key!r} of rule file {path} must be a {kind.__name__}')
        if kind is list and key != 'uncountable':
            for pair in section:
                if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                    raise RuleFileError(f'Section {key!r} of rule file {path} has a malformed rule: {pair!r}')
        return section

@cache
def english_data() -> RuleData:
    """The bundled English rules, read once per process."""
    return RuleData()
