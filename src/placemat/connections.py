from importlib import resources

class RuleDataSource:
    """Locates the inflection rule files bundled in `placemat.data`."""
    package = 'placemat.data'
    default_language = 'english'

    @classmethod
    def yaml_path(cls, language: str = None):
        """ Bundled rule file for a language """
        return resources.files(cls.package).joinpath(f'{language or cls.default_language}.yaml')
