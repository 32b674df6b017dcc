import threading
import unittest
from placemat import inflectors
from placemat.entities import Inflection, InvalidRuleError, Rule
from placemat.inflectors import Inflector, RuleTable

PLURALS = {
    'cat': 'cats',
    'box': 'boxes',
    'church': 'churches',
    'city': 'cities',
    'day': 'days',
    'knife': 'knives',
    'wolf': 'wolves',
    'analysis': 'analyses',
    'datum': 'data',
    'mouse': 'mice',
    'matrix': 'matrices',
    'index': 'indices',
    'bus': 'buses',
    'status': 'statuses',
    'octopus': 'octopi',
    'quiz': 'quizzes',
    'ox': 'oxen',
    'potato': 'potatoes',
    'photo': 'photos',
    'axis': 'axes',
    'goose': 'geese',
    'person': 'people',
    'child': 'children',
    'leaf': 'leaves',
}

SINGULARS = {
    'cats': 'cat',
    'boxes': 'box',
    'churches': 'church',
    'classes': 'class',
    'cities': 'city',
    'movies': 'movie',
    'knives': 'knife',
    'wolves': 'wolf',
    'objectives': 'objective',
    'analyses': 'analysis',
    'theses': 'thesis',
    'data': 'datum',
    'mice': 'mouse',
    'matrices': 'matrix',
    'vertices': 'vertex',
    'buses': 'bus',
    'status': 'status',
    'octopi': 'octopus',
    'quizzes': 'quiz',
    'oxen': 'ox',
    'heroes': 'hero',
    'shoes': 'shoe',
    'geese': 'goose',
    'people': 'person',
    'leaves': 'leaf',
    'class': 'class',
}

class TestEnglishRules(unittest.TestCase):
    def setUp(self):
        self.rules = RuleTable.english()

    def test_pluralize(self):
        for word, expected in PLURALS.items():
            with self.subTest(word=word):
                self.assertEqual(Inflector(word, self.rules).pluralize(), expected)

    def test_singularize(self):
        for word, expected in SINGULARS.items():
            with self.subTest(word=word):
                self.assertEqual(Inflector(word, self.rules).singularize(), expected)

    def test_uncountable(self):
        for word in ['sheep', 'fish', 'series', 'information', 'news']:
            with self.subTest(word=word):
                inflector = Inflector(word, self.rules)
                self.assertTrue(inflector.is_uncountable())
                self.assertFalse(inflector.is_countable())
                self.assertEqual(inflector.pluralize(), word)
                self.assertEqual(inflector.singularize(), word)

    def test_countable(self):
        self.assertTrue(Inflector('goose', self.rules).is_countable())

    def test_word_is_lowercased(self):
        inflector = Inflector('Goose', self.rules)
        self.assertEqual(inflector.word, 'goose')
        self.assertEqual(inflector.pluralize(), 'geese')
        self.assertTrue(Inflector('SHEEP', self.rules).is_uncountable())

    def test_default_rules(self):
        self.assertEqual(Inflector('goose').pluralize(), 'geese')
        self.assertEqual(inflectors.pluralize('sheep'), 'sheep')
        self.assertEqual(inflectors.singularize('people'), 'person')

    def test_default_table_is_per_inflector(self):
        first = Inflector('city')
        second = Inflector('city')
        self.assertIsNot(first.rules, second.rules)
        first.pluralize()
        self.assertEqual(first.rules.cached(Inflection.PLURAL), {'city': 'cities'})
        self.assertEqual(second.rules.cached(Inflection.PLURAL), {})

    def test_shared_table_reuses_cache(self):
        Inflector('city', self.rules).pluralize()
        inflector = Inflector('city', self.rules)
        self.assertEqual(inflector.rules.cached(Inflection.PLURAL), {'city': 'cities'})
        self.assertEqual(inflector.pluralize(), 'cities')

    def test_english_tables_are_independent(self):
        first = RuleTable.english()
        second = RuleTable.english()
        first.add_uncountable_rules(['cat'])
        self.assertEqual(Inflector('cat', first).pluralize(), 'cat')
        self.assertEqual(Inflector('cat', second).pluralize(), 'cats')

class TestCache(unittest.TestCase):
    def setUp(self):
        self.rules = RuleTable.english()

    def test_rule_results_are_cached(self):
        first = Inflector('city', self.rules).pluralize()
        self.assertEqual(self.rules.cached(Inflection.PLURAL), {'city': 'cities'})
        second = Inflector('city', self.rules).pluralize()
        self.assertEqual(first, second)

    def test_cache_hit_skips_rules(self):
        Inflector('city', self.rules).pluralize()
        self.rules._rules[Inflection.PLURAL] = ()
        self.assertEqual(Inflector('city', self.rules).pluralize(), 'cities')

    def test_irregular_and_uncountable_are_not_cached(self):
        Inflector('goose', self.rules).pluralize()
        Inflector('sheep', self.rules).pluralize()
        Inflector('geese', self.rules).singularize()
        self.assertEqual(self.rules.cached(Inflection.PLURAL), {})
        self.assertEqual(self.rules.cached(Inflection.SINGULAR), {})

    def test_caches_are_per_direction(self):
        Inflector('cats', self.rules).singularize()
        self.assertEqual(self.rules.cached(Inflection.SINGULAR), {'cats': 'cat'})
        self.assertEqual(self.rules.cached(Inflection.PLURAL), {})

    def test_unmatched_word_is_not_cached(self):
        table = RuleTable(plural=[('y$', 'ies')])
        self.assertEqual(Inflector('cat', table).pluralize(), 'cat')
        self.assertEqual(table.cached(Inflection.PLURAL), {})

    def test_cache_is_not_invalidated_by_new_rules(self):
        table = RuleTable(plural=[('$', 's')])
        self.assertEqual(Inflector('cat', table).pluralize(), 'cats')
        table.add_irregular_rules({'cat': 'kitties'})
        self.assertEqual(Inflector('cat', table).pluralize(), 'cats')
        table.clear_caches()
        self.assertEqual(Inflector('cat', table).pluralize(), 'kitties')

class TestCustomRules(unittest.TestCase):
    def test_rules_from_mapping(self):
        table = RuleTable(plural={'(ox)$': '\\1en', '$': 's'})
        self.assertEqual(Inflector('ox', table).pluralize(), 'oxen')
        self.assertEqual(Inflector('dog', table).pluralize(), 'dogs')

    def test_first_match_wins(self):
        table = RuleTable(plural=[('us$', 'i'), ('$', 's')])
        self.assertEqual(Inflector('cactus', table).pluralize(), 'cacti')

    def test_added_rules_have_lower_priority(self):
        table = RuleTable(plural=[('$', 's')])
        table.add_plural_rules([('us$', 'i')])
        self.assertEqual(Inflector('cactus', table).pluralize(), 'cactuss')
        self.assertEqual(len(table.plural_rules), 2)

    def test_front_loaded_rules(self):
        table = RuleTable(plural=[('^virus$', 'viruses')])
        table.add_plural_rules(RuleTable.english().plural_rules)
        self.assertEqual(Inflector('virus', table).pluralize(), 'viruses')
        self.assertEqual(Inflector('cactus', table).pluralize(), 'cacti')

    def test_add_singular_rules(self):
        table = RuleTable()
        table.add_singular_rules([('ies$', 'y')])
        self.assertEqual(Inflector('ponies', table).singularize(), 'pony')

    def test_irregular_rules(self):
        table = RuleTable()
        table.add_irregular_rules({'Cactus': 'Cacti'})
        self.assertEqual(table.irregular, {'cactus': 'cacti'})
        self.assertEqual(Inflector('cactus', table).pluralize(), 'cacti')
        self.assertEqual(Inflector('cacti', table).singularize(), 'cactus')

    def test_uncountable_rules(self):
        table = RuleTable(plural=[('$', 's')])
        table.add_uncountable_rules('Rice')
        self.assertIn('rice', table.uncountable)
        self.assertEqual(Inflector('rice', table).pluralize(), 'rice')

    def test_uncountable_wins_over_irregular(self):
        table = RuleTable(irregular={'fish': 'fishes'}, uncountable=['fish'])
        self.assertEqual(Inflector('fish', table).pluralize(), 'fish')

    def test_no_rules(self):
        table = RuleTable()
        self.assertEqual(Inflector('word', table).pluralize(), 'word')
        self.assertEqual(Inflector('words', table).singularize(), 'words')

class TestInvalidRules(unittest.TestCase):
    def test_bad_pattern(self):
        with self.assertRaises(InvalidRuleError):
            RuleTable(plural=[('(unclosed$', 's')])

    def test_bad_group_reference(self):
        with self.assertRaises(InvalidRuleError):
            RuleTable().add_plural_rules([('us$', '\\1i')])

    def test_bad_named_group_reference(self):
        with self.assertRaises(InvalidRuleError):
            Rule('(?P<stem>.+)us$', '\\g<root>i')

    def test_named_group_reference(self):
        rule = Rule('(?P<stem>.+)us$', '\\g<stem>i')
        self.assertEqual(rule.apply('cactus'), 'cacti')

    def test_malformed_pair(self):
        for pair in ['$s', ('$',), ('$', 's', 'x'), 42]:
            with self.subTest(pair=pair):
                with self.assertRaises(InvalidRuleError):
                    RuleTable(plural=[pair])

    def test_failed_registration_leaves_table_unchanged(self):
        table = RuleTable(plural=[('$', 's')])
        with self.assertRaises(InvalidRuleError):
            table.add_plural_rules([('y$', 'ies'), ('(', 's')])
        self.assertEqual(len(table.plural_rules), 1)

    def test_bad_irregular_rules(self):
        with self.assertRaises(InvalidRuleError):
            RuleTable().add_irregular_rules([('goose', 'geese')])
        with self.assertRaises(InvalidRuleError):
            RuleTable().add_irregular_rules({'goose': ''})

    def test_bad_uncountable_rules(self):
        with self.assertRaises(InvalidRuleError):
            RuleTable().add_uncountable_rules(['sheep', None])

class TestThreads(unittest.TestCase):
    def test_concurrent_registration_and_lookup(self):
        table = RuleTable.english()
        errors = []

        def work(index):
            try:
                table.add_uncountable_rules([f'word{index}'])
                for word in PLURALS:
                    Inflector(word, table).pluralize()
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=work, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(errors, [])
        self.assertTrue({f'word{i}' for i in range(8)} <= table.uncountable)
        self.assertEqual(Inflector('city', table).pluralize(), 'cities')
