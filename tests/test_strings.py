import unittest
from stringops import strings
from stringops.patterns import NOT_FOUND

class TestCaseFolding(unittest.TestCase):
    def test_to_lower(self):
        result = strings.to_lower('Hello Go World')
        self.assertEqual(result, 'hello go world')

    def test_to_upper(self):
        result = strings.to_upper('Hello Go World')
        self.assertEqual(result, 'HELLO GO WORLD')

    def test_non_ascii_passes_through(self):
        self.assertEqual(strings.to_upper('é'), 'é')
        self.assertEqual(strings.to_lower('ÉCOLE'), 'École')

    def test_idempotent(self):
        for text in ['', 'MiXeD 123', 'Ωmega Straße']:
            lowered = strings.to_lower(text)
            uppered = strings.to_upper(text)
            self.assertEqual(strings.to_lower(lowered), lowered)
            self.assertEqual(strings.to_upper(uppered), uppered)

class TestCapitalizeFirst(unittest.TestCase):
    def test_capitalize_first(self):
        result = strings.capitalize_first('hELLO')
        self.assertEqual(result, 'Hello')

    def test_empty(self):
        self.assertEqual(strings.capitalize_first(''), '')

    def test_single_character(self):
        self.assertEqual(strings.capitalize_first('g'), 'G')

    def test_non_ascii_first_character(self):
        self.assertEqual(strings.capitalize_first('éCOLE'), 'école')

class TestStrip(unittest.TestCase):
    def test_strip(self):
        result = strings.strip('  Hello Go World  ')
        self.assertEqual(result, 'Hello Go World')

    def test_empty_and_blank(self):
        self.assertEqual(strings.strip(''), '')
        self.assertEqual(strings.strip('   '), '')

    def test_unicode_whitespace(self):
        self.assertEqual(strings.strip('\t go\n'), 'go')

    def test_idempotent(self):
        once = strings.strip(' \t a b \n')
        self.assertEqual(strings.strip(once), once)

class TestReplace(unittest.TestCase):
    def test_replace(self):
        result = strings.replace('go go go', 'go', 'Golang')
        self.assertEqual(result, 'Golang Golang Golang')

    def test_replacement_is_not_rescanned(self):
        result = strings.replace('aaa', 'a', 'aa')
        self.assertEqual(result, 'aaaaaa')

    def test_non_overlapping(self):
        result = strings.replace('aaaa', 'aa', 'b')
        self.assertEqual(result, 'bb')

    def test_case_sensitive(self):
        result = strings.replace('  Hello Go World  ', 'go', 'Golang')
        self.assertEqual(result, '  Hello Go World  ')

    def test_empty_old_returns_input(self):
        result = strings.replace('abc', '', '-')
        self.assertEqual(result, 'abc')

    def test_old_longer_than_text(self):
        result = strings.replace('go', 'golang', 'x')
        self.assertEqual(result, 'go')

class TestSplitOn(unittest.TestCase):
    def test_split_on(self):
        result = strings.split_on('a,b,c', ',')
        self.assertEqual(result, ['a', 'b', 'c'])

    def test_interior_empty_segment_kept(self):
        result = strings.split_on('a,,b', ',')
        self.assertEqual(result, ['a', '', 'b'])

    def test_trailing_empty_segment_dropped(self):
        result = strings.split_on('a,b,', ',')
        self.assertEqual(result, ['a', 'b'])

    def test_leading_separator(self):
        result = strings.split_on(',a', ',')
        self.assertEqual(result, ['', 'a'])

    def test_empty_text(self):
        self.assertEqual(strings.split_on('', ','), [])

    def test_multi_character_separator(self):
        result = strings.split_on('a::b::c', '::')
        self.assertEqual(result, ['a', 'b', 'c'])

    def test_separator_longer_than_text(self):
        result = strings.split_on('ab', 'abc')
        self.assertEqual(result, ['ab'])

    def test_empty_separator(self):
        self.assertEqual(strings.split_on('abc', ''), ['abc'])
        self.assertEqual(strings.split_on('', ''), [])

    def test_restartable(self):
        first = strings.split_on('x y', ' ')
        second = strings.split_on('x y', ' ')
        self.assertEqual(first, second)
        self.assertIsNot(first, second)

class TestJoinWith(unittest.TestCase):
    def test_join_with(self):
        result = strings.join_with(['a', 'b', 'c'], ',')
        self.assertEqual(result, 'a,b,c')

    def test_empty_sequence(self):
        self.assertEqual(strings.join_with([], '-'), '')

    def test_single_segment(self):
        self.assertEqual(strings.join_with(['a'], '-'), 'a')

    def test_accepts_iterable(self):
        result = strings.join_with((s for s in ['x', 'y']), '+')
        self.assertEqual(result, 'x+y')

    def test_round_trip(self):
        for text in ['a,b,c', 'a,,b', 'single']:
            self.assertEqual(strings.join_with(strings.split_on(text, ','), ','), text)

class TestCountOccurrences(unittest.TestCase):
    def test_non_overlapping(self):
        result = strings.count_occurrences('aaaa', 'aa')
        self.assertEqual(result, 2)

    def test_absent(self):
        self.assertEqual(strings.count_occurrences('hello', 'xyz'), 0)

    def test_empty_substr(self):
        self.assertEqual(strings.count_occurrences('abc', ''), 0)

    def test_substr_longer_than_text(self):
        self.assertEqual(strings.count_occurrences('a', 'aa'), 0)

class TestFindFirst(unittest.TestCase):
    def test_find_first(self):
        result = strings.find_first('hello world', 'world')
        self.assertEqual(result, 6)

    def test_not_found(self):
        result = strings.find_first('hello', 'xyz')
        self.assertEqual(result, NOT_FOUND)
        self.assertEqual(result, -1)

    def test_first_of_many(self):
        self.assertEqual(strings.find_first('go go', 'go'), 0)

    def test_empty_substr(self):
        self.assertEqual(strings.find_first('abc', ''), NOT_FOUND)

    def test_substr_longer_than_text(self):
        self.assertEqual(strings.find_first('go', 'golang'), NOT_FOUND)

class TestPrefixSuffix(unittest.TestCase):
    def test_has_prefix(self):
        self.assertTrue(strings.has_prefix('golang', 'go'))
        self.assertFalse(strings.has_prefix('golang', 'lang'))

    def test_has_suffix(self):
        self.assertTrue(strings.has_suffix('golang', 'lang'))
        self.assertFalse(strings.has_suffix('golang', 'go'))

    def test_substr_longer_than_text(self):
        self.assertFalse(strings.has_prefix('go', 'golang'))
        self.assertFalse(strings.has_suffix('go', 'golang'))

    def test_empty_substr(self):
        self.assertTrue(strings.has_prefix('go', ''))
        self.assertTrue(strings.has_suffix('go', ''))
        self.assertTrue(strings.has_prefix('', ''))

class TestClassification(unittest.TestCase):
    def test_empty_text_is_vacuously_true(self):
        self.assertTrue(strings.is_alphabetic(''))
        self.assertTrue(strings.is_digits(''))
        self.assertTrue(strings.is_whitespace(''))

    def test_is_alphabetic(self):
        self.assertTrue(strings.is_alphabetic('Golang'))
        self.assertTrue(strings.is_alphabetic('Ωmega'))
        self.assertFalse(strings.is_alphabetic('Go lang'))

    def test_is_digits(self):
        self.assertTrue(strings.is_digits('123'))
        self.assertTrue(strings.is_digits('٣'))
        self.assertFalse(strings.is_digits('12a'))
        self.assertFalse(strings.is_digits('²'))

    def test_is_whitespace(self):
        self.assertTrue(strings.is_whitespace('  \t'))
        self.assertFalse(strings.is_whitespace(' x '))

class TestChainOperations(unittest.TestCase):
    def test_chain(self):
        result = strings.chain_operations('  hELLO  ', [strings.strip, strings.capitalize_first])
        self.assertEqual(result, 'Hello')

    def test_no_operations(self):
        self.assertEqual(strings.chain_operations('x', []), 'x')

class TestScenario(unittest.TestCase):
    def test_hello_go_world(self):
        text = '  Hello Go World  '
        stripped = strings.strip(text)
        self.assertEqual(stripped, 'Hello Go World')
        self.assertEqual(strings.to_lower(stripped), 'hello go world')
        self.assertEqual(strings.replace(text, 'Go', 'Golang'), '  Hello Golang World  ')
        segments = strings.split_on(stripped, ' ')
        self.assertEqual(segments, ['Hello', 'Go', 'World'])
        self.assertEqual(strings.join_with(segments, '-'), 'Hello-Go-World')

    def test_inputs_not_mutated(self):
        segments = ['a', 'b']
        strings.join_with(segments, ',')
        self.assertEqual(segments, ['a', 'b'])
