import unittest
import io
from contextlib import redirect_stderr
from brutetools.grammar.components import Literal, keyword, ZeroOrMore, OneOrMore, Alternation, Group, Grammar
from brutetools.matching.interface import NoMatch, AmbiguousMatch, GrammarTooDeeplyNested, AbstractMatcher
from brutetools.matching import registry as registry_module
from brutetools.matching.registry import BruteForceRegistry
from brutetools.matching.all_methods import MATCHING_METHODS, make_registry

A, B, C = Literal('a'), Literal('b'), Literal('c')


class TestRegistryBookkeeping(unittest.TestCase):
	def setUp(self):
		self.registry = BruteForceRegistry()
	
	def test_add_returns_index(self):
		self.assertEqual(0, self.registry.add(Grammar([A])))
		self.assertEqual(1, self.registry.add(Grammar([B])))
		self.assertEqual((Grammar([A]), Grammar([B])), self.registry.grammars())
		self.assertEqual(2, len(self.registry))
	
	def test_remove(self):
		for g in 'abc': self.registry.add(Grammar([Literal(g)]))
		self.registry.remove(1)
		self.assertEqual((Grammar([A]), Grammar([C])), self.registry.grammars())
		with self.assertRaises(IndexError): self.registry.remove(5)
	
	def test_add_wants_a_grammar(self):
		with self.assertRaises(TypeError): self.registry.add([A])
	
	def test_with_grammars(self):
		registry = BruteForceRegistry.with_grammars([Grammar([A]), Grammar([B])], max_depth=7)
		self.assertEqual(2, len(registry))
		self.assertEqual(7, registry.max_depth)


class TestRegistryMatch(unittest.TestCase):
	def test_empty_registry(self):
		for text in ['', 'a', '   hello  ']:
			with self.subTest(text=text):
				with self.assertRaises(NoMatch): BruteForceRegistry().match(text)
	
	def test_unique_match(self):
		registry = BruteForceRegistry.with_grammars([
			Grammar([A, B, ZeroOrMore([A])]),
			Grammar([A, Alternation([B], [C]), B]),
			Grammar([A, Group([B, C]), B]),
		])
		for text, expect in [
			('abaa', ['a', 'b', 'aa']),
			('acb', ['a', 'c', 'b']),
			('abcb', ['a', 'b', 'c', 'b']),
		]:
			with self.subTest(text=text):
				self.assertEqual(expect, registry.match(text))
	
	def test_ambiguity(self):
		registry = BruteForceRegistry.with_grammars([
			Grammar([A, ZeroOrMore([B])]),
			Grammar([C]),
			Grammar([A, OneOrMore([B])]),
		])
		self.assertEqual(['a'], registry.match('a'))
		with self.assertRaises(AmbiguousMatch) as cm:
			registry.match('abb')
		self.assertEqual((0, 2), cm.exception.indices)
		self.assertEqual([0, 2], registry.candidates('abb'))
		self.assertEqual([1], registry.candidates(' c '))
	
	def test_ambiguity_is_not_resolved_by_removal_order(self):
		registry = BruteForceRegistry.with_grammars([Grammar([A]), Grammar([A])])
		with self.assertRaises(AmbiguousMatch): registry.match('a')
		registry.remove(0)
		self.assertEqual(['a'], registry.match('a'))
	
	def test_trim_idempotence(self):
		registry = BruteForceRegistry.with_grammars([
			Grammar([keyword('let'), Literal(' '), OneOrMore([Literal('x')])]),
			Grammar([ZeroOrMore([A])]),
		])
		for text in ['let xx', '  let xx\t', '\nlet x ', 'aaa', '   ', '', ' q ']:
			with self.subTest(text=text):
				try: expect = registry.match(text.strip())
				except NoMatch: expect = NoMatch
				try: actual = registry.match(text)
				except NoMatch: actual = NoMatch
				self.assertEqual(expect, actual)
	
	def test_interior_whitespace_is_significant(self):
		registry = BruteForceRegistry.with_grammars([Grammar([keyword('let'), Literal(' '), Literal('x')])])
		self.assertEqual(['let', ' ', 'x'], registry.match('  let x  '))
		with self.assertRaises(NoMatch): registry.match('let  x')
	
	def test_no_match_position(self):
		registry = BruteForceRegistry.with_grammars([Grammar([A, B, C]), Grammar([A, C])])
		with self.assertRaises(NoMatch) as cm:
			registry.match('  abx')
		self.assertEqual('abx', cm.exception.text)
		self.assertEqual(2, cm.exception.position)
		self.assertTrue(cm.exception.complaint().startswith('After 2 characters: '))
	
	def test_depth_bound_is_configurable(self):
		g = Grammar([A])
		for _ in range(5): g = Grammar([Group(g)])
		self.assertEqual(['a'], BruteForceRegistry.with_grammars([g]).match('a'))
		with self.assertRaises(GrammarTooDeeplyNested):
			BruteForceRegistry.with_grammars([g], max_depth=3).match('a')
	
	def test_verbose_trace(self):
		registry = BruteForceRegistry.with_grammars([Grammar([A, B]), Grammar([A, C])])
		self.addCleanup(setattr, registry_module, 'VERBOSE', registry_module.VERBOSE)
		registry_module.VERBOSE = True
		stream = io.StringIO()
		with redirect_stderr(stream):
			self.assertEqual(['a', 'c'], registry.match('ac'))
		self.assertEqual([
			"Grammar 0: no match; reached 1 of 2.",
			"Grammar 1: matched as ['a', 'c'].",
		], stream.getvalue().splitlines())
	
	def test_quiet_by_default(self):
		registry = BruteForceRegistry.with_grammars([Grammar([A])])
		stream = io.StringIO()
		with redirect_stderr(stream): registry.match('a')
		self.assertEqual('', stream.getvalue())
	
	def test_grammars_are_not_mutated(self):
		g = Grammar([A, ZeroOrMore([B])])
		before = repr(g)
		BruteForceRegistry.with_grammars([g]).match('abbb')
		self.assertEqual(before, repr(g))


class TestMethods(unittest.TestCase):
	def test_naive_is_default(self):
		registry = make_registry()
		self.assertIsInstance(registry, BruteForceRegistry)
		self.assertIsInstance(registry, AbstractMatcher)
		self.assertEqual(4, make_registry(max_depth=4).max_depth)
	
	def test_unknown_method(self):
		with self.assertRaises(KeyError): make_registry('GLR')
	
	def test_placeholders_fail_loudly(self):
		for method in ['LL1', 'SLR1']:
			with self.subTest(method=method):
				registry = make_registry(method)
				self.assertEqual(0, registry.add(Grammar([A])))
				with self.assertRaises(NotImplementedError): registry.match('a')
	
	def test_method_table(self):
		self.assertEqual({'naive', 'LL1', 'SLR1'}, set(MATCHING_METHODS))


if __name__ == '__main__':
	unittest.main()
