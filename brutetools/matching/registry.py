"""
A registry holds the candidate grammars and decides, for a given input, which one of them
(if any) it belongs to.

The rule is strict: every candidate gets tried, in registration order, and exactly one of them
must match the whole (trimmed) input. If none does, that's `NoMatch`. If several do, that's
`AmbiguousMatch`. There is no tie-breaking by length or registration order: the grammar author
is expected to fix the overlap, not to have it silently resolved for them.

Registries are ordinary objects owned by the caller. There is no global one.
"""

import sys
from ..grammar.components import Grammar
from .interface import AbstractMatcher, NoMatch, AmbiguousMatch
from .brute_force import Tokenizer, DEFAULT_MAX_DEPTH

VERBOSE = False

class Registry(AbstractMatcher):
	""" An ordered, indexable collection of candidate grammars. Subclasses supply the matching strategy. """
	
	def __init__(self):
		self.__grammars = []
	
	@classmethod
	def with_grammars(cls, grammars, **kwargs) -> "Registry":
		registry = cls(**kwargs)
		for g in grammars: registry.add(g)
		return registry
	
	def add(self, grammar:Grammar) -> int:
		""" Register a grammar and return its index. """
		if not isinstance(grammar, Grammar): raise TypeError("Expected a Grammar, got %r."%(grammar,))
		index = len(self.__grammars)
		self.__grammars.append(grammar)
		return index
	
	def remove(self, index:int):
		""" Later grammars move down to fill the gap, so their indices shift by one. """
		del self.__grammars[index]
	
	def grammars(self) -> tuple:
		return tuple(self.__grammars)
	
	def __len__(self): return len(self.__grammars)


class BruteForceRegistry(Registry):
	"""
	Tries each candidate grammar with the brute-force tokenizer.
	`max_depth` bounds how deeply grammars may nest before the attempt is abandoned as hopeless.
	"""
	
	def __init__(self, *, max_depth:int=DEFAULT_MAX_DEPTH):
		super().__init__()
		self.max_depth = max_depth
	
	def __attempt(self, text:str):
		winners, tokens, furthest = [], None, 0
		for index, grammar in enumerate(self.grammars()):
			tokenizer = Tokenizer(text, max_depth=self.max_depth)
			outcome = tokenizer.run(grammar)
			furthest = max(furthest, tokenizer.furthest)
			if outcome is None:
				if VERBOSE: print("Grammar %d: no match; reached %d of %d."%(index, tokenizer.furthest, len(text)), file=sys.stderr)
			else:
				if VERBOSE: print("Grammar %d: matched as %r."%(index, outcome[1]), file=sys.stderr)
				winners.append(index)
				tokens = outcome[1]
		return winners, tokens, furthest
	
	def candidates(self, text:str) -> list:
		""" Indices of every grammar which matches the whole of the trimmed text. """
		return self.__attempt(text.strip())[0]
	
	def match(self, text:str) -> list:
		text = text.strip()
		winners, tokens, furthest = self.__attempt(text)
		if not winners: raise NoMatch(text, furthest)
		if len(winners) > 1: raise AmbiguousMatch(text, winners)
		return tokens
