"""
There is an old adage in software development: when in doubt, use brute force. Accordingly,
this is the simple, easy to code, slow matcher which is vulnerable to exponential behavior.
It is meant for small grammars and short inputs, and it makes a fine basis of comparison
for any cleverer approach that may come along later.

Two pieces cooperate:

	* The `Matcher` consumes ONE component at ONE offset. It answers with how many characters
	  it consumed (zero meaning "no match here") and which tokens those characters make.
	* The `Tokenizer` walks a whole grammar left to right, asking the matcher about each
	  component in turn, and decides what a zero means based on nullability.

Composite components call back into the tokenizer for a "pass" over their nested grammar.
Such nested runs may stop short of the end of the input; only the outermost run must
consume everything.

Repetition is greedy (maximal munch): it takes as many passes as it can get, and never gives any
back to help a later sibling succeed. So `[ZeroOrMore([a]), a]` can never match "aa".
That is a known limitation of the approach, not something to be patched here.

A repetition whose pass consumes nothing stops right there. Otherwise, a repeated grammar
which is entirely nullable would go around forever.
"""

from typing import Optional
from ..support.treelang import TreePass
from ..grammar.components import Grammar, is_nullable
from .interface import Unsupported, GrammarTooDeeplyNested, DEFAULT_MAX_DEPTH

class Matcher(TreePass):
	"""
	Calling the matcher as `matcher(component, position, depth)` returns `(consumed, tokens)`.
	It never looks at the input before `position`.

	Simple components and the repetition/alternation operators produce a single token for
	everything they consumed, so a run of repeated matches merges into one token.
	A `Group` instead hands back its inner tokens as-is.
	"""

	def __init__(self, tokenizer:"Tokenizer"):
		self.__tokenizer = tokenizer
		self.__text = tokenizer.text

	def _unhandled_(self, component, position, depth):
		raise Unsupported(component, self.__text, position)

	def __segment(self, position, consumed):
		if consumed: return consumed, [self.__text[position:position+consumed]]
		else: return 0, []

	def __pass(self, inner:Grammar, position, depth) -> int:
		""" One nested run over `inner`. Returns the number of characters consumed, or None for failure. """
		outcome = self.__tokenizer.run(inner, position, depth=depth+1, nested=True)
		if outcome is None: return None
		return outcome[0] - position

	def __repeat(self, inner:Grammar, position, depth) -> int:
		cursor, end = position, len(self.__text)
		while cursor < end:
			consumed = self.__pass(inner, cursor, depth)
			if not consumed: break  # Failed pass, or no progress.
			cursor += consumed
		return cursor - position

	def Literal(self, component, position, depth):
		text = component.text
		if self.__text.startswith(text, position): return len(text), [text]
		else: return 0, []

	Classified = Literal

	def ZeroOrMore(self, component, position, depth):
		return self.__segment(position, self.__repeat(component.inner, position, depth))

	def OneOrMore(self, component, position, depth):
		# Zero passes comes back as zero consumed. OneOrMore is not nullable, so the tokenizer fails it.
		return self.__segment(position, self.__repeat(component.inner, position, depth))

	def ZeroOrOne(self, component, position, depth):
		return self.__segment(position, self.__pass(component.inner, position, depth) or 0)

	def Alternation(self, component, position, depth):
		consumed = self.__pass(component.left, position, depth)
		if not consumed: consumed = self.__pass(component.right, position, depth)
		return self.__segment(position, consumed or 0)

	def Group(self, component, position, depth):
		outcome = self.__tokenizer.run(component.inner, position, depth=depth+1, nested=True)
		if outcome is None: return 0, []
		end, tokens = outcome
		return end - position, tokens


class Tokenizer:
	"""
	One tokenizer per attempt to match some text against a grammar.
	Call `.run(grammar)` for the usual end-to-end match. It returns `(end, tokens)`, or None if
	the grammar does not match. Afterwards, `.furthest` tells how far into the text any
	successful step of the attempt managed to reach, which is handy for error reporting.
	"""

	def __init__(self, text:str, *, max_depth:int=DEFAULT_MAX_DEPTH):
		self.text = text
		self.max_depth = max_depth
		self.furthest = 0
		self.__match = Matcher(self)

	def run(self, grammar:Grammar, position:int=0, *, depth:int=0, nested:bool=False) -> Optional[tuple]:
		if depth > self.max_depth: raise GrammarTooDeeplyNested(depth, self.max_depth)
		end = len(self.text)
		cursor, tokens = position, []
		for index, component in enumerate(grammar):
			if cursor == end:
				# Out of input: whatever is left must be able to match nothing.
				if all(is_nullable(c, depth, self.max_depth) for c in grammar[index:]): break
				else: return None
			consumed, found = self.__match(component, cursor, depth)
			if consumed:
				cursor += consumed
				tokens.extend(found)
				if cursor > self.furthest: self.furthest = cursor
			elif not is_nullable(component, depth, self.max_depth):
				return None
		if nested or cursor == end: return cursor, tokens
		else: return None
