"""
Matching Interface Definitions

A failed match is an ordinary, expected outcome: it comes back as a `MatchError` subclass,
which the caller can catch, inspect, and (if so inclined) display with `.complain()`.

Some things are not ordinary. A grammar nested past the configured depth, or a call into a
matching strategy which does not exist yet, means the program itself is wrong. Those raise
exceptions from outside the `MatchError` family so that nobody catches them by accident.
"""

import sys
from abc import ABC, abstractmethod
from ..support.failureprone import SourceText, caret_picture

class MatchError(ValueError):
	"""
	Base class for the typed outcomes of a failed match.
	`text` is the input as actually matched (that is, after trimming);
	`position` is an offset into it which says roughly where things went wrong.
	"""
	gripe = "Match failed."
	caption = "near here"
	
	def __init__(self, text:str, position:int=0, *args):
		super().__init__(text, position, *args)
		self.text, self.position = text, position
	
	def span(self) -> slice:
		return slice(self.position, self.position+1)
	
	def complaint(self) -> str:
		return SourceText(self.text).complaint(self.span(), self.gripe, self.caption)
	
	def complain(self):
		print(self.complaint(), file=sys.stderr)

class NoMatch(MatchError):
	"""
	No candidate grammar consumed the whole input.
	The position is as far as any candidate got before giving up.
	"""
	gripe = "No grammar matches the input beyond this point."
	caption = "no grammar gets past here"

class AmbiguousMatch(MatchError):
	""" Two or more candidate grammars each consumed the whole input. """
	gripe = "More than one grammar matches this input."
	caption = "matched more than once"
	
	def __init__(self, text:str, indices):
		self.indices = tuple(indices)
		super().__init__(text, 0, self.indices)
	
	def complaint(self) -> str:
		# Position means nothing here: the whole input is at fault.
		line = SourceText(self.text).line_of_text(1)
		picture = caret_picture(line, 0, len(line), caption=self.caption)
		return "%s Candidates: %s.\n%s"%(self.gripe, ", ".join(map(str, self.indices)), picture)

class Unsupported(MatchError):
	""" Some component is not of any class the matching machinery knows how to deal with. """
	def __init__(self, component, text:str='', position:int=0):
		self.component = component
		self.gripe = "Component %r is not supported."%(component,)
		super().__init__(text, position, component)

DEFAULT_MAX_DEPTH = 100

class GrammarTooDeeplyNested(RecursionError):
	""" Raised when nested grammars go deeper than the configured bound. """
	def __init__(self, depth:int, max_depth:int):
		super().__init__("grammar too deeply nested: depth %d exceeds the limit of %d"%(depth, max_depth))
		self.depth, self.max_depth = depth, max_depth


class AbstractMatcher(ABC):
	"""
	Every matching strategy answers the same question: given some text, which tokens does the
	one and only matching grammar make of it? Anything other than exactly one matching grammar
	raises a `MatchError`.
	"""
	
	@abstractmethod
	def match(self, text:str) -> list:
		""" Return the list of tokens (substrings of `text`) produced by the unique matching grammar. """
