"""
Table-driven predictive (LL(1)) matching.

The idea is to compute, ahead of time, which component each candidate grammar must expect
given the next character, and so avoid the backtracking. None of that exists yet: this
registry exposes the same API as the others, but asking it to match anything is a
programming error and fails loudly.
"""

from .registry import Registry

class PredictiveRegistry(Registry):
	def match(self, text:str) -> list:
		raise NotImplementedError(type(self), 'Predictive (LL1) matching is not implemented. Use the "naive" method.')
