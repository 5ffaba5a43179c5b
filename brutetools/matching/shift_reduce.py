"""
Shift-reduce (SLR(1)) matching.

Eventually this would build a characteristic automaton over the candidate grammars and drive it
with a push-down stack. For now the registry only collects grammars; matching with it is a
programming error and fails loudly.
"""

from .registry import Registry

class ShiftReduceRegistry(Registry):
	def match(self, text:str) -> list:
		raise NotImplementedError(type(self), 'Shift-reduce (SLR1) matching is not implemented. Use the "naive" method.')
