"""
Passes over grammar components.

A grammar is a tree: composite components own nested grammars, and those own more components.
Anything that wants to interpret that tree (nullability, matching, and whatever comes along
later) descends from `TreePass` and supplies one method per component class it understands.
"""

import abc

class TreePass(abc.ABC):
	"""
	Tree passes are callable:
	They implement a simple form of double-dispatch by calling a method named
	for the type of the first argument, and with the term again as first argument.
	All remaining arguments are passed through unexamined.
	
	So a pass which understands `Literal` components has a method called `Literal`.
	The per-class methods must make explicit recursive calls if processing is to continue.
	"""
	@abc.abstractmethod
	def _unhandled_(self, term, *args, **kwargs):
		""" Deal with unknown component classes here. """
		raise NotImplementedError(type(self))
	
	def __call__(self, term, *args, **kwargs):
		method = getattr(self, term.__class__.__name__, self._unhandled_)
		return method(term, *args, **kwargs)
