"""
# Grammars and their components

A grammar here is nothing fancier than an ordered sequence of components. Each component is one of:
	* `Literal`: a fixed bit of text which must appear exactly as written.
	* `Classified`: also fixed text, but tagged with a "kind" for the benefit of whoever consumes the tokens.
	* `ZeroOrMore`, `OneOrMore`, `ZeroOrOne`: repetition over a nested grammar.
	* `Alternation`: a choice between two nested grammars, the left taking precedence.
	* `Group`: a nested grammar whose tokens come out individually rather than as one lump.

Components are values. They are immutable tuples underneath, they compare by variant AND payload,
and a composite takes its own (immutable) copy of whatever grammar or list it is handed.
Since there is no way to make a cycle out of values, there is no need for any sort of arena:
you build the grammar once, and the matcher only ever reads it.

# Nullability

A component is nullable if it can match without consuming any input. The rules are deliberately
coarse: repetition with a zero lower bound is nullable no matter what it repeats, `OneOrMore` is
never nullable (even over a nullable inner grammar), and `Alternation` is never nullable, even
when both branches are. That last one is a standing decision rather than an oversight: an
alternation is expected to commit to one branch or the other.
"""

from typing import Hashable, Iterable, Union
from ..support.treelang import TreePass
from ..matching.interface import Unsupported, GrammarTooDeeplyNested, DEFAULT_MAX_DEPTH


class Component(tuple):
	"""
	Common base for all the component variants.
	The only thing it really adds to `tuple` is that equality (and hashing) respect the variant,
	so that `ZeroOrMore(g)` and `OneOrMore(g)` are not mistaken for one another.
	"""
	__slots__ = ()
	tag = None

	def __eq__(self, other): return type(self) is type(other) and tuple.__eq__(self, other)
	def __ne__(self, other): return not self == other
	def __hash__(self): return hash((self.tag, tuple(self)))
	def __getnewargs__(self): return tuple(self)
	def __repr__(self): return "%s(%s)"%(type(self).__name__, ", ".join(map(repr, self)))


def _check_text(variant, text):
	# An empty fixed text would consume nothing, which is indistinguishable from not matching.
	if not isinstance(text, str) or not text:
		raise ValueError("%s text must be a non-empty string, not %r."%(variant, text))

class Literal(Component):
	__slots__ = ()
	tag = 'literal'
	def __new__(cls, text:str):
		_check_text(cls.__name__, text)
		return tuple.__new__(cls, (text,))
	@property
	def text(self) -> str: return self[0]

class Classified(Component):
	""" Fixed text with a classification. The kind never affects matching. """
	__slots__ = ()
	tag = 'classified'
	def __new__(cls, text:str, kind:Hashable):
		_check_text(cls.__name__, text)
		hash(kind)
		return tuple.__new__(cls, (text, kind))
	@property
	def text(self) -> str: return self[0]
	@property
	def kind(self): return self[1]

def keyword(text:str) -> Classified:
	return Classified(text, 'keyword')


class _Nested(Component):
	""" Composite over exactly one nested grammar. """
	__slots__ = ()
	def __new__(cls, inner:Union["Grammar", Iterable[Component]]):
		return tuple.__new__(cls, (as_grammar(inner),))
	@property
	def inner(self) -> "Grammar": return self[0]

class ZeroOrMore(_Nested):
	__slots__ = ()
	tag = 'zero_or_more'

class OneOrMore(_Nested):
	__slots__ = ()
	tag = 'one_or_more'

class ZeroOrOne(_Nested):
	__slots__ = ()
	tag = 'zero_or_one'

class Group(_Nested):
	__slots__ = ()
	tag = 'group'

class Alternation(Component):
	__slots__ = ()
	tag = 'alternation'
	def __new__(cls, left:Union["Grammar", Iterable[Component]], right:Union["Grammar", Iterable[Component]]):
		return tuple.__new__(cls, (as_grammar(left), as_grammar(right)))
	@property
	def left(self) -> "Grammar": return self[0]
	@property
	def right(self) -> "Grammar": return self[1]


class Grammar(tuple):
	"""
	An ordered, immutable sequence of components: one candidate pattern.
	Order matters. Indexing, slicing, iteration and `len` behave as for any tuple.
	"""
	__slots__ = ()

	def __new__(cls, components:Iterable[Component]=()):
		if isinstance(components, (str, Component)):
			raise TypeError("A grammar is built from a sequence of components, not %r."%(components,))
		components = tuple(components)
		for c in components:
			if not isinstance(c, Component): raise TypeError("%r is not a grammar component."%(c,))
		return tuple.__new__(cls, components)

	@classmethod
	def of(cls, *components:Component) -> "Grammar":
		return cls(components)

	@property
	def components(self) -> tuple: return tuple(self)

	def __eq__(self, other): return type(self) is type(other) and tuple.__eq__(self, other)
	def __ne__(self, other): return not self == other
	def __hash__(self): return hash(('grammar', tuple(self)))
	def __repr__(self): return "Grammar([%s])"%", ".join(map(repr, self))

	def __add__(self, other):
		if not isinstance(other, Grammar): return NotImplemented
		return Grammar(tuple(self) + tuple(other))

	def is_match(self, text:str) -> bool:
		""" Does this grammar, all on its own, consume exactly the whole of `text`? """
		from ..matching.brute_force import Tokenizer
		return Tokenizer(text).run(self) is not None

def as_grammar(items) -> Grammar:
	return items if isinstance(items, Grammar) else Grammar(items)

def concat(a:Grammar, b:Grammar) -> Grammar:
	""" Append b's components to a's. """
	return as_grammar(a) + as_grammar(b)


COMPONENT_TAGS = {
	cls.tag: cls
	for cls in (Literal, Classified, ZeroOrMore, OneOrMore, ZeroOrOne, Alternation, Group)
}
COMPONENT_TAGS['keyword'] = keyword

def make_component(tag:str, *payload) -> Component:
	"""
	Build a component from its tag and payload, for when the variant is only known as data:
		make_component('literal', 'if')
		make_component('classified', 'x', 'identifier')
		make_component('zero_or_more', [Literal('a')])
		make_component('alternation', [Literal('b')], [Literal('c')])
	"""
	try: constructor = COMPONENT_TAGS[tag]
	except KeyError: raise KeyError("No such component tag as %r."%(tag,)) from None
	return constructor(*payload)


class Nullability(TreePass):
	"""
	Can a component (or a whole grammar) match while consuming nothing?
	Call as `is_nullable(term, depth, max_depth)`. Looking inside a `Group` goes one level deeper,
	just as matching it would, and is held to the same bound.
	"""

	def _unhandled_(self, term, *args):
		raise Unsupported(term)

	def Grammar(self, grammar, depth=0, max_depth=DEFAULT_MAX_DEPTH):
		return all(self(c, depth, max_depth) for c in grammar)

	def Literal(self, component, *_): return False
	def Classified(self, component, *_): return False
	def ZeroOrMore(self, component, *_): return True
	def ZeroOrOne(self, component, *_): return True
	def OneOrMore(self, component, *_): return False
	def Alternation(self, component, *_): return False

	def Group(self, component, depth=0, max_depth=DEFAULT_MAX_DEPTH):
		if depth >= max_depth: raise GrammarTooDeeplyNested(depth+1, max_depth)
		return self.Grammar(component.inner, depth+1, max_depth)

is_nullable = Nullability()
