from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

# Node kinds shared by every expression class
INTEGER = 'INTEGER'
RATIONAL = 'RATIONAL'
RADICAL = 'RADICAL'
VARIABLE = 'VARIABLE'
POWER = 'POWER'
PRODUCT = 'PRODUCT'
SUM = 'SUM'

NUMERIC_KINDS = (INTEGER, RATIONAL, RADICAL)

class Expression:
	"""
	Base of the closed set of expression nodes.

	Nodes are immutable and hashable; composite nodes own their children
	as tuples. Subclasses set `kind` to one of the module constants.
	"""
	__slots__ = ()
	kind: str = ''
	def children(self) -> Tuple['Expression', ...]:
		return ()
	def is_numeric(self) -> bool:
		return self.kind in NUMERIC_KINDS
	def is_leaf(self) -> bool:
		return len(self.children()) == 0

@dataclass(frozen=True)
class Integer(Expression):
	value: int
	kind = INTEGER
	def __post_init__(self) -> None:
		if isinstance(self.value, bool) or not isinstance(self.value, int):
			raise TypeError(f"Integer needs an int, got {type(self.value).__name__}")

@dataclass(frozen=True)
class Variable(Expression):
	symbol: str
	kind = VARIABLE
	def __post_init__(self) -> None:
		if not isinstance(self.symbol, str) or not self.symbol.isidentifier():
			raise ValueError(f"invalid variable symbol {self.symbol!r}")

ZERO = Integer(0)
ONE = Integer(1)
