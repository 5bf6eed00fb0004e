from __future__ import annotations
from fractions import Fraction
from atom import Expression, Integer, RATIONAL
from errors import DivisionByZero
from factor import gcd

class Rational(Expression):
	"""
	Exact fraction, always held in lowest terms with a positive denominator.

	Doubles as the arithmetic value used by the numeric layers and as the
	Rational expression node. Arithmetic may produce a whole number
	(denominator 1); collapse() turns those into Integer nodes.
	"""
	__slots__ = ("_f",)
	kind = RATIONAL
	def __init__(self, num: int | Fraction, den: int | None = None) -> None:
		if isinstance(num, Fraction):
			if den is not None:
				raise TypeError("denominator not allowed with a Fraction")
			f = num
		else:
			n, d = _reduced(num, 1 if den is None else den)
			f = Fraction(n, d)
		object.__setattr__(self, "_f", f)
	def __setattr__(self, name: str, value: object) -> None:
		raise AttributeError("Rational is immutable")
	def __add__(self, other: Rational) -> Rational:
		if not isinstance(other, Rational):
			return NotImplemented
		return Rational(self._f + other._f)
	def __sub__(self, other: Rational) -> Rational:
		if not isinstance(other, Rational):
			return NotImplemented
		return Rational(self._f - other._f)
	def __mul__(self, other: Rational | int) -> Rational:
		if isinstance(other, Rational):
			return Rational(self._f * other._f)
		if isinstance(other, int) and not isinstance(other, bool):
			return Rational(self._f * other)
		return NotImplemented
	def __truediv__(self, other: Rational | int) -> Rational:
		if isinstance(other, Rational):
			if other._f == 0:
				raise DivisionByZero()
			return Rational(self._f / other._f)
		if isinstance(other, int) and not isinstance(other, bool):
			if other == 0:
				raise DivisionByZero()
			return Rational(self._f / other)
		return NotImplemented
	def __neg__(self) -> Rational:
		return Rational(-self._f)
	def __pow__(self, exp: int) -> Rational:
		if exp == 0:
			return Rational(1,1)
		if exp < 0 and self._f == 0:
			raise DivisionByZero()
		return Rational(self._f ** exp)
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Rational):
			return False
		return self._f == other._f
	def __hash__(self) -> int:
		return hash((RATIONAL, self._f))
	def __lt__(self, other: Rational) -> bool:
		return self._f < other._f
	def __le__(self, other: Rational) -> bool:
		return self._f <= other._f
	def __gt__(self, other: Rational) -> bool:
		return self._f > other._f
	def __ge__(self, other: Rational) -> bool:
		return self._f >= other._f
	def __repr__(self) -> str:
		return f"Rational({self._f.numerator}, {self._f.denominator})"
	def is_zero(self) -> bool:
		return self._f == 0
	def is_one(self) -> bool:
		return self._f == 1
	def is_int(self) -> bool:
		return self._f.denominator == 1
	def to_int(self) -> int:
		return self._f.numerator // self._f.denominator
	def numerator(self) -> int:
		return self._f.numerator
	def denominator(self) -> int:
		return self._f.denominator
	def sign(self) -> int:
		return (self._f > 0) - (self._f < 0)
	def fraction(self) -> Fraction:
		return self._f
	def collapse(self) -> Expression:
		"""The canonical node for this value: Integer when whole, else self."""
		if self.is_int():
			return Integer(self.to_int())
		return self

def _reduced(n: int, d: int) -> tuple[int, int]:
	for v in (n, d):
		if isinstance(v, bool) or not isinstance(v, int):
			raise TypeError(f"Rational needs int parts, got {type(v).__name__}")
	if d == 0:
		raise DivisionByZero()
	g = gcd(n, d)
	if d < 0:
		g = -g
	return n // g, d // g

def reduce(n: int, d: int) -> Rational:
	"""n/d in lowest terms with the sign on the numerator; DivisionByZero when d == 0."""
	return Rational(n, d)

def add(a: Rational, b: Rational) -> Rational:
	return a + b

def sub(a: Rational, b: Rational) -> Rational:
	return a - b

def mul(a: Rational, b: Rational) -> Rational:
	return a * b

def div(a: Rational, b: Rational) -> Rational:
	return a / b

def as_rational(expr: Expression | int) -> Rational:
	"""Lift an Integer node, a Rational or a plain int to a Rational value."""
	if isinstance(expr, Rational):
		return expr
	if isinstance(expr, Integer):
		return Rational(expr.value, 1)
	if isinstance(expr, int) and not isinstance(expr, bool):
		return Rational(expr, 1)
	raise TypeError(f"not a rational value: {expr!r}")

ZERO = Rational(0, 1)
ONE = Rational(1, 1)
