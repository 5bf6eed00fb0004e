from __future__ import annotations
import logging
from typing import Any

from atom import Expression
from edag import EDAG
from equality import equals as structural_equals
from equality import is_canonical
from simplifier import Simplifier

logger = logging.getLogger(__name__)

DEFAULT_MEMOIZE = True
DEFAULT_CHECK_CANONICAL = False


class CAS:
    """
    Entry point bundling the simplifier with its settings.

    memoize: cache repeated subtrees within each simplify call.
    check_canonical: make equals() verify both operands are canonical
    (raises NonCanonicalExpression otherwise). Meant for tests.
    """

    def __init__(
        self,
        memoize: bool = DEFAULT_MEMOIZE,
        check_canonical: bool = DEFAULT_CHECK_CANONICAL,
    ) -> None:
        self.memoize = memoize
        self.check_canonical = check_canonical

    def simplify(self, expr: Expression) -> "CAS.ExprResult":
        s = Simplifier(memoize=self.memoize)
        canonical = s.simplify(expr)
        logger.debug(
            "simplified %s node into %s (cache hits=%d)",
            expr.kind,
            canonical.kind,
            s.hits,
        )
        return CAS.ExprResult(self, canonical)

    def equals(self, a: Any, b: Any) -> bool:
        a, b = self._unwrap(a), self._unwrap(b)
        return structural_equals(a, b, check=self.check_canonical)

    def is_canonical(self, expr: Any) -> bool:
        return is_canonical(self._unwrap(expr))

    def graph(self, expr: Any, share: bool = False) -> EDAG:
        return EDAG.from_expression(self._unwrap(expr), share=share)

    def _unwrap(self, obj: Any) -> Expression:
        if isinstance(obj, CAS.ExprResult):
            return obj.expr
        if isinstance(obj, Expression):
            return obj
        raise TypeError("Unsupported object for unwrapping")

    class ExprResult:
        """A canonical expression together with the CAS that produced it."""

        def __init__(self, cas: "CAS", expr: Expression) -> None:
            self._cas = cas
            self.expr = expr

        def equals(self, other: Any) -> bool:
            return self._cas.equals(self, other)

        def graph(self, share: bool = False) -> EDAG:
            return self._cas.graph(self, share=share)

        def __repr__(self) -> str:
            return f"ExprResult({self.expr!r})"
