from __future__ import annotations
import networkx as nx
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from atom import Expression, Integer, Variable, INTEGER, RATIONAL, RADICAL, VARIABLE, POWER, PRODUCT, SUM
from expression import Power, Product, Sum

# Index-addressed view of an expression tree on a networkx.DiGraph.
# Edges run child -> parent; each node keeps its ordered child ids.
@dataclass
class Node:
	kind: str
	label: str
	value: Any = None
	children: List[str] = field(default_factory=list)  # ordered child node ids

class EDAG:
	def __init__(self) -> None:
		self.g = nx.DiGraph()
		self.root: Optional[str] = None
		self._id = 0
	def _nid(self) -> str:
		self._id += 1
		return f"n{self._id}"
	@staticmethod
	def from_expression(expr: Expression, share: bool = False) -> 'EDAG':
		"""
		Build the graph for expr. With share=True structurally identical
		subtrees map to a single graph node, turning the tree into a DAG.
		"""
		out = EDAG()
		memo: Dict[Expression, str] = {}
		def add(e: Expression) -> str:
			if share and e in memo:
				return memo[e]
			child_ids = [add(c) for c in e.children()]
			n = out._nid()
			out.g.add_node(n, data=Node(e.kind, _label(e), value=(e if e.is_leaf() else None), children=child_ids))
			for c in child_ids:
				out.g.add_edge(c, n)
			if share:
				memo[e] = n
			return n
		out.root = add(expr)
		return out
	def to_expression(self) -> Expression:
		if self.root is None:
			raise RuntimeError('empty graph')
		def build(nid: str) -> Expression:
			data: Node = self.g.nodes[nid]['data']
			if data.kind in (INTEGER, RATIONAL, RADICAL, VARIABLE):
				return data.value
			kids = [build(c) for c in data.children]
			if data.kind == POWER:
				return Power(kids[0], kids[1])
			if data.kind == PRODUCT:
				return Product(tuple(kids))
			if data.kind == SUM:
				return Sum(tuple(kids))
			raise ValueError(f"Unknown node kind {data.kind}")
		return build(self.root)
	def node_count(self) -> int:
		return self.g.number_of_nodes()
	def depth(self) -> int:
		"""Edges on the longest leaf-to-root path."""
		if self.root is None:
			return 0
		return nx.dag_longest_path_length(self.g)
	def _uses(self) -> Counter:
		# parallel uses collapse to one DiGraph edge, so count child lists
		return Counter(c for n in self.g.nodes for c in self.g.nodes[n]['data'].children)
	def is_tree(self) -> bool:
		"""True when every node has exactly one parent except the root."""
		if self.root is None:
			return False
		if any(k > 1 for k in self._uses().values()):
			return False
		return nx.is_arborescence(self.g.reverse(copy=False))
	def leaves(self) -> List[Expression]:
		return [self.g.nodes[n]['data'].value for n in self.g.nodes if self.g.in_degree(n) == 0]
	def shared_count(self) -> int:
		"""Nodes used more than once (always 0 unless built with share=True)."""
		return sum(1 for k in self._uses().values() if k > 1)

def _label(e: Expression) -> str:
	if isinstance(e, Integer):
		return str(e.value)
	if isinstance(e, Variable):
		return e.symbol
	return e.kind
