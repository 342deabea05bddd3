# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Import trie: one `ImportNode` per distinct path prefix.

Each node records how its own prefix is imported (`has_self`, `renames`) and
whether everything below it is wildcard-imported (`has_glob`). `merge` is the
only mutator: flags are OR-ed, rename sets are unioned, and children merge
recursively, so the order declarations are inserted in never changes the
final trie.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple


@dataclass
class ImportNode:
	has_self: bool = False
	has_glob: bool = False
	renames: List[str] = field(default_factory=list)  # sorted, unique
	children: Dict[str, "ImportNode"] = field(default_factory=dict)

	@classmethod
	def self_or_rename(cls, alias: Optional[str]) -> "ImportNode":
		"""Leaf state for importing a path itself, bare or under `alias`."""
		if alias is None:
			return cls(has_self=True)
		return cls(renames=[alias])

	@classmethod
	def just_glob(cls) -> "ImportNode":
		return cls(has_glob=True)

	def copy(self) -> "ImportNode":
		return ImportNode(
			has_self=self.has_self,
			has_glob=self.has_glob,
			renames=list(self.renames),
			children={name: child.copy() for name, child in self.children.items()},
		)

	def merge(self, other: "ImportNode") -> None:
		self.has_self |= other.has_self
		self.has_glob |= other.has_glob
		if other.renames:
			self.renames = sorted(set(self.renames).union(other.renames))
		for name, child in other.children.items():
			existing = self.children.get(name)
			if existing is None:
				self.children[name] = child.copy()
			else:
				existing.merge(child)

	def descend(self, path: Sequence[str]) -> "ImportNode":
		"""Return the node for `path` below this one, creating empty nodes on the way."""
		node = self
		for segment in path:
			child = node.children.get(segment)
			if child is None:
				child = node.children[segment] = ImportNode()
			node = child
		return node

	def insert(self, path: Sequence[str], leaf: "ImportNode") -> None:
		self.descend(path).merge(leaf)

	def sorted_children(self) -> Iterator[Tuple[str, "ImportNode"]]:
		for name in sorted(self.children):
			yield name, self.children[name]

	def is_empty(self) -> bool:
		return not (self.has_self or self.has_glob or self.renames or self.children)


__all__ = ["ImportNode"]
