# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Combine `use` declarations into a minimal equivalent list.

Declarations are decomposed into insertions into an `ImportNode` trie and the
finished trie is walked once, root first and children in sorted order, to
emit the output. At every node the walk gathers a candidate bundle of items
(the node itself, its renames, and its children's bare and renamed imports).
A bundle of at least `CombineOptions.min_list_len` items is emitted as one
`ListUse`; smaller bundles leave each import to be emitted on its own. A
wildcard at a node makes bare imports of its children redundant, but never
their renames.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from usetree.ast import SELF, GlobUse, Item, ListUse, Path, SimpleUse, UseDecl
from usetree.errors import UseTreeError
from usetree.tree import ImportNode

logger = logging.getLogger(__name__)

MIN_IMPORT_ITEM_LIST_LENGTH = 3


@dataclass(frozen=True)
class CombineOptions:
	min_list_len: int = MIN_IMPORT_ITEM_LIST_LENGTH

	def __post_init__(self) -> None:
		if not isinstance(self.min_list_len, int) or self.min_list_len < 1:
			raise UseTreeError(
				f"min_list_len must be a positive integer, got {self.min_list_len!r}",
				reason_code="invalid-option",
			)


class ImportCombiner:
	def __init__(self, options: Optional[CombineOptions] = None) -> None:
		self.options = options or CombineOptions()
		self._root = ImportNode()

	@property
	def root(self) -> ImportNode:
		return self._root

	def add_imports(self, decls: Iterable[UseDecl]) -> None:
		for decl in decls:
			self.add_import(decl)

	def add_import(self, decl: UseDecl) -> None:
		logger.debug("add_import %r", decl)
		if isinstance(decl, GlobUse):
			self._root.insert(decl.path, ImportNode.just_glob())
		elif isinstance(decl, SimpleUse):
			self._root.insert(decl.path, ImportNode.self_or_rename(decl.alias))
		elif isinstance(decl, ListUse):
			for item in decl.items:
				path = decl.path if item.is_self else decl.path + (item.name,)
				self._root.insert(path, ImportNode.self_or_rename(item.alias))
		else:
			raise TypeError(f"not a use declaration: {decl!r}")

	def import_list(self) -> List[UseDecl]:
		imports: List[UseDecl] = []
		self._emit(self._root, (), False, False, imports)
		logger.debug("import_list: %d declaration(s)", len(imports))
		return imports

	def _emit(
		self,
		node: ImportNode,
		path: Path,
		self_consumed: bool,
		renames_consumed: bool,
		imports: List[UseDecl],
	) -> None:
		child_selves_consumed = False
		child_renames_consumed = False
		need_self = node.has_self and not self_consumed

		bundle: List[Item] = []
		if need_self:
			bundle.append(Item(SELF))
		if not renames_consumed:
			bundle.extend(Item(SELF, alias) for alias in node.renames)
		for name, child in node.sorted_children():
			if child.has_self and not node.has_glob:
				bundle.append(Item(name))
			bundle.extend(Item(name, alias) for alias in child.renames)

		if len(bundle) >= self.options.min_list_len:
			imports.append(ListUse(path, bundle))
			child_selves_consumed = True
			child_renames_consumed = True
		else:
			if need_self:
				imports.append(SimpleUse(path))
			if not renames_consumed:
				imports.extend(SimpleUse(path, alias) for alias in node.renames)

		# Explicit bindings go before the catch-all.
		if node.has_glob:
			imports.append(GlobUse(path))
			child_selves_consumed = True

		for name, child in node.sorted_children():
			self._emit(child, path + (name,), child_selves_consumed, child_renames_consumed, imports)


def combine_imports(decls: Iterable[UseDecl], options: Optional[CombineOptions] = None) -> List[UseDecl]:
	combiner = ImportCombiner(options)
	combiner.add_imports(decls)
	return combiner.import_list()


__all__ = [
	"MIN_IMPORT_ITEM_LIST_LENGTH",
	"CombineOptions",
	"ImportCombiner",
	"combine_imports",
]
