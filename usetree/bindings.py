# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Decode declarations into the names they bind.

Two declaration lists are equivalent when they decode to the same binding
set, which is how combiner output is checked against its input.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Set, Tuple

from usetree.ast import GlobUse, ListUse, Path, SimpleUse, UseDecl

Binding = Tuple[Path, str]

GLOB_NAME = "*"


def _local_name(path: Path) -> str:
	return path[-1] if path else ""


def use_bindings(decls: Iterable[UseDecl]) -> FrozenSet[Binding]:
	"""
	Return `(target path, local name)` pairs bound by `decls`.

	A glob at `p` is reported as `(p, "*")` and absorbs every unaliased binding
	of a direct child of `p`. Aliased bindings are kept even under a glob.
	"""
	plain: Set[Path] = set()
	renamed: Set[Binding] = set()
	globs: Set[Path] = set()

	def bind(target: Path, alias: str | None) -> None:
		if alias is None:
			plain.add(target)
		else:
			renamed.add((target, alias))

	for decl in decls:
		if isinstance(decl, GlobUse):
			globs.add(decl.path)
		elif isinstance(decl, SimpleUse):
			bind(decl.path, decl.alias)
		elif isinstance(decl, ListUse):
			for item in decl.items:
				bind(decl.path if item.is_self else decl.path + (item.name,), item.alias)
		else:
			raise TypeError(f"not a use declaration: {decl!r}")

	result: Set[Binding] = {(path, GLOB_NAME) for path in globs}
	result.update(renamed)
	result.update((path, _local_name(path)) for path in plain if not (path and path[:-1] in globs))
	return frozenset(result)


__all__ = ["Binding", "GLOB_NAME", "use_bindings"]
