# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
usetree: merge `use` declarations into a minimal equivalent set.

Modules:
  ast: Path/Item values and the SimpleUse/GlobUse/ListUse declarations
  text: one-line convenience syntax (`a::b::{c, d as e}`) and its renderer
  tree: ImportNode, the per-prefix trie that accumulates declarations
  combiner: ImportCombiner and `combine_imports`
  bindings: decode declarations into the local names they bind
  parser: lark-based reader for `use ...;` source statements
"""

from usetree.ast import GlobUse, Item, ListUse, SimpleUse, UseDecl, as_path
from usetree.combiner import CombineOptions, ImportCombiner, combine_imports

__all__ = [
	"GlobUse",
	"Item",
	"ListUse",
	"SimpleUse",
	"UseDecl",
	"as_path",
	"CombineOptions",
	"ImportCombiner",
	"combine_imports",
]
