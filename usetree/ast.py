# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Value types for `use` declarations.

A declaration is one of three shapes over a path:

  a::b::c as x      SimpleUse(("a", "b", "c"), "x")
  a::b::*           GlobUse(("a", "b"))
  a::b::{self, c}   ListUse(("a", "b"), (Item("self"), Item("c")))

Paths are tuples of segments. A leading empty segment marks a root-relative
path (`::a::b`). Nothing here checks that a path names a real module.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

Path = Tuple[str, ...]

SELF = "self"


def as_path(text: str) -> Path:
	return tuple(text.split("::"))


@dataclass(frozen=True)
class Located:
	line: int
	column: int


@dataclass(frozen=True)
class Item:
	"""One entry of a `{...}` list; `self` names the list's own path."""

	name: str
	alias: Optional[str] = None

	@property
	def is_self(self) -> bool:
		return self.name == SELF


def _freeze(obj: object, attr: str, value: Sequence) -> None:
	# Callers may hand in lists; store tuples so declarations stay hashable.
	if not isinstance(value, tuple):
		object.__setattr__(obj, attr, tuple(value))


@dataclass(frozen=True)
class SimpleUse:
	path: Path
	alias: Optional[str] = None
	loc: Optional[Located] = field(default=None, compare=False, repr=False)

	def __post_init__(self) -> None:
		_freeze(self, "path", self.path)


@dataclass(frozen=True)
class GlobUse:
	path: Path
	loc: Optional[Located] = field(default=None, compare=False, repr=False)

	def __post_init__(self) -> None:
		_freeze(self, "path", self.path)


@dataclass(frozen=True)
class ListUse:
	path: Path
	items: Tuple[Item, ...]
	loc: Optional[Located] = field(default=None, compare=False, repr=False)

	def __post_init__(self) -> None:
		_freeze(self, "path", self.path)
		_freeze(self, "items", self.items)


UseDecl = Union[SimpleUse, GlobUse, ListUse]


__all__ = [
	"Path",
	"SELF",
	"as_path",
	"Located",
	"Item",
	"SimpleUse",
	"GlobUse",
	"ListUse",
	"UseDecl",
]
