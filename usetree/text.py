# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
One-line convenience syntax for declarations, used by tests and light adapters
that have no real parser at hand.

  a::b::c            SimpleUse
  a::b::c as x       SimpleUse with alias
  a::b::*            GlobUse
  a::b::{self, c}    ListUse
  a::b::{self as x}  SimpleUse(("a", "b"), "x")

Parsing is lenient: the text is split on `::` first and only the last segment
is inspected, so nothing is ever rejected. A list entry that is not `name` or
`name as alias` becomes a single item named by its whole trimmed text.
For real source statements see `usetree.parser`.
"""

from __future__ import annotations

from usetree.ast import GlobUse, Item, ListUse, SimpleUse, UseDecl, as_path


def parse_item(text: str) -> Item:
	trimmed = text.strip()
	words = trimmed.split()
	if len(words) == 3 and words[1] == "as":
		return Item(words[0], words[2])
	return Item(trimmed)


def parse_use(text: str) -> UseDecl:
	path = as_path(text)
	base = path[:-1]
	last = path[-1]
	if len(path) > 1 and last == "*":
		return GlobUse(base)
	if last.startswith("{") and last.endswith("}"):
		items = [parse_item(part) for part in last[1:-1].split(",")]
		if len(items) == 1 and items[0].is_self:
			return SimpleUse(base, items[0].alias)
		return ListUse(base, items)
	item = parse_item(last)
	return SimpleUse(base + (item.name,), item.alias)


def format_item(item: Item) -> str:
	if item.alias is None:
		return item.name
	return f"{item.name} as {item.alias}"


def format_use(decl: UseDecl) -> str:
	"""Render a declaration in the syntax `parse_use` reads."""
	if isinstance(decl, SimpleUse):
		text = "::".join(decl.path)
		if decl.alias is not None:
			text += f" as {decl.alias}"
		return text
	if isinstance(decl, GlobUse):
		return "::".join(decl.path + ("*",))
	if isinstance(decl, ListUse):
		body = "{" + ", ".join(format_item(item) for item in decl.items) + "}"
		if not decl.path:
			return body
		return "::".join(decl.path) + "::" + body
	raise TypeError(f"not a use declaration: {decl!r}")


__all__ = ["parse_item", "parse_use", "format_item", "format_use"]
