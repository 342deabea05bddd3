# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import logging
from pathlib import Path as FsPath
from typing import List

from lark import Lark, Token, Tree

from usetree.ast import GlobUse, Item, ListUse, Located, Path, SimpleUse, UseDecl
from usetree.errors import UseSyntaxError

logger = logging.getLogger(__name__)

_GRAMMAR_PATH = FsPath(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	propagate_positions=True,
	maybe_placeholders=False,
)

# Group members that become items of the group's own ListUse.
_LEAF_KINDS = ("plain", "renamed")


def parse_uses(source: str) -> List[UseDecl]:
	"""
	Parse `use` statements and flatten each into declarations.

	`use a::{self, b as c, d::*};` yields
	`[ListUse(("a",), [Item("self"), Item("b", "c")]), GlobUse(("a", "d"))]`.
	"""
	tree = _PARSER.parse(source)
	decls: List[UseDecl] = []
	for child in tree.children:
		if isinstance(child, Tree) and _name(child) == "use_decl":
			decls.extend(_build_use_decl(child))
	logger.debug("parse_uses: %d statement(s), %d declaration(s)", len(tree.children), len(decls))
	return decls


def _build_use_decl(tree: Tree) -> List[UseDecl]:
	loc = _loc(tree)
	prefix: Path = ()
	body = tree.children[-1]
	if any(isinstance(child, Tree) and _name(child) == "root" for child in tree.children):
		prefix = ("",)
	decls: List[UseDecl] = []
	_flatten(body, prefix, decls, loc)
	return decls


def _flatten(body: Tree, prefix: Path, decls: List[UseDecl], loc: Located) -> None:
	kind = _name(body)
	if kind == "nested":
		name_tok, inner = body.children
		_flatten(inner, prefix + (name_tok.value,), decls, loc)
	elif kind in _LEAF_KINDS:
		item = _build_item(body)
		if item.is_self:
			raise UseSyntaxError(
				"`self` can only be imported from inside a `{...}` group",
				reason_code="self-outside-group",
				loc=loc,
			)
		decls.append(SimpleUse(prefix + (item.name,), item.alias, loc=loc))
	elif kind == "glob":
		decls.append(GlobUse(prefix, loc=loc))
	elif kind == "group":
		_flatten_group(body, prefix, decls, loc)
	else:
		raise AssertionError(f"unexpected use tree node {kind!r}")


def _flatten_group(body: Tree, prefix: Path, decls: List[UseDecl], loc: Located) -> None:
	members = [child for child in body.children if isinstance(child, Tree)]
	items = [_build_item(member) for member in members if _name(member) in _LEAF_KINDS]
	if len(items) == 1 and items[0].is_self:
		decls.append(SimpleUse(prefix, items[0].alias, loc=loc))
	elif items:
		decls.append(ListUse(prefix, items, loc=loc))
	for member in members:
		if _name(member) not in _LEAF_KINDS:
			_flatten(member, prefix, decls, loc)


def _build_item(body: Tree) -> Item:
	names = [tok.value for tok in body.children if isinstance(tok, Token) and tok.type == "NAME"]
	if _name(body) == "renamed":
		return Item(names[0], names[1])
	return Item(names[0])


def _loc(tree: Tree) -> Located:
	meta = tree.meta
	return Located(line=meta.line, column=meta.column)


def _name(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	if isinstance(node, Token):
		return node.type
	return str(node)


__all__ = ["parse_uses"]
