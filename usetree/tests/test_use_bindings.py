# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from usetree.ast import GlobUse, SimpleUse
from usetree.bindings import use_bindings
from usetree.text import parse_use


def _bindings(*texts: str):
	return use_bindings(parse_use(text) for text in texts)


def test_simple_binds_last_segment_or_alias() -> None:
	assert _bindings("a::b", "a::c as d") == {(("a", "b"), "b"), (("a", "c"), "d")}


def test_list_items_bind_relative_to_base() -> None:
	assert _bindings("a::b::{self as x, c, self}") == {
		(("a", "b"), "x"),
		(("a", "b", "c"), "c"),
		(("a", "b"), "b"),
	}


def test_glob_absorbs_unaliased_children() -> None:
	assert _bindings("a::b::c", "a::b::*") == _bindings("a::b::*")
	assert _bindings("a::b::*") == {(("a", "b"), "*")}


def test_glob_keeps_aliased_children() -> None:
	assert _bindings("a::b::c as x", "a::b::*") == {(("a", "b"), "*"), (("a", "b", "c"), "x")}


def test_glob_does_not_absorb_its_own_path_or_grandchildren() -> None:
	assert _bindings("a::b", "a::b::c::d", "a::b::*") == {
		(("a", "b"), "b"),
		(("a", "b", "c", "d"), "d"),
		(("a", "b"), "*"),
	}


def test_empty_path_binds_empty_name() -> None:
	assert use_bindings([SimpleUse(()), GlobUse(())]) == {((), ""), ((), "*")}


def test_rejects_other_values() -> None:
	with pytest.raises(TypeError):
		use_bindings(["a::b"])  # type: ignore[list-item]
