# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Reader for `use` statements in source text.

This is the upstream producer the combiner expects: it turns statements such
as `use a::{b, c::*};` into flat SimpleUse/GlobUse/ListUse declarations.
Grammar errors surface as lark's `UnexpectedInput`.
"""

from usetree.parser.parser import parse_uses

__all__ = ["parse_uses"]
