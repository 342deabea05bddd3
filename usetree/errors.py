# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from usetree.ast import Located


class UseTreeError(ValueError):
	"""
	User-facing error for bad combiner options or unusable `use` source.

	Merging itself never fails; this is only raised at the edges (option
	validation and the source parser).
	"""

	def __init__(self, message: str, *, reason_code: str, loc: Located | None = None) -> None:
		super().__init__(message)
		self.message = message
		self.reason_code = reason_code
		self.loc = loc

	def __str__(self) -> str:
		return self.format_human()

	def format_human(self) -> str:
		text = f"[{self.reason_code}] {self.message}"
		if self.loc is not None:
			text += f" ({self.loc.line}:{self.loc.column})"
		return text


class UseSyntaxError(UseTreeError):
	"""
	A `use` statement that the grammar accepts but that binds nothing sensible,
	e.g. `use a::b::self;`.
	"""


__all__ = ["UseTreeError", "UseSyntaxError"]
