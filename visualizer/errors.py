from __future__ import annotations

from typing import Optional

from .model import LoadKind


def classify_load_error(exc: BaseException) -> Optional[LoadKind]:
	"""Return the recoverable kind of a load failure, or None when it is fatal.

	Only a module that cannot be located is recoverable. Errors raised by
	the module body itself, ``FileNotFoundError`` from ``open()`` included,
	are fatal.
	"""
	if isinstance(exc, ModuleNotFoundError):
		return LoadKind.NOT_FOUND
	return None
