from __future__ import annotations

import logging
import sys
from typing import Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)

PURGE = "purge"
REFCOUNT = "refcount"


class SearchPath:
	"""The ordered list of directories consulted when loading a file by name.

	The process-wide instance wraps ``sys.path`` itself, so directories put
	here are also visible to ordinary ``import`` statements inside loaded
	files. It is created on first use and never reset.

	Two removal modes are available:

	- ``purge`` (default): ``release`` removes every occurrence of a
	  directory, no matter who added it. Two projects sharing a directory
	  therefore interfere: deactivating one takes the directory away from
	  the other.
	- ``refcount``: each ``acquire`` takes a reference. A directory is
	  inserted on its first reference and one occurrence is removed on its
	  last release. Entries this object did not insert are left alone.

	No locking; single-threaded use only.
	"""

	_process: Optional["SearchPath"] = None

	def __init__(self, entries: Optional[List[str]] = None, mode: str = PURGE):
		if mode not in (PURGE, REFCOUNT):
			raise ValueError(f"Unknown search path mode: {mode!r}")
		self.entries: List[str] = entries if entries is not None else []
		self.mode = mode
		self._refs: Dict[str, int] = {}

	@classmethod
	def process(cls) -> "SearchPath":
		if cls._process is None:
			cls._process = cls(sys.path)
		return cls._process

	def __iter__(self) -> Iterator[str]:
		return iter(list(self.entries))

	def __contains__(self, directory: object) -> bool:
		return directory in self.entries

	def __len__(self) -> int:
		return len(self.entries)

	def acquire(self, directory: str) -> None:
		if self.mode == REFCOUNT:
			count = self._refs.get(directory, 0) + 1
			self._refs[directory] = count
			if count > 1:
				return
		self.entries.insert(0, directory)
		logger.debug("search path: prepended %s", directory)

	def release(self, directory: str) -> None:
		if self.mode == REFCOUNT:
			count = self._refs.get(directory, 0)
			if count == 0:
				return
			if count > 1:
				self._refs[directory] = count - 1
				return
			del self._refs[directory]
			if directory in self.entries:
				self.entries.remove(directory)
				logger.debug("search path: removed %s", directory)
			return

		# Slice assignment keeps the identity of a wrapped sys.path.
		before = len(self.entries)
		self.entries[:] = [d for d in self.entries if d != directory]
		if len(self.entries) != before:
			logger.debug("search path: purged %s", directory)
