from __future__ import annotations

import importlib.util
import itertools
import logging
import os
import sys
from typing import Optional, Set

from .errors import classify_load_error
from .fs_scan import to_module_name
from .model import LoadKind, LoadResult
from .search_path import SearchPath

logger = logging.getLogger(__name__)

SHADOW_PREFIX = "_dm_visualizer_loaded"


def _same_file(module: object, path: str) -> bool:
	module_file = getattr(module, "__file__", None)
	return bool(module_file) and os.path.abspath(module_file) == path


class FileLoader:
	"""Loads source files by path relative to the search path, once each.

	A file is executed as a module named after its relative path
	(``models/user.py`` becomes ``models.user``) and registered in
	``sys.modules``. When that name already belongs to another file, such as
	a project file called ``json.py``, the file is registered under a
	private ``_dm_visualizer_loaded<N>.`` name instead. Files that raise are
	not marked as loaded.

	The process-wide instance is shared by every project using the
	process-wide search path, so a file is executed once per process.
	"""

	_process: Optional["FileLoader"] = None

	def __init__(self, search_path: Optional[SearchPath] = None):
		self.search_path = search_path if search_path is not None else SearchPath.process()
		self.loaded: Set[str] = set()
		self._shadow_ids = itertools.count(1)

	@classmethod
	def process(cls) -> "FileLoader":
		if cls._process is None:
			cls._process = cls(SearchPath.process())
		return cls._process

	def locate(self, relative_path: str) -> Optional[str]:
		for directory in self.search_path:
			candidate = os.path.join(directory, relative_path)
			if os.path.isfile(candidate):
				return os.path.abspath(candidate)
		return None

	def module_name_for(self, relative_path: str, path: str) -> str:
		name = to_module_name(relative_path)
		existing = sys.modules.get(name)
		if existing is None or _same_file(existing, path):
			return name
		return f"{SHADOW_PREFIX}{next(self._shadow_ids)}.{name}"

	def require(self, relative_path: str) -> LoadResult:
		path = self.locate(relative_path)
		if path is None:
			return LoadResult(
				relative_path=relative_path,
				kind=LoadKind.NOT_FOUND,
				message=f"cannot load such file -- {relative_path}",
			)
		if path in self.loaded:
			return LoadResult(relative_path=relative_path, kind=LoadKind.ALREADY_LOADED, path=path)

		try:
			self._execute(self.module_name_for(relative_path, path), path)
		except Exception as e:
			kind = classify_load_error(e)
			if kind is None:
				raise
			return LoadResult(relative_path=relative_path, kind=kind, path=path, message=str(e))

		self.loaded.add(path)
		logger.debug("loaded %s from %s", relative_path, path)
		return LoadResult(relative_path=relative_path, kind=LoadKind.LOADED, path=path)

	def _execute(self, module_name: str, path: str) -> None:
		spec = importlib.util.spec_from_file_location(module_name, path)
		if spec is None or spec.loader is None:
			raise ImportError(f"Unsupported source file: {path}", path=path)
		module = importlib.util.module_from_spec(spec)
		previous = sys.modules.get(module_name)
		sys.modules[module_name] = module
		try:
			spec.loader.exec_module(module)
		except BaseException:
			if previous is not None:
				sys.modules[module_name] = previous
			else:
				sys.modules.pop(module_name, None)
			raise
