from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Mapping, Optional, TextIO, Tuple, Union

from .fs_scan import resolve_glob, to_relative_path
from .loader import FileLoader
from .model import LoadKind, LoadReport, LoadResult, ProjectConfig
from .registry import DEFAULT_REGISTRY, RegistryLike
from .search_path import SearchPath

logger = logging.getLogger(__name__)

TOOL_TAG = "dm-visualizer"

ConfigInput = Union[ProjectConfig, Mapping[str, Any], None]


def _coerce_config(config: ConfigInput) -> ProjectConfig:
	if config is None:
		return ProjectConfig()
	if isinstance(config, ProjectConfig):
		return config
	return ProjectConfig.model_validate(dict(config))


class Project:
	"""The directories and path globs to load for a model project.

	Configure once, ``load()`` to execute the matching files, then
	enumerate whatever the files registered with the model registry.

	The search path, the file loader and the registry are process-wide by
	default and are not locked. Iteration over ``include_dirs`` and ``require_globs``
	follows set order, which is unspecified.
	"""

	def __init__(
		self,
		config: ConfigInput = None,
		*,
		search_path: Optional[SearchPath] = None,
		registry: Optional[RegistryLike] = None,
		loader: Optional[FileLoader] = None,
		stderr: Optional[TextIO] = None,
	):
		cfg = _coerce_config(config)
		self.include_dirs = frozenset(cfg.include)
		self.require_globs = frozenset(cfg.require)
		self.search_path = search_path if search_path is not None else SearchPath.process()
		self.registry = registry if registry is not None else DEFAULT_REGISTRY
		if loader is None:
			loader = FileLoader.process() if search_path is None else FileLoader(self.search_path)
		self.loader = loader
		self._stderr = stderr

	@classmethod
	def load_project(
		cls,
		config: ConfigInput = None,
		callback: Optional[Callable[["Project"], Any]] = None,
		**kwargs: Any,
	) -> "Project":
		"""Create a project, load its files and pass it to ``callback``."""
		project = cls(config, **kwargs)
		project.load()
		if callback is not None:
			callback(project)
		return project

	@property
	def stderr(self) -> TextIO:
		return self._stderr if self._stderr is not None else sys.stderr

	def activate(self) -> bool:
		"""Prepend every existing include directory to the search path."""
		for directory in self.include_dirs:
			if os.path.isdir(directory):
				self.search_path.acquire(directory)
		return True

	def deactivate(self) -> bool:
		"""Remove the include directories from the search path.

		In the default ``purge`` mode this removes every occurrence of each
		directory, including ones added by other projects.
		"""
		for directory in self.include_dirs:
			self.search_path.release(directory)
		return True

	@contextmanager
	def activated(self) -> Iterator["Project"]:
		self.activate()
		try:
			yield self
		finally:
			self.deactivate()

	def load(self) -> bool:
		"""Attempt to load all of the project's files."""
		self.load_files()
		return True

	def load_files(self) -> LoadReport:
		"""Load every file matched by every glob in every include directory.

		Files that cannot be found are reported on stderr and skipped. Any
		other error propagates; the search path is cleaned up either way.
		"""
		report = LoadReport()
		with self.activated():
			for pattern in self.require_globs:
				for directory in self.include_dirs:
					for path in resolve_glob(directory, pattern):
						relative_path = to_relative_path(directory, path)
						result = self.loader.require(relative_path)
						result.directory = directory
						if result.kind is LoadKind.NOT_FOUND:
							self._report_failure(result)
						report.results.append(result)
		logger.debug(
			"loaded %d file(s), %d failure(s)", len(report.loaded), len(report.failures)
		)
		return report

	def _report_failure(self, result: LoadResult) -> None:
		print(
			f"{TOOL_TAG}: unable to load {result.relative_path} from {result.directory}",
			file=self.stderr,
		)
		print(f"{TOOL_TAG}: {result.message}", file=self.stderr)

	def each_model(self) -> Iterator[Any]:
		yield from self.registry.list_registered_models()

	def each_property(self) -> Iterator[Tuple[Any, Any]]:
		for model in self.each_model():
			for prop in model.properties():
				yield prop, model

	def each_relationship(self) -> Iterator[Tuple[Any, Any]]:
		for model in self.each_model():
			for relationship in model.relationships().values():
				yield relationship, model
