from __future__ import annotations

import glob
import os
from typing import List


def resolve_glob(directory: str, pattern: str) -> List[str]:
	"""Expand ``pattern`` inside ``directory``; ``**`` matches across directories."""
	return sorted(glob.glob(os.path.join(directory, pattern), recursive=True))


def to_relative_path(directory: str, path: str) -> str:
	prefix = directory.rstrip(os.sep) + os.sep
	if path.startswith(prefix):
		return path[len(prefix):]
	return os.path.relpath(path, directory)


def to_module_name(relative_path: str) -> str:
	without_ext = os.path.splitext(relative_path)[0]
	parts = []
	for part in without_ext.split(os.sep):
		if part == "__init__":
			continue
		parts.append(part)
	return ".".join(parts).replace("-", "_")
