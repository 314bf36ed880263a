"""Project loader for discovering model metadata registered by source files.

Modules:
- project.py: The Project class (configure, load, enumerate).
- search_path.py: Process-wide module-search path state.
- loader.py: Require-by-relative-path through the search path.
- errors.py: Classification of recoverable load failures.
- registry.py: Model registry contract and a declarative model base.
- fs_scan.py: Glob resolution inside include directories.
- model.py: Data structures for configuration, load results and facts.
- summarize.py: Deterministic textual summarization of model facts.
"""

from .project import Project
from .search_path import SearchPath
from .model import ProjectConfig

__all__ = [
	"Project",
	"ProjectConfig",
	"SearchPath",
	"errors",
	"fs_scan",
	"loader",
	"model",
	"project",
	"registry",
	"search_path",
	"summarize",
]
