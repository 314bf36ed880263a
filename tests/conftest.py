import sys
from textwrap import dedent

import pytest

from visualizer.loader import FileLoader
from visualizer.registry import DEFAULT_REGISTRY


@pytest.fixture(autouse=True)
def clean_process_state(tmp_path_factory):
	path_before = list(sys.path)
	basetemp = str(tmp_path_factory.getbasetemp())
	models_before = DEFAULT_REGISTRY.snapshot()
	loaded_before = set(FileLoader.process().loaded)
	yield
	FileLoader.process().loaded = loaded_before
	sys.path[:] = path_before
	for name, module in list(sys.modules.items()):
		if (getattr(module, "__file__", None) or "").startswith(basetemp):
			del sys.modules[name]
	DEFAULT_REGISTRY.restore(models_before)


@pytest.fixture
def write_file():
	def _write(path, code):
		path.parent.mkdir(parents=True, exist_ok=True)
		path.write_text(dedent(code))
		return path

	return _write


@pytest.fixture
def model_project(tmp_path, write_file):
	lib = tmp_path / "lib"
	write_file(
		lib / "models" / "user.py",
		"""
		from visualizer.registry import Model, Property

		class User(Model):
			id = Property(int, key=True)
			name = Property(str)
			email = Property(str, required=True)

		User.has_many("posts", "Post")
		""",
	)
	write_file(
		lib / "models" / "post.py",
		"""
		from visualizer.registry import Model, Property

		class Post(Model):
			id = Property(int, key=True)
			title = Property(str)

		Post.belongs_to("author", "User")
		""",
	)
	write_file(
		lib / "models" / "broken.py",
		"""
		import dm_visualizer_missing_dependency
		""",
	)
	return lib
