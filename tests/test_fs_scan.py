import os

from visualizer.fs_scan import resolve_glob, to_module_name, to_relative_path


def test_resolve_glob_recursive(tmp_path):
	(tmp_path / "models" / "nested").mkdir(parents=True)
	(tmp_path / "top.py").write_text("")
	(tmp_path / "models" / "user.py").write_text("")
	(tmp_path / "models" / "nested" / "deep.py").write_text("")
	(tmp_path / "models" / "notes.txt").write_text("")

	matches = resolve_glob(str(tmp_path), "**/*.py")
	rel = sorted(to_relative_path(str(tmp_path), m) for m in matches)
	assert rel == sorted(
		["top.py", os.path.join("models", "nested", "deep.py"), os.path.join("models", "user.py")]
	)


def test_resolve_glob_character_class(tmp_path):
	for name in ("a1.py", "a2.py", "b1.py"):
		(tmp_path / name).write_text("")
	matches = resolve_glob(str(tmp_path), "[a]?.py")
	assert [os.path.basename(m) for m in matches] == ["a1.py", "a2.py"]


def test_resolve_glob_missing_directory(tmp_path):
	assert resolve_glob(str(tmp_path / "nope"), "*.py") == []


def test_to_relative_path_strips_prefix():
	assert to_relative_path("/proj/lib", "/proj/lib/models/user.py") == os.path.join("models", "user.py")
	assert to_relative_path("/proj/lib/", "/proj/lib/models/user.py") == os.path.join("models", "user.py")


def test_to_module_name():
	assert to_module_name(os.path.join("models", "user.py")) == "models.user"
	assert to_module_name(os.path.join("models", "__init__.py")) == "models"
	assert to_module_name("my-model.py") == "my_model"
