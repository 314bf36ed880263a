import sys

import pytest

from visualizer.search_path import PURGE, REFCOUNT, SearchPath


def test_acquire_prepends():
	sp = SearchPath(["/a"])
	sp.acquire("/b")
	assert list(sp) == ["/b", "/a"]


def test_purge_removes_every_occurrence():
	sp = SearchPath(["/x", "/lib", "/y", "/lib"])
	sp.acquire("/lib")
	sp.release("/lib")
	assert list(sp) == ["/x", "/y"]


def test_purge_keeps_wrapped_list_identity():
	entries = ["/lib", "/other"]
	sp = SearchPath(entries)
	sp.release("/lib")
	assert entries == ["/other"]
	assert sp.entries is entries


def test_refcount_removes_on_last_release():
	sp = SearchPath([], mode=REFCOUNT)
	sp.acquire("/lib")
	sp.acquire("/lib")
	assert list(sp) == ["/lib"]
	sp.release("/lib")
	assert "/lib" in sp
	sp.release("/lib")
	assert "/lib" not in sp


def test_refcount_leaves_foreign_entries():
	sp = SearchPath(["/lib"], mode=REFCOUNT)
	sp.release("/lib")
	assert list(sp) == ["/lib"]


def test_unknown_mode_rejected():
	with pytest.raises(ValueError):
		SearchPath([], mode="bogus")


def test_process_search_path_wraps_sys_path():
	sp = SearchPath.process()
	assert sp.entries is sys.path
	assert sp.mode == PURGE
	assert SearchPath.process() is sp
