from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel


class ProjectConfig(BaseModel):
	include: List[str] = []
	require: List[str] = []


class LoadKind(str, Enum):
	LOADED = "loaded"
	ALREADY_LOADED = "already_loaded"
	NOT_FOUND = "not_found"


class LoadResult(BaseModel):
	relative_path: str
	kind: LoadKind
	directory: Optional[str] = None
	path: Optional[str] = None
	message: Optional[str] = None

	@property
	def ok(self) -> bool:
		return self.kind is not LoadKind.NOT_FOUND


class LoadReport(BaseModel):
	results: List[LoadResult] = []

	@property
	def loaded(self) -> List[LoadResult]:
		return [r for r in self.results if r.kind is LoadKind.LOADED]

	@property
	def failures(self) -> List[LoadResult]:
		return [r for r in self.results if not r.ok]


class PropertyFacts(BaseModel):
	name: str
	type: str
	key: bool = False
	required: bool = False


class RelationshipFacts(BaseModel):
	name: str
	kind: str
	target: str


class ModelFacts(BaseModel):
	name: str
	module: Optional[str] = None
	properties: List[PropertyFacts] = []
	relationships: List[RelationshipFacts] = []


class ProjectFacts(BaseModel):
	include_dirs: List[str]
	require_globs: List[str]
	models: List[ModelFacts] = []


class Summaries(BaseModel):
	global_overview: str
	per_model: Dict[str, str]


class LoadProjectResult(BaseModel):
	facts: ProjectFacts
	summaries: Summaries
	report: LoadReport
