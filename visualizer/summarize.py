from __future__ import annotations

from typing import Any, Dict, List

from .model import (
	LoadProjectResult,
	ModelFacts,
	ProjectFacts,
	PropertyFacts,
	RelationshipFacts,
	Summaries,
)
from .project import Project


def _property_facts(prop: Any) -> PropertyFacts:
	type_name = getattr(prop, "type_name", None)
	if type_name is None:
		type_name = getattr(getattr(prop, "type", None), "__name__", "unknown")
	return PropertyFacts(
		name=str(getattr(prop, "name", prop)),
		type=type_name,
		key=bool(getattr(prop, "key", False)),
		required=bool(getattr(prop, "required", False)),
	)


def _relationship_facts(name: str, rel: Any) -> RelationshipFacts:
	return RelationshipFacts(
		name=str(getattr(rel, "name", name)),
		kind=str(getattr(rel, "kind", "relationship")),
		target=str(getattr(rel, "target", "unknown")),
	)


def collect_facts(project: Project) -> ProjectFacts:
	models: List[ModelFacts] = []
	for model in project.each_model():
		models.append(
			ModelFacts(
				name=getattr(model, "__name__", str(model)),
				module=getattr(model, "__module__", None),
				properties=[_property_facts(p) for p in model.properties()],
				relationships=[
					_relationship_facts(name, rel) for name, rel in model.relationships().items()
				],
			)
		)
	return ProjectFacts(
		include_dirs=sorted(project.include_dirs),
		require_globs=sorted(project.require_globs),
		models=models,
	)


def summarize_model(m: ModelFacts) -> str:
	parts: List[str] = []
	parts.append(f"Model {m.name}" + (f" in {m.module}" if m.module else ""))
	if m.properties:
		keys = [p.name for p in m.properties if p.key]
		parts.append(f"  Properties: {', '.join(f'{p.name}:{p.type}' for p in m.properties)}")
		if keys:
			parts.append(f"  Key: {', '.join(keys)}")
	if m.relationships:
		parts.append(
			f"  Relationships: {', '.join(f'{r.kind} {r.name} -> {r.target}' for r in m.relationships)}"
		)
	return "\n".join(parts)


def summarize_project(facts: ProjectFacts) -> Summaries:
	per_model: Dict[str, str] = {}
	for m in facts.models:
		per_model[m.name] = summarize_model(m)

	prop_count = sum(len(m.properties) for m in facts.models)
	rel_count = sum(len(m.relationships) for m in facts.models)
	global_overview = (
		f"Project with {len(facts.include_dirs)} include dirs and {len(facts.require_globs)} globs: "
		f"{len(facts.models)} models, {prop_count} properties, {rel_count} relationships"
	)

	return Summaries(global_overview=global_overview, per_model=per_model)


def load_and_summarize(project: Project) -> LoadProjectResult:
	report = project.load_files()
	facts = collect_facts(project)
	return LoadProjectResult(facts=facts, summaries=summarize_project(facts), report=report)
