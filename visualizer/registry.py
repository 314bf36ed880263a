"""Model registry contract and a small declarative model framework.

``Project`` only relies on the protocols below. ``Model`` is a minimal
framework satisfying them: subclasses register themselves when their class
body is executed, so loading a file that declares models is enough to make
them discoverable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ModelLike(Protocol):
	def properties(self) -> Sequence[Any]: ...

	def relationships(self) -> Mapping[str, Any]: ...


@runtime_checkable
class RegistryLike(Protocol):
	def list_registered_models(self) -> Sequence[Any]: ...


class ModelRegistry:
	def __init__(self):
		self._models: List[type] = []

	def register(self, model: type) -> None:
		if model not in self._models:
			self._models.append(model)

	def list_registered_models(self) -> List[type]:
		return list(self._models)

	def clear(self) -> None:
		self._models.clear()

	def snapshot(self) -> List[type]:
		return list(self._models)

	def restore(self, models: Sequence[type]) -> None:
		self._models[:] = list(models)


DEFAULT_REGISTRY = ModelRegistry()


class Property:
	def __init__(self, type: Any = str, key: bool = False, required: bool = False, default: Any = None):
		self.type = type
		self.key = key
		self.required = required or key
		self.default = default
		self.name: Optional[str] = None
		self.model: Optional[type] = None

	def __set_name__(self, owner: type, name: str) -> None:
		self.name = name
		self.model = owner

	def __get__(self, instance: Any, owner: type) -> Any:
		if instance is None:
			return self
		return instance.__dict__.get(self.name, self.default)

	def __set__(self, instance: Any, value: Any) -> None:
		instance.__dict__[self.name] = value

	@property
	def type_name(self) -> str:
		return getattr(self.type, "__name__", str(self.type))

	def __repr__(self) -> str:
		return f"Property({self.name!r}, {self.type_name})"


class Relationship:
	def __init__(self, kind: str, name: str, target: str, source: Optional[type] = None):
		self.kind = kind
		self.name = name
		self.target = target
		self.source = source

	def __repr__(self) -> str:
		return f"Relationship({self.kind} {self.name!r} -> {self.target})"


def _target_name(target: Any) -> str:
	return target if isinstance(target, str) else target.__name__


class Model:
	"""Base class for declarative models.

	Properties are collected in declaration order, inherited ones first;
	a subclass redeclaring a name replaces it in place. Relationships are
	keyed by name and redeclaring a name replaces the earlier one. They are
	resolved through the MRO on each call, so relationships declared on a
	parent after a subclass exists still reach the subclass.
	"""

	__registry__: ModelRegistry = DEFAULT_REGISTRY
	__abstract__ = True

	_properties: Dict[str, Property] = {}
	_own_relationships: Dict[str, Relationship] = {}

	def __init_subclass__(cls, **kwargs: Any) -> None:
		super().__init_subclass__(**kwargs)
		props: Dict[str, Property] = {}
		for base in reversed(cls.__mro__[1:]):
			props.update(base.__dict__.get("_properties", {}))
		for name, value in cls.__dict__.items():
			if isinstance(value, Property):
				props[name] = value
		cls._properties = props
		cls._own_relationships = {}
		if not cls.__dict__.get("__abstract__", False):
			cls.__registry__.register(cls)

	def __init__(self, **values: Any):
		for name, value in values.items():
			if name not in self._properties:
				raise TypeError(f"{type(self).__name__} has no property {name!r}")
			setattr(self, name, value)

	@classmethod
	def properties(cls) -> List[Property]:
		return list(cls._properties.values())

	@classmethod
	def relationships(cls) -> Dict[str, Relationship]:
		rels: Dict[str, Relationship] = {}
		for base in reversed(cls.__mro__):
			rels.update(base.__dict__.get("_own_relationships", {}))
		return rels

	@classmethod
	def _relate(cls, kind: str, name: str, target: Any) -> Relationship:
		rel = Relationship(kind, name, _target_name(target), source=cls)
		cls._own_relationships[name] = rel
		return rel

	@classmethod
	def has_many(cls, name: str, target: Any) -> Relationship:
		return cls._relate("has_many", name, target)

	@classmethod
	def has_one(cls, name: str, target: Any) -> Relationship:
		return cls._relate("has_one", name, target)

	@classmethod
	def belongs_to(cls, name: str, target: Any) -> Relationship:
		return cls._relate("belongs_to", name, target)
