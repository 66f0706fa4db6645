# -*- coding: utf-8 -*-
"""
    emmett_fastxml.schema
    ---------------------

    Provides the per-type interface queried by the serializer to read
    columns, values and associations of records, and the registry
    resolving record types to their schemas.

    :copyright: 2014 Giovanni Barillari
    :license: BSD-3-Clause
"""

from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple


class Association(NamedTuple):
    name: str
    target: Optional[type]
    many: bool


class RecordSchema(object):
    def __init__(self, model: type):
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__name__

    def columns(self) -> List[Tuple[str, str]]:
        return []

    def methods(self) -> List[Any]:
        return list(getattr(self.model, "xml_methods", None) or [])

    def value(self, instance: Any, name: str) -> Any:
        return getattr(instance, name, None)

    def raw_value(self, instance: Any, name: str) -> Any:
        return self.value(instance, name)

    def method_value(self, instance: Any, name: str) -> Any:
        rv = getattr(instance, name, None)
        if callable(rv):
            rv = rv()
        return rv

    def association(self, name: str) -> Optional[Association]:
        return None

    def associated(self, instance: Any, association: Association) -> Any:
        return getattr(instance, association.name, None)


class ObjectSchema(RecordSchema):
    """Declares columns and associations for plain python classes.

    Columns are given as ``(name, kind)`` pairs, associations as mappings
    of the association name to the target class::

        register_schema(
            Post,
            columns=[('id', 'integer'), ('title', 'string')],
            has_one={'author': User},
            has_many={'comments': Comment}
        )
    """

    def __init__(
        self,
        model: type,
        columns: Optional[List[Tuple[str, str]]] = None,
        methods: Optional[List[Any]] = None,
        has_one: Optional[Dict[str, Optional[type]]] = None,
        has_many: Optional[Dict[str, Optional[type]]] = None
    ):
        super().__init__(model)
        self._columns = list(columns or [])
        self._methods = methods
        self._associations = {}
        for name, target in (has_one or {}).items():
            self._associations[name] = Association(name, target, False)
        for name, target in (has_many or {}).items():
            self._associations[name] = Association(name, target, True)

    def columns(self):
        return list(self._columns)

    def methods(self):
        if self._methods is None:
            return super().methods()
        return list(self._methods)

    def association(self, name):
        return self._associations.get(name)


class Schemas(object):
    _registry_: Dict[type, RecordSchema] = {}
    _factories_: List[Tuple[Callable[[type], bool], Callable[[type], RecordSchema]]] = []
    _resolvers_: List[Callable[[Any], Optional[type]]] = []

    @classmethod
    def register(cls, model: type, schema: Optional[RecordSchema] = None, **kwargs) -> RecordSchema:
        if schema is None:
            schema = ObjectSchema(model, **kwargs)
        cls._registry_[model] = schema
        return schema

    @classmethod
    def factory_for(cls, check: Callable[[type], bool]):
        def wrap(f):
            cls._factories_.append((check, f))
            return f
        return wrap

    @classmethod
    def resolver(cls, f):
        cls._resolvers_.append(f)
        return f

    @classmethod
    def get_for(cls, model: type) -> RecordSchema:
        rv = cls._registry_.get(model)
        if rv is not None:
            return rv
        for check, factory in cls._factories_:
            if check(model):
                rv = cls._registry_[model] = factory(model)
                return rv
        return ObjectSchema(model)

    @classmethod
    def model_of(cls, instance: Any) -> type:
        for resolver in cls._resolvers_:
            rv = resolver(instance)
            if rv is not None:
                return rv
        return type(instance)


register_schema = Schemas.register
schema_for = Schemas.get_for
model_of = Schemas.model_of
