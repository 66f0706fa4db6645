# -*- coding: utf-8 -*-
"""
    emmett_fastxml.descriptors
    --------------------------

    Provides the resolution of serializable fields for record types.

    :copyright: 2014 Giovanni Barillari
    :license: BSD-3-Clause
"""

from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from .helpers import dasherize, element_name, pluralize
from .schema import schema_for


class FieldDescriptor(NamedTuple):
    name: str
    xml_name: str
    kind: str

    @classmethod
    def build(cls, spec: Any) -> "FieldDescriptor":
        if isinstance(spec, cls):
            return spec
        if isinstance(spec, str):
            return cls(spec, dasherize(spec), "string")
        name, xml_name, kind = spec
        return cls(name, xml_name or dasherize(name), kind)


class DescriptorResolver(object):
    """Computes and caches, per record type, the ordered lists of column
    and method descriptors together with the element names used for the
    type's records and collections.

    The caches are populated at first lookup and never invalidated:
    concurrent first lookups may compute the same values twice, which is
    harmless since the computation has no side effects.
    """

    def __init__(self):
        self._fields: Dict[type, List[FieldDescriptor]] = {}
        self._methods: Dict[type, List[FieldDescriptor]] = {}
        self._names: Dict[type, str] = {}

    def fields_for(self, model: Optional[type]) -> List[FieldDescriptor]:
        if model is None:
            return []
        rv = self._fields.get(model)
        if rv is None:
            rv = self._fields[model] = [
                FieldDescriptor(name, dasherize(name), kind)
                for name, kind in schema_for(model).columns()
            ]
        return rv

    def methods_for(self, model: Optional[type]) -> List[FieldDescriptor]:
        if model is None:
            return []
        rv = self._methods.get(model)
        if rv is None:
            rv = self._methods[model] = [
                FieldDescriptor.build(spec)
                for spec in schema_for(model).methods()
            ]
        return rv

    def register_methods(self, model: type, methods: Iterable[Any]):
        self._methods[model] = [FieldDescriptor.build(spec) for spec in methods]

    def only_fields(self, model: Optional[type], only: Iterable[str]) -> List[FieldDescriptor]:
        names = set(only)
        return [field for field in self.fields_for(model) if field.name in names]

    def element_name(self, model: type) -> str:
        rv = self._names.get(model)
        if rv is None:
            rv = self._names[model] = element_name(model.__name__)
        return rv

    def collection_name(self, model: type) -> str:
        return pluralize(self.element_name(model))
