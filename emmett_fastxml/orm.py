# -*- coding: utf-8 -*-
"""
    emmett_fastxml.orm
    ------------------

    Provides xml serialization support for Emmett's ORM models.

    :copyright: 2014 Giovanni Barillari
    :license: BSD-3-Clause
"""

from emmett.orm import Model, rowmethod
from emmett.utils import cachedprop

from .schema import Association, RecordSchema, Schemas
from .serializer import serialize_many, serialize_one

_integer_types = {"id", "integer", "bigint"}


def field_kind(ftype):
    if ftype in _integer_types:
        return "integer"
    if ftype.startswith(("reference", "big-reference")):
        return "integer"
    if ftype.startswith("list:"):
        return "list"
    if ftype.startswith("decimal"):
        return "decimal"
    return ftype


class ModelSchema(RecordSchema):
    @cachedprop
    def instance(self):
        return self.model._instance_()

    def _target(self, modelname):
        if not modelname:
            return None
        return self.instance.db[modelname]._model_.__class__

    def columns(self):
        table, belongs = self.instance.table, self.instance._belongs_ref_
        rv = []
        for name in table.fields:
            if name in belongs and belongs[name].ftype:
                kind = field_kind(belongs[name].ftype)
            else:
                kind = field_kind(table[name].type)
            rv.append((name, kind))
        return rv

    def association(self, name):
        inst = self.instance
        if name in inst._belongs_ref_:
            ref = inst._belongs_ref_[name]
            return Association(name, self._target(ref.model), False)
        if name in inst._hasone_ref_:
            ref = inst._hasone_ref_[name]
            return Association(name, self._target(ref.model), False)
        if name in inst._hasmany_ref_:
            ref = inst._hasmany_ref_[name]
            return Association(name, self._target(ref.model), True)
        return None

    def associated(self, instance, association):
        value = getattr(instance, association.name, None)
        if value is None:
            return None
        if association.name in self.instance._belongs_ref_:
            return association.target.get(value)
        #: has_one and has_many relations are exposed as callable sets
        return value()


Schemas.factory_for(
    lambda model: isinstance(model, type) and issubclass(model, Model)
)(ModelSchema)


@Schemas.resolver
def row_model(instance):
    model = getattr(type(instance), "_model", None)
    if isinstance(model, Model):
        return model.__class__
    return None


class XMLModel(Model):
    @rowmethod("to_xml_doc")
    def _to_xml_doc(self, row, **options):
        return serialize_one(row, **options)

    @classmethod
    def instances_to_xml(cls, instances, **options):
        return serialize_many(instances, model=cls, **options)
