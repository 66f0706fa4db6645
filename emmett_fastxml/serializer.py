# -*- coding: utf-8 -*-
"""
    emmett_fastxml.serializer
    -------------------------

    Provides the serialization of records and collections of records
    into xml trees.

    :copyright: 2014 Giovanni Barillari
    :license: BSD-3-Clause
"""

import logging

from datetime import date, datetime, time
from typing import Any, Iterable, Optional

from emmett import sdict

from .descriptors import DescriptorResolver, FieldDescriptor
from .document import Document, new_node
from .errors import IncludeDepthExceeded, InvalidInclude
from .helpers import dasherize, pluralize, singularize
from .options import IncludeSpec, XMLOptions
from .schema import model_of, schema_for

#: kinds marked with a `type` attribute when holding a value
typed_kinds = {"integer", "boolean"}
#: kind used for the placeholder of missing associated records
ASSOCIATION = "association"


def include_name(spec: IncludeSpec) -> str:
    if isinstance(spec, dict):
        return list(spec)[0]
    return spec


def xml_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


class XMLSerializer(object):
    default_config = {
        "indent": False,
        "encoding": "UTF-8",
        "max_depth": None,
        "logger_name": "emmett_fastxml"
    }

    def __init__(self, resolver: Optional[DescriptorResolver] = None, **config):
        self.config = sdict(config)
        for key, dval in self.default_config.items():
            self.config[key] = self.config.get(key, dval)
        self.resolver = resolver or DescriptorResolver()
        self.logger = logging.getLogger(self.config.logger_name)

    def _indent(self, options: XMLOptions) -> bool:
        if options.indent is None:
            return self.config.indent
        return options.indent

    def render_node(self, xml_name: str, value: Any, kind: str):
        node = new_node(xml_name)
        if value is None:
            node.set("nil", "true")
            return node
        node.text = xml_text(value)
        if kind in typed_kinds:
            node.set("type", kind)
        return node

    def render_value(self, instance: Any, field: FieldDescriptor, schema=None, method: bool = False):
        schema = schema or schema_for(model_of(instance))
        if method:
            value = schema.method_value(instance, field.name)
        elif field.kind == "datetime":
            value = schema.raw_value(instance, field.name)
        else:
            value = schema.value(instance, field.name)
        return self.render_node(field.xml_name, value, field.kind)

    def include_association(
        self,
        instance: Any,
        root_node,
        options: XMLOptions,
        spec: IncludeSpec,
        depth: int = 0
    ):
        schema = schema_for(model_of(instance))
        name = include_name(spec)
        child_options = spec[name] if isinstance(spec, dict) else None
        association = schema.association(name)
        if association is None:
            self.logger.warning(
                "Invalid include requested on %s: %s", schema.name, name)
            raise InvalidInclude(schema.name, name)
        max_depth = self.config.max_depth
        if max_depth is not None and depth >= max_depth:
            raise IncludeDepthExceeded(schema.name, max_depth)
        xml_name = dasherize(name)
        nested = options.propagate(child_options).merge(
            {"parent": root_node, "root": xml_name})
        data = schema.associated(instance, association)
        self.logger.debug(
            "Including %s association of %s", name, schema.name)
        if data is None:
            root_node.append(self.render_node(xml_name, None, ASSOCIATION))
        elif association.many:
            self._serialize_many(
                data, nested.merge({"model": association.target}), depth + 1)
        else:
            self._serialize_one(data, nested, depth + 1)

    def _serialize_one(self, instance: Any, options: XMLOptions, depth: int = 0):
        model = model_of(instance)
        schema = schema_for(model)
        default_name = self.resolver.element_name(model)
        document = None
        if options.root_node is not None:
            root_node = options.root_node
        else:
            root_node = new_node(options.root or default_name)
            if options.parent is not None:
                options.parent.append(root_node)
            else:
                document = options.document or Document(
                    encoding=self.config.encoding)
                if document.root is None:
                    document.root = root_node
                root_node = document.root
            if options.root and options.root != default_name:
                root_node.set("type", schema.name)
        if options.fields is not None:
            columns = [FieldDescriptor.build(field) for field in options.fields]
        else:
            columns = self.resolver.fields_for(model)
        if options.include:
            #: included associations replace columns sharing their names
            included = {dasherize(include_name(spec)) for spec in options.include}
            columns = [field for field in columns if field.xml_name not in included]
        if options.methods is not None:
            methods = [FieldDescriptor.build(method) for method in options.methods]
        else:
            methods = self.resolver.methods_for(model)
        for field in columns:
            root_node.append(self.render_value(instance, field, schema))
        for field in methods:
            root_node.append(
                self.render_value(instance, field, schema, method=True))
        for spec in options.include or []:
            self.include_association(instance, root_node, options, spec, depth)
        return document

    def _serialize_many(self, instances: Iterable[Any], options: XMLOptions, depth: int = 0):
        instances = list(instances)
        model = options.model
        if model is None and instances:
            model = model_of(instances[0])
        if options.root:
            wrapper_name = options.root
            node_name = singularize(options.root)
        elif model is not None:
            node_name = self.resolver.element_name(model)
            wrapper_name = pluralize(node_name)
        else:
            raise ValueError(
                "Cannot name a collection with no records: "
                "specify either a model or a root")
        self.logger.debug(
            "Serializing %d records into %s", len(instances), wrapper_name)
        wrapper = new_node(wrapper_name)
        document = None
        if options.parent is not None:
            options.parent.append(wrapper)
        else:
            document = options.document or Document(
                encoding=self.config.encoding)
            document.root = wrapper
        wrapper.set("type", "array")
        item_options = options.merge({"parent": wrapper, "root": node_name})
        if options.only is not None and options.fields is None:
            item_options = item_options.merge(
                {"fields": self.resolver.only_fields(model, options.only)})
        for instance in instances:
            self._serialize_one(instance, item_options, depth)
        if document is not None:
            return document.to_string(indent=self._indent(options))
        return None

    def serialize_one(self, instance: Any, options: Optional[XMLOptions] = None, **kwargs):
        """Builds the xml tree of a single record.

        Returns the :class:`Document` holding the tree, unless the record
        was attached to a ``parent`` node or serialized into an existing
        ``root_node``.
        """
        return self._serialize_one(instance, XMLOptions.build(options, **kwargs))

    def serialize_many(self, instances: Iterable[Any], options: Optional[XMLOptions] = None, **kwargs):
        """Builds an array-typed xml tree wrapping the given records.

        Returns the text of the document, unless the collection was
        attached to a ``parent`` node.
        """
        return self._serialize_many(instances, XMLOptions.build(options, **kwargs))


serializer = XMLSerializer()


def serialize_one(instance, options=None, **kwargs):
    return serializer.serialize_one(instance, options, **kwargs)


def serialize_many(instances, options=None, **kwargs):
    return serializer.serialize_many(instances, options, **kwargs)


def register_methods(model, methods):
    serializer.resolver.register_methods(model, methods)
