# -*- coding: utf-8 -*-
"""
    emmett_fastxml.options
    ----------------------

    Provides the options accepted by serialization calls.

    :copyright: 2014 Giovanni Barillari
    :license: BSD-3-Clause
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Optional, Sequence, Union

from lxml import etree

from .document import Document

IncludeSpec = Union[str, Dict[str, Union[Dict[str, Any], "XMLOptions"]]]


@dataclass(frozen=True)
class XMLOptions:
    root: Optional[str] = None
    document: Optional[Document] = None
    parent: Optional[etree._Element] = None
    root_node: Optional[etree._Element] = None
    only: Optional[Sequence[str]] = None
    fields: Optional[Sequence[Any]] = None
    methods: Optional[Sequence[Any]] = None
    include: Optional[List[IncludeSpec]] = None
    indent: Optional[bool] = None
    model: Optional[type] = None

    #: keys never carried over to the records of an included association
    unpropagated = ("fields", "methods", "include", "root_node", "model")

    @classmethod
    def build(cls, options: Optional["XMLOptions"] = None, **kwargs) -> "XMLOptions":
        if options is None:
            return cls(**kwargs)
        return options.merge(kwargs)

    def merge(self, overrides: Union["XMLOptions", Dict[str, Any], None]) -> "XMLOptions":
        if not overrides:
            return self
        if isinstance(overrides, XMLOptions):
            overrides = overrides.as_dict(set_only=True)
        return replace(self, **overrides)

    def propagate(
        self, overrides: Union["XMLOptions", Dict[str, Any], None] = None
    ) -> "XMLOptions":
        rv = replace(self, **{key: None for key in self.unpropagated})
        return rv.merge(overrides)

    def as_dict(self, set_only: bool = False) -> Dict[str, Any]:
        rv = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if set_only and value is None:
                continue
            rv[field.name] = value
        return rv
