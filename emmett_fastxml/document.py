# -*- coding: utf-8 -*-
"""
    emmett_fastxml.document
    -----------------------

    Provides a thin document layer over lxml trees.

    :copyright: 2014 Giovanni Barillari
    :license: BSD-3-Clause
"""

from typing import Optional

from lxml import etree


def new_node(name: str) -> etree._Element:
    return etree.Element(name)


class Document(object):
    def __init__(self, root: Optional[etree._Element] = None, encoding: str = "UTF-8"):
        self.root = root
        self.encoding = encoding

    def to_string(self, indent: bool = False) -> str:
        rv = '<?xml version="1.0" encoding="%s"?>\n' % self.encoding
        if self.root is None:
            return rv
        #: characters outside the declared encoding become character references
        return rv + etree.tostring(
            self.root, encoding=self.encoding, xml_declaration=False,
            pretty_print=indent
        ).decode(self.encoding)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        root = self.root.tag if self.root is not None else None
        return f"<Document root={root!r}>"
