# -*- coding: utf-8 -*-
"""
tests.helpers
-------------

Tests helpers
"""

from lxml import etree


class Plain(object):
    def __init__(self, **attributes):
        for key, value in attributes.items():
            setattr(self, key, value)


def _typecast(node):
    if node.get("nil") == "true":
        return None
    kind = node.get("type")
    if kind == "array":
        return [_typecast(child) for child in node]
    if len(node):
        return {child.tag.replace("-", "_"): _typecast(child) for child in node}
    if node.text is None:
        return None
    if kind == "integer":
        return int(node.text)
    if kind == "boolean":
        return node.text == "true"
    return node.text


def parse_xml(text):
    return etree.fromstring(str(text).encode("utf8"))


def xml_to_dict(text):
    root = parse_xml(text)
    return {root.tag.replace("-", "_"): _typecast(root)}


def children_map(node, attr=None):
    if attr is None:
        return {child.tag: child.text for child in node}
    return {child.tag: child.get(attr) for child in node}
