# -*- coding: utf-8 -*-
"""
    emmett_fastxml.helpers
    ----------------------

    Provides naming helpers.

    :copyright: 2014 Giovanni Barillari
    :license: BSD-3-Clause
"""

import re

#: keeps acronyms together, HTTPRequest becomes http_request
_re_words = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+")


def decamelize(name):
    return "_".join(w.lower() for w in _re_words.findall(name))


def dasherize(name):
    return name.replace("_", "-")


def pluralize(name):
    return name + "s"


def singularize(name):
    if name.endswith("s") and not name.endswith("ss"):
        return name[:-1]
    return name


def element_name(classname):
    return dasherize(decamelize(classname))
