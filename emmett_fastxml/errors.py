# -*- coding: utf-8 -*-
"""
    emmett_fastxml.errors
    ---------------------

    Provides the errors raised during xml serialization.

    :copyright: 2014 Giovanni Barillari
    :license: BSD-3-Clause
"""


class FastXMLError(Exception):
    ...


class InvalidInclude(FastXMLError, ValueError):
    def __init__(self, model_name: str, association: str):
        self.model_name = model_name
        self.association = association
        super().__init__(f"{model_name} has no {association} association")


class IncludeDepthExceeded(FastXMLError, RecursionError):
    def __init__(self, model_name: str, max_depth: int):
        self.model_name = model_name
        self.max_depth = max_depth
        super().__init__(
            f"Including associations of {model_name} exceeded the maximum "
            f"depth of {max_depth}"
        )
