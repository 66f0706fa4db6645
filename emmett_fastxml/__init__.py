from .__version__ import __version__
from .descriptors import DescriptorResolver, FieldDescriptor
from .document import Document
from .errors import FastXMLError, IncludeDepthExceeded, InvalidInclude
from .options import XMLOptions
from .schema import (
    Association,
    ObjectSchema,
    RecordSchema,
    model_of,
    register_schema,
    schema_for,
)
from .serializer import (
    XMLSerializer,
    register_methods,
    serialize_many,
    serialize_one,
    serializer,
)
from .orm import ModelSchema, XMLModel
