"""
form_fields: render declarative field schemas into abstract element trees.

    >>> from form_fields import render_field
    >>> tree = render_field({"type": "select", "name": "n", "availableValues": ["One", "Two"]})

- Library package: `src/form_fields/`
- HTTP entrypoint: `api/main.py`
"""

from form_fields.errors import (  # noqa: F401
    EmptySchemaError,
    FieldSchemaError,
    InvalidChoiceShape,
    InvalidFieldSchema,
    MissingRequiredField,
    UnsupportedFieldType,
)
from form_fields.render import render_field, render_fields, to_html  # noqa: F401
from form_fields.schemas import Element, ElementKind, parse_field_schema  # noqa: F401

__version__ = "0.1.0"
