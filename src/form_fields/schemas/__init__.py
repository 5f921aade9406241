"""
Schema package: field descriptions (input) and the abstract element tree (output).
"""

from .elements import Element, ElementKind  # noqa: F401
from .field_schema import (  # noqa: F401
    CHOICE_FIELD_TYPES,
    FIELD_TYPES,
    CheckboxField,
    ChoiceFieldBase,
    FieldBase,
    FieldSchema,
    RadioField,
    SelectField,
    TextareaField,
    TextField,
    parse_field_schema,
)
