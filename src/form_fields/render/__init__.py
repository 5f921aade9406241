"""
Rendering: schema -> abstract element tree, and element tree -> HTML.
"""

from .markup import to_html  # noqa: F401
from .renderer import render_field, render_fields  # noqa: F401
from .tags import (  # noqa: F401
    input_tag,
    label_tag,
    make_options,
    make_select,
    option_tag,
    select_tag,
    textarea_tag,
)
