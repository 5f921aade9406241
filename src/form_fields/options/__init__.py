"""
Option handling shared by select, radio and checkbox fields.
"""

from .choices import (  # noqa: F401
    BareChoice,
    Choice,
    LabeledChoice,
    MarkedChoice,
    NormalizedChoice,
    classify_choice,
    inject_blank,
    normalize_choices,
)
from .selection import (  # noqa: F401
    ResolvedChoice,
    has_explicit_value,
    resolve_choices,
    resolve_selection,
)
