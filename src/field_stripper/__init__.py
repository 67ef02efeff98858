"""
Field Stripper - Recursive field removal for JSON documents.

Removes a fixed set of keys (parentIds, parentNames, fullName by default)
from every object of a nested JSON document and writes the result to a new
file. The area tree itself is built from the published division-code
list by AreaTreeBuilder.
"""

__version__ = "1.0.0"

from .transformer import FieldStrippingTransformer
from .stripper import FieldStripper, strip_fields
from .area_parser import AreaTreeBuilder, parse_division_codes, enrich
from .models import StripConfig
from .types import DEFAULT_FORBIDDEN_FIELDS, JSONKind, StripResult, StripStatistics, BuildResult

__all__ = [
    "FieldStrippingTransformer",
    "FieldStripper",
    "strip_fields",
    "AreaTreeBuilder",
    "parse_division_codes",
    "enrich",
    "StripConfig",
    "DEFAULT_FORBIDDEN_FIELDS",
    "JSONKind",
    "StripResult",
    "StripStatistics",
    "BuildResult",
]
