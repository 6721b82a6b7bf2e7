"""
Mapping resolution.

Turns a requested path segment into a redirect target, using exact entries
and ordered pattern rules loaded from the environment.

Example:
    from urshort.services.mapping import load_mapping_config

    config = load_mapping_config(pairs, settings)
    resolver = config.build_resolver()
    print(resolver.resolve_any("i42"))
"""

from .exceptions import (
    InvalidTargetError,
    InvalidURIError,
    MappingNotFoundError,
    ResolutionError,
)
from .loader import (
    MappingConfig,
    extract_pattern_uris,
    extract_port_number,
    extract_standard_uris,
    load_environment,
    load_mapping_config,
)
from .resolver import MappingResolver
from .rules import PatternRule, expand_template
from .uri import parse_uri

__all__ = [
    "InvalidTargetError",
    "InvalidURIError",
    "MappingConfig",
    "MappingNotFoundError",
    "MappingResolver",
    "PatternRule",
    "ResolutionError",
    "expand_template",
    "extract_pattern_uris",
    "extract_port_number",
    "extract_standard_uris",
    "load_environment",
    "load_mapping_config",
    "parse_uri",
]
