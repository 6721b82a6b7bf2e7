"""
Mapping configuration loader.

Reads redirect mappings and the listening port out of flat key/value pairs,
normally the process environment. Malformed entries are logged and skipped so
that a partially broken configuration still starts.

Variables (default prefixes)::

    URSHORT_STANDARD_URI_<key>=<uri>          exact entry
    URSHORT_PATTERN_REGEX_<index>=<regex>     pattern rule, regex part
    URSHORT_PATTERN_URI_<index>=<template>    pattern rule, target part
    URSHORT_PORT=<port>                       listening port
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from dotenv import load_dotenv
from loguru import logger
from yarl import URL

from urshort.settings import Settings

from .exceptions import InvalidURIError
from .resolver import MappingResolver
from .rules import EMPTY_PATTERN, PatternRule
from .uri import parse_uri

Pairs = Iterable[Tuple[str, str]]

_UNSIGNED = re.compile(r"\+?[0-9]+")
MAX_PORT = 65535


@dataclass(frozen=True)
class MappingConfig:
    """Parsed mapping configuration."""

    standard: Dict[str, URL] = field(default_factory=dict)
    pattern: List[PatternRule] = field(default_factory=list)
    port: Optional[int] = None

    def build_resolver(self) -> MappingResolver:
        """Create the resolver for this configuration."""
        return MappingResolver(self.standard, self.pattern)


def _parse_index(text: str) -> Optional[int]:
    if not _UNSIGNED.fullmatch(text):
        return None
    return int(text)


def extract_port_number(pairs: Pairs, name: str) -> Optional[int]:
    """
    Extract the configured port number, if one is there.

    Only keys equal to ``name`` are considered. The first value that is a
    valid port wins; later values are ignored.

    Args:
        pairs: key/value pairs
        name: the exact variable name

    Returns:
        the port, or None if no value parses
    """
    for key, value in pairs:
        if key != name:
            continue

        port = _parse_index(value)
        if port is None or port > MAX_PORT:
            logger.warning(f"Ignoring {name}={value!r}: not a port number")
            continue
        return port

    return None


def extract_standard_uris(pairs: Pairs, prefix: str) -> Dict[str, URL]:
    """
    Extract all available standard URIs.

    The lookup key is the variable name with ``prefix`` removed and may be
    empty. Later duplicates overwrite earlier ones.

    Args:
        pairs: key/value pairs
        prefix: variable name prefix for exact entries

    Returns:
        lookup key to target URI
    """
    standard: Dict[str, URL] = {}

    for key, value in pairs:
        if not key.startswith(prefix):
            continue

        try:
            uri = parse_uri(value)
        except InvalidURIError as e:
            logger.warning(f"Ignoring {key}: {e}")
            continue

        standard[key[len(prefix):]] = uri

    return standard


def extract_pattern_uris(pairs: Pairs, uri_prefix: str, regex_prefix: str) -> List[PatternRule]:
    """
    Extract all available pattern URIs.

    Regexes and templates are placed by their numeric suffix, so variables
    can arrive in any order. Each side gets one slot per prefixed variable;
    slots that receive no valid entry keep a placeholder (an empty template,
    or an empty regex that matches everything). Regexes and templates are
    then paired slot by slot, up to the shorter side.

    Args:
        pairs: key/value pairs
        uri_prefix: variable name prefix for templates
        regex_prefix: variable name prefix for regexes

    Returns:
        rules in index order
    """
    uri_list: List[Tuple[str, str]] = []
    regex_list: List[Tuple[str, str]] = []
    for key, value in pairs:
        if key.startswith(uri_prefix):
            uri_list.append((key, value))
        elif key.startswith(regex_prefix):
            regex_list.append((key, value))

    templates: List[str] = [""] * len(uri_list)
    for key, value in uri_list:
        index = _parse_index(key[len(uri_prefix):])
        if index is None:
            logger.warning(f"Ignoring {key}: suffix is not an index")
            continue
        if index >= len(templates):
            logger.warning(f"Ignoring {key}: index {index} out of range 0..{len(templates) - 1}")
            continue
        templates[index] = value

    patterns: List[re.Pattern] = [EMPTY_PATTERN] * len(regex_list)
    for key, value in regex_list:
        index = _parse_index(key[len(regex_prefix):])
        if index is None:
            logger.warning(f"Ignoring {key}: suffix is not an index")
            continue
        try:
            compiled = re.compile(value)
        except re.error as e:
            logger.warning(f"Ignoring {key}: invalid regex ({e})")
            continue
        if index >= len(patterns):
            logger.warning(f"Ignoring {key}: index {index} out of range 0..{len(patterns) - 1}")
            continue
        patterns[index] = compiled

    return [PatternRule(pattern, template) for pattern, template in zip(patterns, templates)]


def load_mapping_config(pairs: Pairs, settings: Settings) -> MappingConfig:
    """
    Parse mappings and port from key/value pairs.

    Args:
        pairs: key/value pairs, read once
        settings: supplies the variable prefixes and the default port

    Returns:
        the parsed configuration
    """
    pairs = list(pairs)

    port = extract_port_number(pairs, settings.port_env_name)
    if port is None:
        port = settings.default_port

    return MappingConfig(
        standard=extract_standard_uris(pairs, settings.standard_uri_prefix),
        pattern=extract_pattern_uris(
            pairs,
            settings.pattern_uri_prefix,
            settings.pattern_regex_prefix,
        ),
        port=port,
    )


def load_environment(env_file: Union[str, Path, None] = ".env") -> List[Tuple[str, str]]:
    """
    Snapshot the process environment, seeded from a ``.env`` file.

    Variables already set in the environment take precedence over the file.

    Args:
        env_file: path of the dotenv file, or None to skip it

    Returns:
        the environment as key/value pairs
    """
    if env_file is not None and Path(env_file).is_file():
        load_dotenv(env_file)
        logger.info(f"Found '{env_file}' file.")
    else:
        logger.info(f"No '{env_file}' file found.")

    return list(os.environ.items())
