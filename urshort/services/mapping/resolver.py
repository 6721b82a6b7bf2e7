"""
Mapping resolver.

Turns a requested path segment into the URI to redirect to.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from loguru import logger
from yarl import URL

from .exceptions import InvalidTargetError, InvalidURIError, MappingNotFoundError
from .rules import PatternRule
from .uri import parse_uri


class MappingResolver:
    """
    Resolver over a fixed set of exact entries and ordered pattern rules.

    The tables are copied into read-only containers on construction and never
    change afterwards, so one instance can serve concurrent requests.
    """

    def __init__(self, standard: Mapping[str, URL], pattern: Iterable[PatternRule]):
        """
        Initialise the resolver.

        Args:
            standard: exact lookup key to target URI
            pattern: pattern rules in the order they are tried
        """
        self._standard: Mapping[str, URL] = MappingProxyType(dict(standard))
        self._pattern: Tuple[PatternRule, ...] = tuple(pattern)
        self.logger = logger.bind(service="mapping_resolver")

    @property
    def standard(self) -> Mapping[str, URL]:
        """Exact entries, read-only."""
        return self._standard

    @property
    def pattern(self) -> Tuple[PatternRule, ...]:
        """Pattern rules in declared order."""
        return self._pattern

    def resolve_exact(self, key: str) -> URL:
        """
        Look up a key in the exact entries.

        Raises:
            MappingNotFoundError: if the key has no exact entry
        """
        try:
            return self._standard[key]
        except KeyError:
            raise MappingNotFoundError(key) from None

    def resolve_pattern(self, key: str) -> URL:
        """
        Rewrite a key with the first pattern rule that matches it.

        Rules are tried in declared order and only the first match is used:
        if its rewritten text is not a valid URI, later rules are not tried.

        Args:
            key: the requested path segment

        Returns:
            the rewritten target

        Raises:
            InvalidTargetError: if the first matching rule does not produce a URI
            MappingNotFoundError: if no rule matches
        """
        for rule in self._pattern:
            target = rule.apply(key)
            if target is None:
                continue

            self.logger.debug(f"Pattern {rule.pattern.pattern!r} matched {key!r} -> {target!r}")
            try:
                return parse_uri(target)
            except InvalidURIError as e:
                raise InvalidTargetError(key, target) from e

        raise MappingNotFoundError(key)

    def resolve_any(self, key: str) -> URL:
        """
        Resolve a key, preferring exact entries over pattern rules.

        Raises:
            InvalidTargetError: if the matching pattern does not produce a URI
            MappingNotFoundError: if nothing matches
        """
        try:
            return self.resolve_exact(key)
        except MappingNotFoundError:
            return self.resolve_pattern(key)

    def __repr__(self) -> str:
        return f"MappingResolver(standard={len(self._standard)}, pattern={len(self._pattern)})"
