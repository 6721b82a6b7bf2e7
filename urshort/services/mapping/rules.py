"""
Pattern rules.

A rule pairs a compiled regular expression with a target template. Templates
reference capture groups with ``$1``, ``$name``, ``${1}`` or ``${name}``;
``$$`` is a literal dollar sign.
"""

import re
from dataclasses import dataclass
from typing import Optional

_GROUP_REFERENCE = re.compile(r"\$(?:(\$)|\{([^}]+)\}|([0-9A-Za-z_]+))")

# placeholder pattern for unfilled slots, matches every key
EMPTY_PATTERN = re.compile("")


def expand_template(match: re.Match, template: str) -> str:
    """
    Expand group references in a template against a match.

    A bare reference takes the longest run of name characters, so ``$1a`` is
    the group named ``1a``, not group 1 followed by ``a``. References to
    groups that do not exist or did not participate expand to an empty
    string. A ``$`` that does not start a reference is kept as is.

    Args:
        match: the regular expression match
        template: the template text

    Returns:
        the expanded text
    """

    def _substitute(reference: re.Match) -> str:
        if reference.group(1):
            return "$"
        name = reference.group(2) or reference.group(3)
        return _group_text(match, name)

    return _GROUP_REFERENCE.sub(_substitute, template)


def _group_text(match: re.Match, name: str) -> str:
    if name.isascii() and name.isdigit():
        index = int(name)
        if index > match.re.groups:
            return ""
        return match.group(index) or ""

    if name not in match.re.groupindex:
        return ""
    return match.group(name) or ""


@dataclass(frozen=True)
class PatternRule:
    """A regular expression and the template its matches are rewritten with."""

    pattern: re.Pattern
    template: str

    def apply(self, key: str) -> Optional[str]:
        """
        Rewrite a key with this rule.

        The first match anywhere in the key is replaced by the expanded
        template; text before and after the match is kept.

        Args:
            key: the requested path segment

        Returns:
            the rewritten text, or None if the pattern does not match
        """
        match = self.pattern.search(key)
        if match is None:
            return None

        return key[: match.start()] + expand_template(match, self.template) + key[match.end():]

    def __str__(self) -> str:
        return f"{self.pattern.pattern} {self.template}"
