"""The fixed, ordered pattern table used to classify strings.

Patterns overlap (a 13-digit Visa number may contain a date), so the
table order is the precedence order and must not be changed.  Every rule
matches the whole value except the date rule, which accepts a date
anywhere inside the value.
"""

from __future__ import annotations
import re
from dataclasses import dataclass

from .types import CanonicalType


@dataclass(frozen=True, slots=True)
class PatternRule:
    """One entry of the pattern table."""
    canonical: CanonicalType
    regex: re.Pattern
    anchored: bool = True      # False = substring search
    lowercase: bool = False    # match against value.lower()

    def matches(self, value: str) -> bool:
        if self.lowercase:
            value = value.lower()
        if self.anchored:
            return self.regex.fullmatch(value) is not None
        return self.regex.search(value) is not None


def _rule(canonical: CanonicalType, pattern: str, **kwargs) -> PatternRule:
    return PatternRule(canonical, re.compile(pattern, re.ASCII), **kwargs)


_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
_V6_OCTET = r"(?:25[0-5]|(?:2[0-4]|1?[0-9])?[0-9])"
_V6_IPV4 = rf"(?:{_V6_OCTET}\.){{3}}{_V6_OCTET}"
_H = r"[0-9a-fA-F]{1,4}"

PATTERNS: tuple[PatternRule, ...] = (
    # version nibble 4, variant 8/9/a/b
    _rule(CanonicalType.UUID_V4,
          r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
          lowercase=True),

    _rule(CanonicalType.IPV4, rf"(?:{_OCTET}\.){{3}}{_OCTET}"),

    # full, compressed, IPv4-mapped/embedded, and link-local with zone
    _rule(CanonicalType.IPV6, (
        rf"(?:{_H}:){{7}}{_H}"
        rf"|(?:{_H}:){{1,7}}:"
        rf"|(?:{_H}:){{1,6}}:{_H}"
        rf"|(?:{_H}:){{1,5}}(?::{_H}){{1,2}}"
        rf"|(?:{_H}:){{1,4}}(?::{_H}){{1,3}}"
        rf"|(?:{_H}:){{1,3}}(?::{_H}){{1,4}}"
        rf"|(?:{_H}:){{1,2}}(?::{_H}){{1,5}}"
        rf"|{_H}:(?::{_H}){{1,6}}"
        rf"|:(?:(?::{_H}){{1,7}}|:)"
        r"|fe80:(?::[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]+"
        rf"|::(?:ffff(?::0{{1,4}})?:)?{_V6_IPV4}"
        rf"|(?:{_H}:){{1,4}}:{_V6_IPV4}"
    )),

    _rule(CanonicalType.EMAIL, (
        r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
        r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
        r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
    )),

    # lat [-90, 90], long [-180, 180]; "90." without digits is rejected
    _rule(CanonicalType.LAT_LONG, (
        r"[-+]?(?:[1-8]?\d(?:\.\d+)?|90(?:\.0+)?)"
        r",\s*"
        r"[-+]?(?:180(?:\.0+)?|(?:1[0-7]\d|[1-9]?\d)(?:\.\d+)?)"
    )),

    # case decides country vs. language
    _rule(CanonicalType.COUNTRY_CODE2, r"[A-Z]{2}"),
    _rule(CanonicalType.COUNTRY_CODE3, r"[A-Z]{3}"),
    _rule(CanonicalType.LANGUAGE_CODE2, r"[a-z]{2}"),
    _rule(CanonicalType.LANGUAGE_CODE3, r"[a-z]{3}"),

    _rule(CanonicalType.US_POSTAL_CODE, r"[0-9]{5}(?:-[0-9]{4})?"),
    _rule(CanonicalType.SSN, r"[0-9]{3}-?[0-9]{2}-?[0-9]{4}"),

    # cents are mandatory, thousands grouped by 3 when separated
    _rule(CanonicalType.USD, r"\$?[ ]?[+-]?[0-9]{1,3}(?:,?[0-9]{3})*\.[0-9]{2}"),

    # years 1900-2099; the separator slot accepts any single character
    _rule(CanonicalType.DATE_CCYYMMDD, (
        r"(?:19[0-9]{2}|20[0-9]{2})(?:-|/|.)?"
        r"(?:0[1-9]|1[012])(?:-|/|.)?"
        r"(?:0[1-9]|1[0-9]|2[0-9]|3[01])"
    ), anchored=False),

    # card numbers by shape only, no Luhn check
    _rule(CanonicalType.PAN_AMEX, r"3[47][0-9]{13}"),
    _rule(CanonicalType.PAN_DINERS, r"3(?:0[0-5]|[68][0-9])[0-9]{11}"),
    _rule(CanonicalType.PAN_MC, r"5[1-5][0-9]{14}"),
    _rule(CanonicalType.PAN_VISA, r"4[0-9]{12}(?:[0-9]{3})?"),
    _rule(CanonicalType.PAN_JCB, r"(?:2131|1800|35[0-9]{3})[0-9]{11}"),
    _rule(CanonicalType.PAN_DISCOVER, (
        r"65[4-9][0-9]{13}"
        r"|64[4-9][0-9]{13}"
        r"|6011[0-9]{12}"
        r"|622(?:12[6-9]|1[3-9][0-9]|[2-8][0-9][0-9]|9[01][0-9]|92[0-5])[0-9]{10}"
    )),
)


def match_pattern(value: str, patterns: tuple[PatternRule, ...] = PATTERNS) -> CanonicalType | None:
    """Return the canonical type of the first matching rule, or None."""
    for rule in patterns:
        if rule.matches(value):
            return rule.canonical
    return None


def scan_patterns(value: str, patterns: tuple[PatternRule, ...] = PATTERNS) -> list[CanonicalType]:
    """Return every rule that matches, in precedence order."""
    return [rule.canonical for rule in patterns if rule.matches(value)]
