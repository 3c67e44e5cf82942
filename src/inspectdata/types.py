"""Core types."""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class CanonicalType(IntEnum):
    """Canonical type of a piece of scalar data.

    The numeric tags are part of the public contract: new members are
    appended, existing ones are never renumbered.
    """
    UNKNOWN = 0
    UUID_V4 = 1          # Universally Unique Identifier version 4
    IPV4 = 2
    IPV6 = 3
    EMAIL = 4
    COUNTRY_CODE2 = 5    # ISO 3166 alpha-2
    COUNTRY_CODE3 = 6    # ISO 3166 alpha-3
    LANGUAGE_CODE2 = 7   # ISO 639-1
    LANGUAGE_CODE3 = 8   # ISO 639-2/T
    US_POSTAL_CODE = 9   # 5 digit or 5-4
    SSN = 10
    USD = 11
    LAT_LONG = 12
    DATE_CCYYMMDD = 13
    PAN_AMEX = 14
    PAN_VISA = 15
    PAN_MC = 16
    PAN_DISCOVER = 17
    PAN_DINERS = 18
    PAN_JCB = 19
    SECRET = 20          # no pattern, but high entropy (password, token, key)

    @property
    def label(self) -> str:
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label


_LABELS: dict[CanonicalType, str] = {
    CanonicalType.UNKNOWN: "Unknown",
    CanonicalType.UUID_V4: "UUIDv4",
    CanonicalType.IPV4: "IPv4",
    CanonicalType.IPV6: "IPv6",
    CanonicalType.EMAIL: "Email",
    CanonicalType.COUNTRY_CODE2: "CountryCode2",
    CanonicalType.COUNTRY_CODE3: "CountryCode3",
    CanonicalType.LANGUAGE_CODE2: "LanguageCode2",
    CanonicalType.LANGUAGE_CODE3: "LanguageCode3",
    CanonicalType.US_POSTAL_CODE: "USPostalCode",
    CanonicalType.SSN: "SSN",
    CanonicalType.USD: "USD",
    CanonicalType.LAT_LONG: "LatLong",
    CanonicalType.DATE_CCYYMMDD: "DateCCYYMMDD",
    CanonicalType.PAN_AMEX: "PANAmex",
    CanonicalType.PAN_VISA: "PANVisa",
    CanonicalType.PAN_MC: "PANMC",
    CanonicalType.PAN_DISCOVER: "PANDiscover",
    CanonicalType.PAN_DINERS: "PANDiners",
    CanonicalType.PAN_JCB: "PANJCB",
    CanonicalType.SECRET: "Secret",
}

# Personally Identifiable Information
PII_TYPES: frozenset[CanonicalType] = frozenset({
    CanonicalType.UUID_V4,
    CanonicalType.IPV4,
    CanonicalType.IPV6,
    CanonicalType.EMAIL,
    CanonicalType.SSN,
})

# Payment Card Industry data (primary account numbers)
PCI_TYPES: frozenset[CanonicalType] = frozenset({
    CanonicalType.PAN_AMEX,
    CanonicalType.PAN_MC,
    CanonicalType.PAN_VISA,
    CanonicalType.PAN_DISCOVER,
    CanonicalType.PAN_DINERS,
    CanonicalType.PAN_JCB,
})


def is_pii(canonical: CanonicalType) -> bool:
    return canonical in PII_TYPES


def is_pci(canonical: CanonicalType) -> bool:
    return canonical in PCI_TYPES


@dataclass(frozen=True, slots=True)
class InspectionResult:
    """Result of inspecting one atomic value (the datum)."""
    data: Any                                        # value as given, never mutated
    data_type: str                                   # "string", "bool", "int", "float64"
    canonical: CanonicalType = CanonicalType.UNKNOWN
    is_pii: bool = False
    is_pci: bool = False
    entropy: float = 0.0                             # metric entropy, SECRET only

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe rendering, canonical type by label."""
        return {
            "data": self.data,
            "data_type": self.data_type,
            "canonical": self.canonical.label,
            "is_pii": self.is_pii,
            "is_pci": self.is_pci,
            "entropy": self.entropy,
        }
