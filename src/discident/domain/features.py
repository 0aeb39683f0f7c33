"""Where: src/discident/domain/features.py
What: Capability set describing what a disc read may attempt.
Why: Requests and platform capability probes share one closed vocabulary.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Flag


class FeatureSet(Flag):
    """Features understood by libdiscid.

    ``READ`` (the TOC) is implied by every read; ``MCN`` and ``ISRC`` are
    optional extras whose availability depends on the platform.
    """

    READ = 1 << 0
    MCN = 1 << 1
    ISRC = 1 << 2
    ALL = READ | MCN | ISRC

    @classmethod
    def from_names(cls, names: Iterable[str]) -> FeatureSet:
        """Translate lowercase feature names into a set.

        Raises:
            ValueError: If a name does not denote a single feature.
        """

        result = cls(0)
        for raw in names:
            normalized = raw.strip().lower()
            member = _NAMED_FEATURES.get(normalized)
            if member is None:
                valid = ", ".join(_NAMED_FEATURES)
                msg = f"Unsupported feature '{raw}'. Valid options: {valid}"
                raise ValueError(msg)
            result |= member
        return result

    def names(self) -> list[str]:
        """Return the lowercase names of the single features in this set."""

        return [name for name, member in _NAMED_FEATURES.items() if member in self]

    def issuperset(self, other: FeatureSet) -> bool:
        """Return whether every feature of ``other`` is also in this set."""

        return self & other == other


_NAMED_FEATURES: dict[str, FeatureSet] = {
    "read": FeatureSet.READ,
    "mcn": FeatureSet.MCN,
    "isrc": FeatureSet.ISRC,
}


__all__ = ["FeatureSet"]
