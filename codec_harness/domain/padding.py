"""
Padding policies for encode emission and decode acceptance.
"""

from enum import Enum


class PaddingAcceptance(Enum):
    """Which padding forms a decoder accepts."""

    CANONICAL_ONLY = "canonical_only"
    UNPADDED_ONLY = "unpadded_only"
    EITHER = "either"

    def allows_padded(self) -> bool:
        return self in (PaddingAcceptance.CANONICAL_ONLY, PaddingAcceptance.EITHER)

    def allows_unpadded(self) -> bool:
        return self in (PaddingAcceptance.UNPADDED_ONLY, PaddingAcceptance.EITHER)


class PaddingPolicy(Enum):
    """
    Padding policy of a codec configuration.

    Each policy resolves to an (emit, accept) pair. Encoding depends only on
    ``emits_padding`` and decoding only on ``acceptance``.
    """

    CANONICAL = "canonical"
    NONE = "none"
    INDIFFERENT = "indifferent"
    REQUIRE_CANONICAL = "require_canonical"
    REQUIRE_NONE = "require_none"

    @property
    def emits_padding(self) -> bool:
        """Whether encode appends pad symbols."""
        return self in _EMITTING

    @property
    def acceptance(self) -> PaddingAcceptance:
        """Which padding forms decode accepts."""
        return _ACCEPTANCE[self]

    def resolve(self) -> tuple[bool, PaddingAcceptance]:
        """Return the (emit, accept) pair for this policy."""
        return self.emits_padding, self.acceptance


_EMITTING = frozenset(
    {PaddingPolicy.CANONICAL, PaddingPolicy.INDIFFERENT, PaddingPolicy.REQUIRE_CANONICAL}
)

_ACCEPTANCE = {
    PaddingPolicy.CANONICAL: PaddingAcceptance.EITHER,
    PaddingPolicy.NONE: PaddingAcceptance.UNPADDED_ONLY,
    PaddingPolicy.INDIFFERENT: PaddingAcceptance.EITHER,
    PaddingPolicy.REQUIRE_CANONICAL: PaddingAcceptance.CANONICAL_ONLY,
    PaddingPolicy.REQUIRE_NONE: PaddingAcceptance.UNPADDED_ONLY,
}

ALL_POLICIES = tuple(PaddingPolicy)
