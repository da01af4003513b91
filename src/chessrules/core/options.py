"""Rule-set configuration.

The core movement rules (piece geometry, blocking, capture and turn
ownership) are always enforced. The special rules below can be switched off
to get the simplified "practice" rule set.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RuleOptions:
    """Which optional rules the engine applies.

    Args:
        check_safety: Reject moves that leave the mover's own king attacked.
        castling: Allow castling (king two squares towards a rook).
        en_passant: Allow en-passant captures.
        promotion: Promote pawns reaching the last rank.
    """

    check_safety: bool = True
    castling: bool = True
    en_passant: bool = True
    promotion: bool = True

    # Presets
    @classmethod
    def standard(cls) -> RuleOptions:
        return cls()

    @classmethod
    def basic(cls) -> RuleOptions:
        return cls(check_safety=False, castling=False, en_passant=False, promotion=False)

    def describe(self) -> str:
        enabled = [
            name
            for name in ("check_safety", "castling", "en_passant", "promotion")
            if getattr(self, name)
        ]
        return ", ".join(enabled) if enabled else "basic"


STANDARD = RuleOptions.standard()
