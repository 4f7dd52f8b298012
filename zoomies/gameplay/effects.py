"""
Timed status effects on Lucy.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from enum import Enum, auto


class EffectKind(Enum):
    """Capabilities a power-up can grant."""
    INVINCIBLE = auto()    # People can't catch her
    SPEED_BOOST = auto()   # The zoomies: one extra random step per tick


@dataclass(frozen=True)
class ActiveEffect:
    """An effect and the timestamp (ms) at which it stops applying."""
    kind: EffectKind
    expires_at: int

    def is_active(self, now: int) -> bool:
        return now < self.expires_at


class StatusEffects:
    """
    Holds at most one ActiveEffect per kind.

    Re-activating a kind replaces its deadline instead of stacking a second
    instance. Kinds are independent of each other.
    """

    def __init__(self):
        self._effects: Dict[EffectKind, ActiveEffect] = {}

    def activate(self, kind: EffectKind, duration_ms: int, now: int) -> ActiveEffect:
        """Install or refresh an effect lasting duration_ms from now."""
        effect = ActiveEffect(kind=kind, expires_at=now + duration_ms)
        self._effects[kind] = effect
        return effect

    def tick(self, now: int) -> List[EffectKind]:
        """
        Drop every effect whose deadline has passed.
        Returns the kinds that expired, in activation order.
        """
        expired = [kind for kind, effect in self._effects.items() if not effect.is_active(now)]
        for kind in expired:
            del self._effects[kind]
        return expired

    def is_active(self, kind: EffectKind, now: int) -> bool:
        effect = self._effects.get(kind)
        return effect is not None and effect.is_active(now)

    def get(self, kind: EffectKind) -> Optional[ActiveEffect]:
        return self._effects.get(kind)

    def active(self) -> Tuple[ActiveEffect, ...]:
        """All installed effects (expired ones linger until the next tick())."""
        return tuple(self._effects.values())

    def copy(self) -> 'StatusEffects':
        clone = StatusEffects()
        clone._effects = dict(self._effects)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusEffects):
            return NotImplemented
        return self._effects == other._effects

    def __contains__(self, kind: EffectKind) -> bool:
        return kind in self._effects

    def __len__(self) -> int:
        return len(self._effects)

    def __repr__(self) -> str:
        parts = ", ".join(f"{e.kind.name}@{e.expires_at}" for e in self._effects.values())
        return f"StatusEffects({parts})"
