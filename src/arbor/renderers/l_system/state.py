from dataclasses import dataclass

from arbor.renderers.l_system.grammar import DEFAULT_AXIOM


@dataclass(frozen=True)
class LSystemState:
    sentence: str = DEFAULT_AXIOM
    generation: int = 0
    autoplay: bool = False
    time_since_last_update_ms: float = 0.0
