"""Deterministic string rewriting for the L-system demo.

A ruleset is an ordered sequence of :class:`RewriteRule`. For every symbol of
the current sentence the first rule whose predecessor matches wins; symbols no
rule matches are copied through unchanged.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Sequence

from arbor.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_AXIOM = "F"
DEFAULT_LOG_SIZE = 64


@dataclass(frozen=True)
class RewriteRule:
    predecessor: str
    successor: str

    def __post_init__(self) -> None:
        if len(self.predecessor) != 1:
            raise ValueError(
                f"Rewrite rules match a single symbol, got {self.predecessor!r}"
            )


DEFAULT_RULES: tuple[RewriteRule, ...] = (
    RewriteRule("F", "FF+[+F-F-F]-[-F+F+F]"),
)


def rewrite(sentence: str, rules: Sequence[RewriteRule]) -> str:
    expanded: list[str] = []
    for symbol in sentence:
        for rule in rules:
            if rule.predecessor == symbol:
                expanded.append(rule.successor)
                break
        else:
            expanded.append(symbol)
    return "".join(expanded)


class GenerationLog:
    """Bounded record of generation lines, newest first."""

    def __init__(self, max_entries: int = DEFAULT_LOG_SIZE) -> None:
        self._entries: deque[str] = deque(maxlen=max_entries)

    def log(self, message: str) -> None:
        self._entries.appendleft(message)
        logger.info(message)

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class LSystemEngine:
    def __init__(
        self,
        axiom: str = DEFAULT_AXIOM,
        rules: Sequence[RewriteRule] = DEFAULT_RULES,
        generation_log: GenerationLog | None = None,
    ) -> None:
        self.axiom = axiom
        self.rules = tuple(rules)
        self.generation_log = (
            generation_log if generation_log is not None else GenerationLog()
        )
        self._sentence = axiom
        self._generation = 0
        self._record()

    @property
    def sentence(self) -> str:
        return self._sentence

    @property
    def generation(self) -> int:
        return self._generation

    def advance(self) -> str:
        self._sentence = rewrite(self._sentence, self.rules)
        self._generation += 1
        self._record()
        return self._sentence

    def restarted(self) -> "LSystemEngine":
        """Return a new engine at the axiom that shares this one's log."""
        return LSystemEngine(
            axiom=self.axiom, rules=self.rules, generation_log=self.generation_log
        )

    def _record(self) -> None:
        self.generation_log.log(f"Generation {self._generation}: {self._sentence}")
