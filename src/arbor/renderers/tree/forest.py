"""Branch growth simulation.

Branches live in an arena keyed by id. Parents own their children through
``Branch.children``; ``Branch.parent`` is only a lookup key. Updates and
geometry walk the tree with an explicit worklist, so detaching a subtree in
the middle of a pass never disturbs the traversal.

A dead root cannot be detached. Instead :meth:`Forest.update` stops and
returns :attr:`UpdateOutcome.RESET`, and the owner of the forest replaces it.
"""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator

from arbor.geometry import Vector2, radians
from arbor.renderers.tree.branch import Branch
from arbor.renderers.tree.config import TreeConfig
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)


class UpdateOutcome(StrEnum):
    CONTINUE = "continue"
    DETACHED = "detached"
    RESET = "reset"


@dataclass(frozen=True)
class BranchSegment:
    branch_id: int
    start: Vector2
    end: Vector2
    width: float
    alive: bool


class Forest:
    def __init__(
        self,
        config: TreeConfig,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self._rng = rng or random.Random()
        self._branches: dict[int, Branch] = {}
        self._roots: list[int] = []
        self._ids = itertools.count()

    @classmethod
    def seeded(
        cls,
        config: TreeConfig,
        root_point: Vector2,
        rng: random.Random | None = None,
    ) -> "Forest":
        forest = cls(config, rng=rng)
        forest.plant(root_point)
        return forest

    def plant(self, root_point: Vector2) -> Branch:
        branch = self._add(root=root_point)
        self._roots.append(branch.id)
        return branch

    @property
    def roots(self) -> tuple[Branch, ...]:
        return tuple(self._branches[branch_id] for branch_id in self._roots)

    def __len__(self) -> int:
        return len(self._branches)

    def __contains__(self, branch_id: object) -> bool:
        return branch_id in self._branches

    def __getitem__(self, branch_id: int) -> Branch:
        return self._branches[branch_id]

    def parent_of(self, branch: Branch) -> Branch | None:
        if branch.parent is None:
            return None
        return self._branches.get(branch.parent)

    def children_of(self, branch: Branch) -> tuple[Branch, ...]:
        return tuple(self._branches[child_id] for child_id in branch.children)

    def walk(self) -> Iterator[Branch]:
        """Yield every branch, parents before their children."""
        pending = list(reversed(self._roots))
        while pending:
            branch = self._branches[pending.pop()]
            yield branch
            pending.extend(reversed(branch.children))

    def update(self, angle_jitter: float | None = None) -> UpdateOutcome:
        """Advance every branch by one tick.

        Returns ``RESET`` as soon as a root branch is found dead; the rest of
        the pass is skipped because the forest is about to be discarded.
        """
        jitter = self.config.angle_jitter if angle_jitter is None else angle_jitter
        for root_id in list(self._roots):
            pending = [root_id]
            while pending:
                branch_id = pending.pop()
                if branch_id not in self._branches:
                    continue
                outcome = self.update_branch(branch_id, jitter)
                if outcome is UpdateOutcome.RESET:
                    return outcome
                if outcome is UpdateOutcome.DETACHED:
                    continue
                pending.extend(reversed(self._branches[branch_id].children))
        return UpdateOutcome.CONTINUE

    def update_branch(self, branch_id: int, angle_jitter: float) -> UpdateOutcome:
        """Apply one tick of the branch rules to a single branch."""
        config = self.config
        branch = self._branches[branch_id]
        parent = self.parent_of(branch)

        # Deeper branches die faster
        if branch.alive and self._rng.random() < config.death_chance * max(
            1, branch.generation
        ):
            branch.alive = False
            logger.debug("Branch %s died at depth %s", branch.id, branch.generation)

        if not branch.alive and not branch.is_root:
            if self._rng.random() < (
                config.detach_chance * branch.width * branch.generation
            ):
                self.detach(branch.id)
                return UpdateOutcome.DETACHED

        if not branch.alive and branch.is_root:
            return UpdateOutcome.RESET

        if branch.alive:
            self._grow(branch)
            if self._can_branch(branch) and self._rng.random() < config.branch_chance:
                self._spawn_children(branch, angle_jitter)

        if parent is not None:
            branch.root = parent.end_point()
            if not parent.alive:
                branch.alive = False

        return UpdateOutcome.CONTINUE

    def detach(self, branch_id: int) -> None:
        """Remove a branch and everything growing from it."""
        branch = self._branches[branch_id]
        parent = self.parent_of(branch)
        if parent is not None:
            parent.children.remove(branch_id)
        elif branch.is_root:
            self._roots.remove(branch_id)

        pending = [branch_id]
        while pending:
            removed = self._branches.pop(pending.pop())
            pending.extend(removed.children)
        logger.debug("Branch %s fell off", branch_id)

    def segments(self, zoom: float = 1.0) -> Iterator[BranchSegment]:
        """Yield drawable segments, each child starting at its parent's end."""
        pending = [
            (root_id, self._branches[root_id].root) for root_id in reversed(self._roots)
        ]
        while pending:
            branch_id, start = pending.pop()
            branch = self._branches[branch_id]
            end = branch.end_from(start, zoom)
            yield BranchSegment(
                branch_id=branch.id,
                start=start,
                end=end,
                width=branch.width * (1 / zoom),
                alive=branch.alive,
            )
            pending.extend((child_id, end) for child_id in reversed(branch.children))

    def _add(self, **kwargs) -> Branch:
        branch = Branch(id=next(self._ids), **kwargs)
        self._branches[branch.id] = branch
        return branch

    def _grow(self, branch: Branch) -> None:
        config = self.config
        branch.length = min(
            config.branch_max_length,
            branch.length + self._rng.uniform(0.0, config.growth_step),
        )
        branch.width = min(config.branch_max_width, branch.width + config.width_step)

    def _can_branch(self, branch: Branch) -> bool:
        return (
            branch.width >= self.config.branching_min_width
            and len(branch.children) <= 1
        )

    def _spawn_children(self, branch: Branch, angle_jitter: float) -> None:
        config = self.config
        end = branch.end_point()
        for index in range(config.children_per_branching):
            # Children alternate sides, fanning out by one base angle per pair
            side = 1 if index % 2 == 0 else -1
            spread = config.branch_angle_degrees * (index // 2 + 1)
            offset = radians(spread + angle_jitter * (0.5 - self._rng.random()))
            child = self._add(
                root=end,
                rotation=branch.rotation + side * offset,
                parent=branch.id,
                generation=branch.generation + 1,
            )
            branch.children.append(child.id)
