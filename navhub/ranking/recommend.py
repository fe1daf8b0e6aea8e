"""Related-item recommendations weighted by tag rarity."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from pydantic import BaseModel, Field

from ..models.catalog import ItemRecommendation, NavItem
from ..search.tags import build_tag_frequency
from ..utils.collation import sort_key

logger = logging.getLogger(__name__)

DEFAULT_RECOMMENDATION_LIMIT = 6


class RecommendationWeights(BaseModel):
    """Weights of the relatedness score."""

    rare_tag_weight: float = Field(
        default=8.0, description="Multiplier for the summed tag rarity"
    )
    common_tag_weight: float = Field(
        default=5.0, description="Points per shared tag"
    )
    coverage_weight: float = Field(
        default=6.0, description="Multiplier for combined tag overlap ratios"
    )
    same_group_bonus: float = Field(
        default=4.0, description="Flat bonus for candidates in the target's group"
    )
    diversity_penalty: float = Field(
        default=0.05, ge=0.0, description="Penalty per candidate tag not shared"
    )


class ScoredCandidate(BaseModel):
    """A candidate with its score breakdown."""

    item: NavItem
    common_tags: list[str] = Field(default_factory=list)
    is_same_group: bool = False
    score: float = 0.0
    rare_tag_score: float = 0.0
    overlap_with_current: float = 0.0
    overlap_with_candidate: float = 0.0
    diversity_penalty: float = 0.0

    def to_recommendation(self) -> ItemRecommendation:
        return ItemRecommendation(
            item=self.item,
            common_tags=self.common_tags,
            is_same_group=self.is_same_group,
        )


class RecommendationEngine:
    """Scores every other item against a target item.

    score = rare_tag_score * 8
          + |common| * 5
          + (overlap_with_current + overlap_with_candidate) * 6
          + (4 if same group)
          - diversity_penalty

    where rare_tag_score sums ln(1 + total_items / frequency(tag)) over the
    shared tags.
    """

    def __init__(self, weights: RecommendationWeights | None = None):
        """Initialize the engine.

        Args:
            weights: Score weights. Uses defaults if not provided.
        """
        self.weights = weights or RecommendationWeights()

    def rank(
        self,
        all_items: Sequence[NavItem],
        target: NavItem,
        tag_frequency: dict[str, int] | None = None,
    ) -> list[ScoredCandidate]:
        """Score and order all relevant candidates.

        Candidates sharing no tag with the target and sitting in another
        group are discarded. The target itself is excluded by (group, id).

        Args:
            all_items: Whole collection (also the basis of tag frequency).
            target: Item to find related items for.
            tag_frequency: Precomputed tag -> item count. Computed if omitted.

        Returns:
            Scored candidates, best first, fully deterministic.
        """
        if tag_frequency is None:
            tag_frequency = build_tag_frequency(all_items)

        total_items = len(all_items) or 1
        target_tags = set(target.tags)

        scored = []
        for candidate in all_items:
            if candidate.key == target.key:
                continue

            result = self._score(candidate, target, target_tags, tag_frequency, total_items)
            if not result.common_tags and not result.is_same_group:
                continue
            scored.append(result)

        scored.sort(
            key=lambda c: (
                -c.score,
                -len(c.common_tags),
                -c.overlap_with_current,
                not c.is_same_group,
                sort_key(c.item.name),
            )
        )
        return scored

    def recommend(
        self,
        all_items: Sequence[NavItem],
        target: NavItem,
        limit: int = DEFAULT_RECOMMENDATION_LIMIT,
        tag_frequency: dict[str, int] | None = None,
    ) -> list[ItemRecommendation]:
        """Top related items for the target.

        Args:
            all_items: Whole collection.
            target: Item to find related items for.
            limit: Maximum number of results (negative means none).
            tag_frequency: Precomputed tag -> item count.

        Returns:
            At most `limit` recommendations.
        """
        ranked = self.rank(all_items, target, tag_frequency)
        limit = max(0, limit)
        return [candidate.to_recommendation() for candidate in ranked[:limit]]

    def _score(
        self,
        candidate: NavItem,
        target: NavItem,
        target_tags: set[str],
        tag_frequency: dict[str, int],
        total_items: int,
    ) -> ScoredCandidate:
        w = self.weights
        common_tags = [tag for tag in candidate.tags if tag in target_tags]
        is_same_group = candidate.group == target.group

        rare_tag_score = 0.0
        for tag in common_tags:
            frequency = tag_frequency.get(tag) or 1
            rare_tag_score += math.log1p(total_items / frequency)

        overlap_with_current = (
            len(common_tags) / len(target.tags) if target.tags else 0.0
        )
        overlap_with_candidate = (
            len(common_tags) / len(candidate.tags) if candidate.tags else 0.0
        )
        diversity_penalty = (
            max(0, len(candidate.tags) - len(common_tags)) * w.diversity_penalty
        )

        score = (
            rare_tag_score * w.rare_tag_weight
            + len(common_tags) * w.common_tag_weight
            + (overlap_with_current + overlap_with_candidate) * w.coverage_weight
            + (w.same_group_bonus if is_same_group else 0)
            - diversity_penalty
        )

        return ScoredCandidate(
            item=candidate,
            common_tags=common_tags,
            is_same_group=is_same_group,
            score=score,
            rare_tag_score=rare_tag_score,
            overlap_with_current=overlap_with_current,
            overlap_with_candidate=overlap_with_candidate,
            diversity_penalty=diversity_penalty,
        )

    def explain(self, candidate: ScoredCandidate) -> str:
        """Human-readable score breakdown."""
        parts = [
            f"{candidate.item.name}: {candidate.score:.3f}",
            f"  - Shared tags: {', '.join(candidate.common_tags) or '-'}",
            f"  - Rarity: {candidate.rare_tag_score:.3f} (weight: {self.weights.rare_tag_weight:g})",
            f"  - Overlap: {candidate.overlap_with_current:.2f} / {candidate.overlap_with_candidate:.2f}",
            f"  - Same group: {candidate.is_same_group}",
            f"  - Diversity penalty: {candidate.diversity_penalty:.2f}",
        ]
        return "\n".join(parts)
