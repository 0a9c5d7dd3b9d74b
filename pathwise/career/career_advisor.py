"""
Career Path Advisor.

Scores every path in the reference catalog:

    score = 0.4 * skill_overlap + 0.3 * interest_overlap + 0.3 * demand / 100

- skill_overlap: share of the path's required skills matched by a user skill
- interest_overlap: share of the user's interests matched by the path's
  interest keywords or title
Matching is bidirectional case-insensitive substring containment.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from pathwise.core.reference_data import DEFAULT_REFERENCE, CareerPath, ReferenceData
from pathwise.core.scoring import matches_any, round_half_up

SKILL_WEIGHT = 0.4
INTEREST_WEIGHT = 0.3
DEMAND_WEIGHT = 0.3
MAX_PROBABILITY = 95


@dataclass
class CareerPathScore:
    path: CareerPath
    score: float  # 0-1
    matched_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)
    matched_interests: list[str] = field(default_factory=list)

    @property
    def probability(self) -> int:
        return round_half_up(min(MAX_PROBABILITY, self.score * 100))


@dataclass
class CareerPrediction:
    recommended_path: str
    path_id: str
    probability: int
    score: float
    required_skills: list[str]
    matched_skills: list[str]
    missing_skills: list[str]
    market_demand: int
    timeline: list[dict]
    timeframe: str = ""

    def to_dict(self) -> dict:
        return {
            "recommended_path": self.recommended_path,
            "path_id": self.path_id,
            "probability": self.probability,
            "score": round(self.score, 4),
            "required_skills": list(self.required_skills),
            "matched_skills": list(self.matched_skills),
            "missing_skills": list(self.missing_skills),
            "market_demand": self.market_demand,
            "timeline": list(self.timeline),
            "timeframe": self.timeframe,
        }


def score_career_path(
    path: CareerPath,
    current_skills: list[str],
    interests: list[str],
) -> CareerPathScore:
    matched = [skill for skill in path.required_skills if matches_any(skill, current_skills)]
    missing = [skill for skill in path.required_skills if skill not in matched]
    interest_pool = [*path.interest_keywords, path.title]
    matched_interests = [i for i in interests if matches_any(i, interest_pool)]

    skill_ratio = len(matched) / len(path.required_skills) if path.required_skills else 0.0
    interest_ratio = len(matched_interests) / len(interests) if interests else 0.0

    score = (
        SKILL_WEIGHT * skill_ratio
        + INTEREST_WEIGHT * interest_ratio
        + DEMAND_WEIGHT * (path.market_demand / 100)
    )
    return CareerPathScore(
        path=path,
        score=score,
        matched_skills=matched,
        missing_skills=missing,
        matched_interests=matched_interests,
    )


def rank_career_paths(
    current_skills: Optional[list[str]],
    interests: Optional[list[str]],
    reference: ReferenceData = DEFAULT_REFERENCE,
) -> list[CareerPathScore]:
    """Every catalog path, best score first (catalog order breaks ties)."""
    scored = [
        score_career_path(path, current_skills or [], interests or [])
        for path in reference.career_paths
    ]
    return sorted(scored, key=lambda s: s.score, reverse=True)


def predict_career_path(
    current_skills: Optional[list[str]],
    interests: Optional[list[str]],
    timeframe: str = "",
    reference: ReferenceData = DEFAULT_REFERENCE,
) -> Optional[CareerPrediction]:
    """
    Pick the highest-scoring career path.

    Returns None only when the catalog is empty.
    """
    ranked = rank_career_paths(current_skills, interests, reference)
    if not ranked:
        return None

    best = ranked[0]
    logger.debug(f"Career prediction: {best.path.title} (score={best.score:.3f})")

    return CareerPrediction(
        recommended_path=best.path.title,
        path_id=best.path.id,
        probability=best.probability,
        score=best.score,
        required_skills=list(best.path.required_skills),
        matched_skills=best.matched_skills,
        missing_skills=best.missing_skills,
        market_demand=best.path.market_demand,
        timeline=[phase.to_dict() for phase in best.path.timeline],
        timeframe=timeframe,
    )
