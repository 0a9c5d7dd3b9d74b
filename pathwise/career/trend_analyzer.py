"""
Industry trend and skill-gap analysis against the reference trend tables.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pathwise.core.reference_data import DEFAULT_REFERENCE, ReferenceData, TrendingSkill
from pathwise.core.scoring import matches_any, text_matches

MISSING_DEMAND_ABOVE = 75
STRONG_DEMAND_ABOVE = 80


@dataclass
class SkillGapAnalysis:
    missing: list[str] = field(default_factory=list)
    outdated: list[str] = field(default_factory=list)
    strong: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"missing": list(self.missing), "outdated": list(self.outdated), "strong": list(self.strong)}


@dataclass
class IndustryTrendReport:
    trending_skills: list[TrendingSkill]
    declining_skills: list[str]
    emerging_opportunities: list[str]
    skill_gap_analysis: SkillGapAnalysis
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "trending_skills": [s.to_dict() for s in self.trending_skills],
            "declining_skills": list(self.declining_skills),
            "emerging_opportunities": list(self.emerging_opportunities),
            "skill_gap_analysis": self.skill_gap_analysis.to_dict(),
            "recommendations": list(self.recommendations),
        }


def analyze_industry_trends(
    user_skills: Optional[list[str]],
    reference: ReferenceData = DEFAULT_REFERENCE,
) -> IndustryTrendReport:
    """
    Compare user skills against trending and declining skills.

    - missing: trending skills with demand > 75 the user does not have
    - outdated: user skills matching a declining skill
    - strong: user skills matching a trending skill with demand > 80
    """
    skills = user_skills or []

    missing = [
        t.skill for t in reference.trending_skills
        if t.demand > MISSING_DEMAND_ABOVE and not matches_any(t.skill, skills)
    ]
    outdated = [s for s in skills if matches_any(s, reference.declining_skills)]
    strong = [
        s for s in skills
        if any(t.demand > STRONG_DEMAND_ABOVE and text_matches(s, t.skill) for t in reference.trending_skills)
    ]

    recommendations = [f"Learn {skill}" for skill in missing]
    recommendations += [f"Plan a migration away from {skill}" for skill in outdated]

    return IndustryTrendReport(
        trending_skills=list(reference.trending_skills),
        declining_skills=list(reference.declining_skills),
        emerging_opportunities=list(reference.emerging_opportunities),
        skill_gap_analysis=SkillGapAnalysis(missing=missing, outdated=outdated, strong=strong),
        recommendations=recommendations,
    )
