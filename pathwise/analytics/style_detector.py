"""
Learning Style Detection.

Accumulates a score per style bucket from interaction types:
- Each interaction type maps to one style via the reference table
- Weight is the interaction's engagement score when present, else 1
- Arg-max wins; ties go to the earliest style in canonical order
  (visual > auditory > kinesthetic > reading)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from pathwise.core.models import LearningStyle, coerce_records
from pathwise.core.reference_data import DEFAULT_REFERENCE, ReferenceData

MIN_DETECTION_CONFIDENCE = 60
MAX_DETECTION_CONFIDENCE = 95
CONFIDENCE_PER_INTERACTION = 5


@dataclass
class StyleAnalysis:
    """Detected style plus the evidence behind it."""

    style: LearningStyle
    scores: dict[str, float] = field(default_factory=dict)
    confidence: int = MIN_DETECTION_CONFIDENCE
    recommendations: list[str] = field(default_factory=list)
    explanation: str = ""

    def to_dict(self) -> dict:
        return {
            "style": self.style.value,
            "scores": dict(self.scores),
            "confidence": self.confidence,
            "recommendations": list(self.recommendations),
            "explanation": self.explanation,
        }


def score_styles(
    interactions: Optional[list],
    reference: ReferenceData = DEFAULT_REFERENCE,
) -> dict[LearningStyle, float]:
    scores = {style: 0.0 for style in LearningStyle}
    for record in coerce_records(interactions):
        style_value = reference.interaction_styles.get((record.type or "").lower())
        if style_value is None:
            continue
        weight = record.engagement_score if record.engagement_score is not None else 1.0
        scores[LearningStyle.from_value(style_value)] += weight
    return scores


def detect_learning_style(
    interactions: Optional[list],
    reference: ReferenceData = DEFAULT_REFERENCE,
) -> LearningStyle:
    """Return the highest-scoring style; visual when nothing matches."""
    scores = score_styles(interactions, reference)
    best = LearningStyle.VISUAL
    for style in LearningStyle:
        # strict comparison keeps the earliest style on ties
        if scores[style] > scores[best]:
            best = style
    return best


def analyze_learning_style(
    interactions: Optional[list],
    reference: ReferenceData = DEFAULT_REFERENCE,
) -> StyleAnalysis:
    """Detect the style and attach confidence, tips and an explanation."""
    interactions = interactions or []
    scores = score_styles(interactions, reference)
    style = detect_learning_style(interactions, reference)

    confidence = min(
        MAX_DETECTION_CONFIDENCE,
        max(MIN_DETECTION_CONFIDENCE, len(interactions) * CONFIDENCE_PER_INTERACTION),
    )
    logger.debug(f"Detected learning style {style.value} from {len(interactions)} interactions")

    return StyleAnalysis(
        style=style,
        scores={s.value: round(v, 2) for s, v in scores.items()},
        confidence=confidence,
        recommendations=list(reference.style_recommendations.get(style.value, ())),
        explanation=reference.style_explanations.get(style.value, "Learning style detected"),
    )
