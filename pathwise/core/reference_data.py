"""
Reference Dataset.

Read-only tables the scoring algorithms run against:
- Career path catalog (required skills, interest keywords, demand, timeline)
- Industry trend tables (trending / declining skills, emerging opportunities)
- Goal keyword -> topic lists for the learning-path planner
- Strategy decision table keyed by (score bracket, learning style)
- Interaction type -> learning style mapping
- Fixed advisory templates (outcome prediction, motivation, style tips)

The engine receives a ReferenceData instance instead of hard-coding these, so
the tables can be versioned and swapped (e.g. loaded from JSON) without
touching the algorithms.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from loguru import logger


class ReferenceDataError(Exception):
    """Raised when a reference dataset file cannot be parsed."""
    pass


# Qualitative demand labels accepted in catalog files, as 0-100 scores.
DEMAND_LEVELS = {
    "low": 40,
    "medium": 60,
    "high": 80,
    "very-high": 95,
}


@dataclass(frozen=True)
class CareerPhase:
    """One phase of a career path timeline."""

    title: str
    description: str
    duration: str

    def to_dict(self) -> dict:
        return {"title": self.title, "description": self.description, "duration": self.duration}


@dataclass(frozen=True)
class CareerPath:
    id: str
    title: str
    description: str
    required_skills: tuple[str, ...]
    interest_keywords: tuple[str, ...]
    market_demand: int  # 0-100
    timeline: tuple[CareerPhase, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "required_skills": list(self.required_skills),
            "interest_keywords": list(self.interest_keywords),
            "market_demand": self.market_demand,
            "timeline": [phase.to_dict() for phase in self.timeline],
        }

    @classmethod
    def from_dict(cls, data: dict) -> CareerPath:
        demand = data.get("market_demand", 0)
        if isinstance(demand, str):
            demand = DEMAND_LEVELS.get(demand, 0)
        return cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description", ""),
            required_skills=tuple(data.get("required_skills", [])),
            interest_keywords=tuple(data.get("interest_keywords", [])),
            market_demand=int(demand),
            timeline=tuple(
                CareerPhase(
                    title=p["title"],
                    description=p.get("description", ""),
                    duration=p.get("duration", ""),
                )
                for p in data.get("timeline", [])
            ),
        )


@dataclass(frozen=True)
class TrendingSkill:
    skill: str
    growth: int  # percent
    demand: int  # 0-100
    salary: int = 0

    def to_dict(self) -> dict:
        return {"skill": self.skill, "growth": self.growth, "demand": self.demand, "salary": self.salary}


@dataclass(frozen=True)
class ReferenceData:
    """Versionable bundle of every fixed table the engine consults."""

    version: str
    career_paths: tuple[CareerPath, ...]
    trending_skills: tuple[TrendingSkill, ...]
    declining_skills: tuple[str, ...]
    emerging_opportunities: tuple[str, ...]
    goal_topics: Mapping[str, tuple[str, ...]]
    strategy_table: Mapping[str, str]  # "<bracket>:<style>" -> strategy
    default_strategy: str
    interaction_styles: Mapping[str, str]  # interaction type -> style value
    style_recommendations: Mapping[str, tuple[str, ...]]
    style_explanations: Mapping[str, str]
    outcome_actions: tuple[str, ...]
    outcome_obstacles: tuple[str, ...]
    outcome_success_factors: tuple[str, ...]
    motivation_interventions: Mapping[str, tuple[str, ...]]
    preventive_measures: Mapping[str, tuple[str, ...]]

    def __post_init__(self):
        # lookup tables are shared by every request; expose them read-only
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Mapping):
                object.__setattr__(self, f.name, MappingProxyType(dict(value)))

    def strategy_for(self, bracket: str, style: str) -> str:
        return self.strategy_table.get(f"{bracket}:{style}", self.default_strategy)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "career_paths": [p.to_dict() for p in self.career_paths],
            "trending_skills": [s.to_dict() for s in self.trending_skills],
            "declining_skills": list(self.declining_skills),
            "emerging_opportunities": list(self.emerging_opportunities),
            "goal_topics": {k: list(v) for k, v in self.goal_topics.items()},
            "strategy_table": dict(self.strategy_table),
            "default_strategy": self.default_strategy,
            "interaction_styles": dict(self.interaction_styles),
            "style_recommendations": {k: list(v) for k, v in self.style_recommendations.items()},
            "style_explanations": dict(self.style_explanations),
            "outcome_actions": list(self.outcome_actions),
            "outcome_obstacles": list(self.outcome_obstacles),
            "outcome_success_factors": list(self.outcome_success_factors),
            "motivation_interventions": {k: list(v) for k, v in self.motivation_interventions.items()},
            "preventive_measures": {k: list(v) for k, v in self.preventive_measures.items()},
        }


# =============================================================================
# Default tables
# =============================================================================

_CAREER_PATHS = (
    CareerPath(
        id="frontend-dev",
        title="Frontend Developer",
        description="Create engaging user interfaces and experiences for web applications",
        required_skills=("HTML/CSS", "JavaScript", "React/Vue/Angular", "Responsive Design", "Git"),
        interest_keywords=("frontend", "web", "ui", "ux", "design", "javascript", "react"),
        market_demand=DEMAND_LEVELS["very-high"],
        timeline=(
            CareerPhase("Master Modern JavaScript",
                        "Learn ES6+, async/await, modules, and modern JavaScript patterns", "4-6 weeks"),
            CareerPhase("Learn a Frontend Framework",
                        "Choose React, Vue, or Angular and build projects", "6-8 weeks"),
            CareerPhase("Build Portfolio Projects",
                        "Create 3-5 impressive projects showcasing your skills", "8-10 weeks"),
        ),
    ),
    CareerPath(
        id="fullstack-dev",
        title="Full-Stack Developer",
        description="Work on both frontend and backend systems, handling complete web applications",
        required_skills=("Frontend Framework", "Backend Language", "Database", "API Design", "DevOps Basics"),
        interest_keywords=("fullstack", "full-stack", "backend", "api", "node", "web"),
        market_demand=DEMAND_LEVELS["very-high"],
        timeline=(
            CareerPhase("Master Frontend Development",
                        "Become proficient in React/Vue/Angular and modern CSS", "8-10 weeks"),
            CareerPhase("Learn Backend Development",
                        "Master Node.js/Python/Java and database management", "10-12 weeks"),
            CareerPhase("Build Full-Stack Projects",
                        "Create complete applications with authentication, databases, and deployment",
                        "12-16 weeks"),
        ),
    ),
    CareerPath(
        id="data-scientist",
        title="Data Scientist",
        description="Extract insights from data using statistics, machine learning, and visualization",
        required_skills=("Python/R", "Statistics", "Machine Learning", "SQL", "Data Visualization"),
        interest_keywords=("data", "machine learning", "ai", "statistics", "analytics", "python"),
        market_demand=DEMAND_LEVELS["very-high"],
        timeline=(
            CareerPhase("Master Python for Data Science",
                        "Learn pandas, NumPy, and data wrangling fundamentals", "6-8 weeks"),
            CareerPhase("Learn Statistics and ML",
                        "Study statistical inference and core machine learning algorithms", "10-12 weeks"),
            CareerPhase("Build Data Projects",
                        "Publish end-to-end analyses and models on real datasets", "8-12 weeks"),
        ),
    ),
    CareerPath(
        id="devops-engineer",
        title="DevOps Engineer",
        description="Automate delivery pipelines and operate reliable cloud infrastructure",
        required_skills=("Linux", "Docker", "Kubernetes", "CI/CD", "Cloud Platforms", "Infrastructure as Code"),
        interest_keywords=("devops", "cloud", "infrastructure", "automation", "linux", "kubernetes"),
        market_demand=DEMAND_LEVELS["very-high"],
        timeline=(
            CareerPhase("Master Linux and Scripting",
                        "Get comfortable with the shell, Bash, and system administration", "4-6 weeks"),
            CareerPhase("Learn Containerization",
                        "Package and run services with Docker and Kubernetes", "6-8 weeks"),
            CareerPhase("Cloud and Infrastructure",
                        "Provision cloud resources with Terraform and CI/CD pipelines", "8-10 weeks"),
        ),
    ),
    CareerPath(
        id="mobile-dev",
        title="Mobile Developer",
        description="Build native and cross-platform applications for iOS and Android",
        required_skills=("Swift/Kotlin", "React Native/Flutter", "Mobile UI/UX", "App Store Guidelines"),
        interest_keywords=("mobile", "ios", "android", "app"),
        market_demand=DEMAND_LEVELS["high"],
        timeline=(
            CareerPhase("Choose Your Platform",
                        "Pick native (Swift/Kotlin) or cross-platform (React Native/Flutter)", "2-3 weeks"),
            CareerPhase("Master Mobile Development",
                        "Build apps with navigation, storage, and networking", "10-12 weeks"),
            CareerPhase("Publish and Iterate",
                        "Ship to the app stores and iterate on user feedback", "4-6 weeks"),
        ),
    ),
)

_TRENDING_SKILLS = (
    TrendingSkill("TypeScript", growth=45, demand=85, salary=95000),
    TrendingSkill("React", growth=35, demand=90, salary=88000),
    TrendingSkill("Python", growth=40, demand=95, salary=92000),
    TrendingSkill("Kubernetes", growth=60, demand=80, salary=105000),
    TrendingSkill("Machine Learning", growth=55, demand=88, salary=110000),
)

_GOAL_TOPICS = {
    "react": ("React Hooks", "State Management", "Component Patterns"),
    "node": ("Express.js", "REST API Design", "Authentication"),
    "database": ("SQL Fundamentals", "Database Design", "Query Optimization"),
    "python": ("Python Fundamentals", "Data Structures", "Testing with pytest"),
    "machine learning": ("Model Evaluation", "Feature Engineering", "Linear Algebra Basics"),
    "devops": ("Docker", "CI/CD Pipelines", "Kubernetes Basics"),
}

_STRATEGY_TABLE = {
    "high:visual": "Tackle advanced projects and map their architecture with diagrams",
    "high:auditory": "Teach advanced concepts aloud or lead technical discussions",
    "high:kinesthetic": "Build challenging real-world projects end to end",
    "high:reading": "Study advanced documentation and source code in depth",
    "steady:visual": "Mix video walkthroughs with diagram-based review of each topic",
    "steady:auditory": "Pair podcasts and talk-throughs with regular practice",
    "steady:kinesthetic": "Alternate short coding exercises with mini projects",
    "steady:reading": "Work through written tutorials and summarize each section",
    "foundation:visual": "Rebuild fundamentals with visual explainers and step-by-step diagrams",
    "foundation:auditory": "Revisit fundamentals through guided lectures and study groups",
    "foundation:kinesthetic": "Strengthen fundamentals with small, guided hands-on exercises",
    "foundation:reading": "Review core concepts with beginner guides and written notes",
}

_INTERACTION_STYLES = {
    # visual
    "video": "visual",
    "diagram": "visual",
    "infographic": "visual",
    "image": "visual",
    "animation": "visual",
    "chart": "visual",
    "visualization": "visual",
    # auditory
    "audio": "auditory",
    "podcast": "auditory",
    "lecture": "auditory",
    "discussion": "auditory",
    "voice": "auditory",
    # kinesthetic
    "exercise": "kinesthetic",
    "coding": "kinesthetic",
    "project": "kinesthetic",
    "lab": "kinesthetic",
    "interactive": "kinesthetic",
    "quiz": "kinesthetic",
    "simulation": "kinesthetic",
    "playground": "kinesthetic",
    # reading
    "article": "reading",
    "reading": "reading",
    "documentation": "reading",
    "text": "reading",
    "notes": "reading",
    "book": "reading",
    "tutorial": "reading",
}

DEFAULT_REFERENCE = ReferenceData(
    version="2024.1",
    career_paths=_CAREER_PATHS,
    trending_skills=_TRENDING_SKILLS,
    declining_skills=("jQuery", "Flash", "Perl", "CoffeeScript"),
    emerging_opportunities=("WebAssembly", "Edge Computing", "Quantum Computing"),
    goal_topics=_GOAL_TOPICS,
    strategy_table=_STRATEGY_TABLE,
    default_strategy="Continue with a balanced mix of practice and review",
    interaction_styles=_INTERACTION_STYLES,
    style_recommendations={
        "visual": ("Use diagrams and flowcharts", "Color-code your notes", "Watch video tutorials"),
        "auditory": ("Listen to podcasts", "Discuss concepts aloud", "Use voice recordings"),
        "kinesthetic": ("Practice hands-on exercises", "Take frequent breaks", "Use interactive tools"),
        "reading": ("Read comprehensive guides", "Take detailed notes", "Create written summaries"),
    },
    style_explanations={
        "visual": "You learn best through visual aids like diagrams, charts, and videos",
        "auditory": "You learn best through listening, discussions, and verbal explanations",
        "kinesthetic": "You learn best through hands-on practice and physical interaction",
        "reading": "You learn best through reading and written materials",
    },
    outcome_actions=(
        "Start with fundamentals",
        "Practice with hands-on projects",
        "Join study groups",
        "Take regular breaks",
    ),
    outcome_obstacles=(
        "Complex concepts may require extra time",
        "Prerequisites might need review",
        "Practical application can be challenging",
    ),
    outcome_success_factors=(
        "Strong foundation in related topics",
        "Consistent daily practice",
        "Active community participation",
        "Regular progress reviews",
    ),
    motivation_interventions={
        "fatigue_high": ("Take a longer break", "Switch to easier topics", "Reduce session length"),
        "high_level": ("Set challenging goals", "Try advanced topics", "Share your progress"),
        "declining": ("Vary learning activities", "Set smaller, achievable goals"),
    },
    preventive_measures={
        "low": ("Maintain current pace", "Regular short breaks"),
        "medium": ("Monitor energy levels", "Vary learning activities"),
        "high": ("Reduce study intensity", "Focus on recovery", "Seek support"),
    },
)


# =============================================================================
# Loading
# =============================================================================


def _tuple_map(data: dict) -> dict[str, tuple[str, ...]]:
    return {str(k): tuple(v) for k, v in data.items()}


def reference_from_dict(data: dict, base: ReferenceData = DEFAULT_REFERENCE) -> ReferenceData:
    """
    Overlay a (partial) dict onto `base`.

    Keys absent from `data` keep the base table, so a file may override only
    the catalogs it cares about.
    """
    try:
        overrides: dict[str, Any] = {}
        if "version" in data:
            overrides["version"] = str(data["version"])
        if "career_paths" in data:
            overrides["career_paths"] = tuple(CareerPath.from_dict(p) for p in data["career_paths"])
        if "trending_skills" in data:
            overrides["trending_skills"] = tuple(
                TrendingSkill(
                    skill=s["skill"],
                    growth=int(s.get("growth", 0)),
                    demand=int(s.get("demand", 0)),
                    salary=int(s.get("salary", 0)),
                )
                for s in data["trending_skills"]
            )
        for key in ("declining_skills", "emerging_opportunities", "outcome_actions",
                    "outcome_obstacles", "outcome_success_factors"):
            if key in data:
                overrides[key] = tuple(data[key])
        for key in ("goal_topics", "style_recommendations", "motivation_interventions",
                    "preventive_measures"):
            if key in data:
                overrides[key] = _tuple_map(data[key])
        for key in ("strategy_table", "interaction_styles", "style_explanations"):
            if key in data:
                overrides[key] = {str(k): str(v) for k, v in data[key].items()}
        if "default_strategy" in data:
            overrides["default_strategy"] = str(data["default_strategy"])
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ReferenceDataError(f"Malformed reference data: {e}") from e

    return replace(base, **overrides)


def load_reference_data(path: Optional[Path] = None) -> ReferenceData:
    """Load a JSON reference dataset, or return the built-in default."""
    if path is None:
        return DEFAULT_REFERENCE

    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ReferenceDataError(f"Cannot read reference data from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ReferenceDataError(f"Reference data in {path} must be a JSON object")

    reference = reference_from_dict(data)
    logger.info(f"Loaded reference data version {reference.version} from {path}")
    return reference
