"""
Typer CLI for the pathwise learning engine.

Commands:
    pathwise profile new NAME          - Create and save a fresh learner profile
    pathwise profile show ID           - Show a stored profile
    pathwise profile list              - List stored profiles
    pathwise insights ID               - Insights for a learner
    pathwise recommend ID [--limit N]  - Personalized recommendations
    pathwise predict ID TOPIC          - Outcome prediction for a topic
    pathwise career ID                 - Career path and skill-gap analysis
    pathwise difficulty LEVEL SCORE    - Adjust a difficulty tier
    pathwise serve                     - Run the HTTP API

Usage:
    pathwise --help
    pathwise profile new "Ada Lovelace" --interest Python --goal "Machine Learning"
    pathwise recommend user-1700000000000 --limit 3
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from config import get_settings
from pathwise import __version__
from pathwise.core.models import DifficultyLevel, UserLearningProfile, create_default_user_profile
from pathwise.engine.learning_brain import LearningBrain
from pathwise.store.profile_store import ProfileNotFoundError, ProfileStore

app = typer.Typer(
    help="pathwise CLI: learner profiles, recommendations and career guidance",
    no_args_is_help=True,
)
profile_app = typer.Typer(help="Manage learner profiles", no_args_is_help=True)
app.add_typer(profile_app, name="profile")

console = Console()

PRIORITY_STYLES = {"high": "red", "medium": "yellow", "low": "dim"}


# ========================================
# Context Builder
# ========================================


class CLIContext:
    """Lazily built store and engine shared by the commands of one invocation."""

    def __init__(self, profile_dir: Optional[Path] = None):
        self.settings = get_settings()
        self.profile_dir = profile_dir or self.settings.profile_dir
        self._store: Optional[ProfileStore] = None
        self._brain: Optional[LearningBrain] = None

    @property
    def store(self) -> ProfileStore:
        if self._store is None:
            self._store = ProfileStore(self.profile_dir)
        return self._store

    @property
    def brain(self) -> LearningBrain:
        if self._brain is None:
            self._brain = LearningBrain.from_settings(self.settings)
        return self._brain

    def load_profile(self, profile_id: str) -> UserLearningProfile:
        try:
            return self.store.require(profile_id)
        except ProfileNotFoundError as e:
            rprint(f"[red]✗[/red] {e}")
            raise typer.Exit(code=1)


@app.callback()
def main_callback(
    ctx: typer.Context,
    profile_dir: Optional[Path] = typer.Option(
        None, "--profile-dir", help="Profile directory (default: PATHWISE_PROFILE_DIR)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Learner modeling and recommendation engine."""
    settings = get_settings()
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else settings.log_level)
    ctx.obj = CLIContext(profile_dir=profile_dir)


# ========================================
# Profile Commands
# ========================================


@profile_app.command("new")
def profile_new(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Learner display name"),
    interests: list[str] = typer.Option([], "--interest", "-i", help="Interest (repeatable)"),
    goals: list[str] = typer.Option([], "--goal", "-g", help="Learning goal (repeatable)"),
    weak_areas: list[str] = typer.Option([], "--weak-area", "-w", help="Weak area (repeatable)"),
) -> None:
    """Create and save a fresh learner profile."""
    cli: CLIContext = ctx.obj
    profile = create_default_user_profile(name)
    profile.interests = list(interests)
    profile.goals = list(goals)
    profile.weak_areas = list(weak_areas)

    path = cli.store.put(profile)
    rprint(f"[green]✓[/green] Created profile [bold]{profile.id}[/bold] for {name}")
    rprint(f"  [dim]{path}[/dim]")


@profile_app.command("show")
def profile_show(
    ctx: typer.Context,
    profile_id: str = typer.Argument(..., help="Profile ID"),
) -> None:
    """Show a stored profile."""
    cli: CLIContext = ctx.obj
    profile = cli.load_profile(profile_id)

    table = Table(title=f"Profile: {profile.name}", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("ID", profile.id)
    table.add_row("Learning style", profile.learning_style.value)
    table.add_row("Skill level", profile.skill_level.value)
    table.add_row("Pace", profile.preferred_pace.value)
    table.add_row("Interests", ", ".join(profile.interests) or "-")
    table.add_row("Goals", ", ".join(profile.goals) or "-")
    table.add_row("Weak areas", ", ".join(profile.weak_areas) or "-")
    table.add_row("Streak", f"{profile.current_streak} days")
    table.add_row("XP / Level", f"{profile.total_xp} / {profile.level}")
    table.add_row("Achievements", ", ".join(sorted(profile.achievement_ids)) or "-")

    console.print(table)


@profile_app.command("list")
def profile_list(ctx: typer.Context) -> None:
    """List stored profiles."""
    cli: CLIContext = ctx.obj
    profiles = cli.store.list_profiles()
    if not profiles:
        rprint("[yellow]⚠[/yellow] No profiles stored")
        return

    table = Table(title=f"Profiles ({len(profiles)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Level", justify="right")
    table.add_column("XP", justify="right", style="green")

    for profile in profiles:
        table.add_row(profile.id, profile.name, str(profile.level), str(profile.total_xp))

    console.print(table)


# ========================================
# Engine Commands
# ========================================


@app.command("insights")
def show_insights(
    ctx: typer.Context,
    profile_id: str = typer.Argument(..., help="Profile ID"),
) -> None:
    """Insights derived from the learner's profile."""
    cli: CLIContext = ctx.obj
    profile = cli.load_profile(profile_id)
    insights = cli.brain.generate_insights(profile)

    if not insights:
        rprint("[dim]No insights yet. Keep learning![/dim]")
        return

    for insight in insights:
        style = PRIORITY_STYLES.get(insight.priority.value, "white")
        rprint(f"[{style}]●[/{style}] [bold]{insight.title}[/bold] ({insight.type.value})")
        rprint(f"  {insight.message}")
        if insight.action:
            rprint(f"  [dim]action: {insight.action}[/dim]")


@app.command("recommend")
def recommend(
    ctx: typer.Context,
    profile_id: str = typer.Argument(..., help="Profile ID"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=0, help="Maximum recommendations"),
) -> None:
    """Personalized content recommendations."""
    cli: CLIContext = ctx.obj
    profile = cli.load_profile(profile_id)
    recommendations = cli.brain.recommend(profile, limit=limit)

    table = Table(title=f"Recommendations for {profile.name}", show_header=True)
    table.add_column("Type", style="cyan")
    table.add_column("Title", style="white")
    table.add_column("Difficulty")
    table.add_column("Time", style="dim")
    table.add_column("Priority")

    for rec in recommendations:
        style = PRIORITY_STYLES.get(rec.priority, "white")
        table.add_row(
            rec.type,
            rec.title,
            rec.difficulty,
            rec.estimated_time,
            f"[{style}]{rec.priority}[/{style}]",
        )

    console.print(table)


@app.command("predict")
def predict(
    ctx: typer.Context,
    profile_id: str = typer.Argument(..., help="Profile ID"),
    topic: str = typer.Argument(..., help="Topic or goal to predict"),
    timeframe: str = typer.Option("", "--timeframe", help="Target timeframe, e.g. '3 months'"),
) -> None:
    """Predict the learning outcome for a topic."""
    cli: CLIContext = ctx.obj
    profile = cli.load_profile(profile_id)
    analysis = cli.brain.predict_learning_outcome(profile, topic, timeframe)

    rprint(f"[bold]{topic}[/bold]")
    rprint(f"  Completion probability: [green]{analysis.completion_probability}%[/green]")
    rprint(f"  Estimated time: {analysis.estimated_time_to_goal}")

    for heading, items in (
        ("Recommended actions", analysis.recommended_actions),
        ("Potential obstacles", analysis.potential_obstacles),
        ("Success factors", analysis.success_factors),
    ):
        rprint(f"\n[cyan]{heading}[/cyan]")
        for item in items:
            rprint(f"  • {item}")


@app.command("career")
def career(
    ctx: typer.Context,
    profile_id: str = typer.Argument(..., help="Profile ID"),
    timeframe: str = typer.Option("", "--timeframe", help="Target timeframe"),
) -> None:
    """Career path prediction and skill-gap analysis."""
    cli: CLIContext = ctx.obj
    profile = cli.load_profile(profile_id)
    skills = profile.strengths + profile.completed_topics

    prediction = cli.brain.predict_career_path(skills, profile.interests, timeframe)
    if prediction is None:
        rprint("[yellow]⚠[/yellow] No career paths configured")
        raise typer.Exit(code=1)

    rprint(
        f"[bold]{prediction.recommended_path}[/bold] "
        f"([green]{prediction.probability}%[/green] match, demand {prediction.market_demand})"
    )
    if prediction.missing_skills:
        rprint(f"  Skills to learn: {', '.join(prediction.missing_skills)}")

    table = Table(title="Timeline")
    table.add_column("Phase", style="cyan")
    table.add_column("Duration", style="dim")
    table.add_column("Focus")
    for phase in prediction.timeline:
        table.add_row(phase["title"], phase["duration"], phase["description"])
    console.print(table)

    trends = cli.brain.analyze_industry_trends(skills)
    for line in trends.recommendations:
        rprint(f"  • {line}")


@app.command("difficulty")
def difficulty(
    current: str = typer.Argument(..., help="beginner, intermediate or advanced"),
    score: float = typer.Argument(..., help="Latest performance score (0-100)"),
) -> None:
    """Adjust a difficulty tier for a performance score."""
    if current not in {level.value for level in DifficultyLevel}:
        rprint(f"[red]✗[/red] Unknown difficulty level: {current}")
        raise typer.Exit(code=1)

    adjusted = LearningBrain().adjust_difficulty(current, score)
    if adjusted.value == current:
        rprint(f"Stay at [bold]{adjusted.value}[/bold]")
    else:
        rprint(f"{current} → [bold]{adjusted.value}[/bold]")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind host"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pathwise.api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("version")
def show_version() -> None:
    """Show version information."""
    rprint(f"[bold]pathwise[/bold] v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
