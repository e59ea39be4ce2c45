"""
Command-line interface for GitHub Portfolio Analyzer.
"""

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from portfolio_analyzer.config import set_api_base_url, set_timeout, set_verify_ssl
from portfolio_analyzer.core import AnalysisResult, analyze_profile, result_to_dict
from portfolio_analyzer.errors import InvalidInputError, PortfolioAnalyzerError
from portfolio_analyzer.http_client import close_http_client
from portfolio_analyzer.insights import Priority

# --- Typer App ---
app = typer.Typer()
console = Console()

PRIORITY_STYLES = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "green",
}
ACTIVITY_LEVEL_STYLES = ["grey30", "green4", "green3", "green1", "bright_green"]


# --- Helper Functions ---


def _score_color(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 40:
        return "yellow"
    return "red"


def _format_score(score: float) -> str:
    return f"{score:g}" if isinstance(score, float) else str(score)


def display_overall(result: AnalysisResult):
    """Display the overall score, tier and profile summary."""
    color = _score_color(result.overall_score)
    profile = result.profile

    console.print(
        f"\n👤 [bold cyan]{escape(profile.display_name)}[/bold cyan] [dim]({escape(profile.login)})[/dim]"
    )
    console.print(f"   {escape(profile.bio or 'No bio provided')}")
    console.print(
        f"   📦 {profile.public_repos} repositories · "
        f"👥 {profile.followers} followers · {profile.following} following"
    )
    console.print(
        f"\n   Overall Score: [{color}]{result.overall_score}/100[/{color}] "
        f"[bold]{result.tier.title}[/bold] [reverse] {result.tier.badge} [/reverse]"
    )
    console.print(f"   [dim]{result.tier.description}[/dim]")


def display_metrics(result: AnalysisResult):
    """Display the six sub-scores as a table."""
    table = Table(title="Score Breakdown", show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Score", justify="center", style="magenta")
    table.add_column("Max", justify="center", style="magenta")
    table.add_column("Details", justify="left")

    for metric in result.metrics.values():
        table.add_row(
            metric.name,
            _format_score(metric.score),
            str(metric.max_score),
            metric.details,
        )

    console.print(table)


def display_top_repositories(result: AnalysisResult):
    """Display the highest-ranked original repositories."""
    if not result.top_repositories:
        console.print("[dim]No repositories found[/dim]")
        return

    table = Table(title="Top Repositories", show_header=True, header_style="bold magenta")
    table.add_column("Repository", style="cyan", no_wrap=True)
    table.add_column("⭐", justify="right")
    table.add_column("Forks", justify="right")
    table.add_column("Language", justify="left")
    table.add_column("Description", justify="left")

    for repo in result.top_repositories:
        # Text is never parsed as markup
        name = Text(repo.name, style=f"link {repo.html_url}" if repo.html_url else "")
        table.add_row(
            name,
            str(repo.stargazers_count),
            str(repo.forks_count),
            Text(repo.language or ""),
            Text(repo.description or "No description provided"),
        )

    console.print(table)


def display_insights(result: AnalysisResult):
    """Display strengths, red flags and recommendations."""
    console.print("\n[bold green]✓ Strengths[/bold green]")
    for strength in result.strengths:
        console.print(f"   • {escape(strength)}")

    console.print("\n[bold red]⚠️  Red Flags[/bold red]")
    for flag in result.red_flags:
        console.print(f"   • {escape(flag)}")

    console.print("\n[bold cyan]💡 Recommendations[/bold cyan]")
    for rec in result.recommendations:
        style = PRIORITY_STYLES[rec.priority]
        console.print(
            f"   [{style}]{rec.priority.value.upper()}[/{style}] [bold]{rec.title}[/bold]"
        )
        console.print(f"      {escape(rec.description)}")
        console.print(f"      [dim]Impact: {rec.impact}[/dim]")


def display_languages(result: AnalysisResult):
    """Display the primary language distribution."""
    console.print("\n[bold]Languages[/bold]")
    if not result.languages:
        console.print("   [dim]No language data available[/dim]")
        return

    for share in result.languages:
        bar = "█" * max(1, round(share.percentage / 5))
        console.print(
            f"   [{share.color}]{bar}[/{share.color}] {share.name} {share.percentage}%"
        )


def display_activity(result: AnalysisResult):
    """Display the 90-day activity heat strip."""
    console.print("\n[bold]Activity (last 90 days)[/bold]")
    cells = "".join(
        f"[{ACTIVITY_LEVEL_STYLES[day.level]}]■[/{ACTIVITY_LEVEL_STYLES[day.level]}]"
        for day in result.activity_timeline
    )
    console.print(f"   {cells}")
    if result.activity_timeline:
        first = result.activity_timeline[0].date
        last = result.activity_timeline[-1].date
        total = sum(day.count for day in result.activity_timeline)
        console.print(f"   [dim]{first} → {last}: {total} events[/dim]")


def display_result(result: AnalysisResult, verbose: bool = False):
    """Display a complete analysis."""
    display_overall(result)
    display_metrics(result)
    display_top_repositories(result)
    display_insights(result)
    display_languages(result)
    if verbose:
        display_activity(result)


# --- Commands ---


@app.callback()
def main():
    """Score a GitHub profile as a developer portfolio."""


@app.command()
def analyze(
    identifier: str = typer.Argument(
        ...,
        help="GitHub username or profile URL (e.g. 'octocat' or 'https://github.com/octocat').",
    ),
    token: str | None = typer.Option(
        None,
        "--token",
        "-t",
        help="GitHub token for higher rate limits (default: GITHUB_TOKEN environment variable).",
    ),
    output_json: bool = typer.Option(
        False,
        "--json",
        help="Print the analysis as JSON instead of formatted tables.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show fetch progress and the activity timeline.",
    ),
    insecure: bool = typer.Option(
        False,
        "--insecure",
        help="Disable SSL certificate verification for HTTPS requests.",
    ),
    api_url: str | None = typer.Option(
        None,
        "--api-url",
        help="GitHub REST API base URL (default: https://api.github.com).",
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        help="HTTP request timeout in seconds (default: 10).",
    ),
):
    """Analyze a GitHub profile and score it as a portfolio."""
    set_verify_ssl(not insecure)
    if api_url:
        set_api_base_url(api_url)
    if timeout is not None:
        set_timeout(timeout)

    try:
        result = analyze_profile(
            identifier, token=token, verbose=verbose and not output_json
        )
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=2)
    except PortfolioAnalyzerError as e:
        console.print(f"[red]Error:[/red] Failed to analyze profile: {e}")
        raise typer.Exit(code=1)
    finally:
        close_http_client()

    if output_json:
        typer.echo(json.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
        return

    display_result(result, verbose=verbose)


if __name__ == "__main__":
    app()
