"""
Tests for the documentation metric.
"""

from portfolio_analyzer.metrics.documentation import (
    check_documentation,
    score_repository_documentation,
)
from portfolio_analyzer.models import Repository


class TestDocumentationMetric:
    """Test the check_documentation metric function."""

    def test_documentation_no_repositories(self):
        """Test that an empty portfolio scores zero."""
        result = check_documentation([])
        assert result.key == "documentation"
        assert result.name == "Documentation Quality"
        assert result.score == 0
        assert result.max_score == 20
        assert result.details == "0 repositories analyzed for documentation quality"

    def test_documentation_fully_documented(self):
        """Test a repository with every documentation signal."""
        repo = Repository(
            name="portfolio-site",
            description="Personal portfolio built with a static site generator",
            size=2048,
            homepage="https://example.com",
            topics=("portfolio",),
        )
        assert score_repository_documentation(repo) == 10
        result = check_documentation([repo])
        assert result.score == 20

    def test_documentation_short_description(self):
        """Test that a short description earns partial credit."""
        repo = Repository(name="tool", description="A tool", size=0)
        assert score_repository_documentation(repo) == 2

    def test_documentation_description_boundary(self):
        """Test that exactly 20 characters is still a short description."""
        repo = Repository(name="tool", description="x" * 20)
        assert score_repository_documentation(repo) == 2
        repo = Repository(name="tool", description="x" * 21)
        assert score_repository_documentation(repo) == 4

    def test_documentation_described_non_empty_repositories(self):
        """Test twelve described, non-empty repositories without extras."""
        repos = [
            Repository(
                name=f"project-{i}",
                description="A reasonably descriptive summary",
                size=10,
            )
            for i in range(12)
        ]
        result = check_documentation(repos)
        # 4 (description) + 3 (size) = 7 raw points -> 7 / 10 * 20
        assert result.score == 14
        assert result.details == "12 repositories analyzed for documentation quality"

    def test_documentation_average_is_not_rounded(self):
        """Test that the averaged score keeps its fraction."""
        repos = [
            Repository(name="a", description="short"),
            Repository(name="b"),
            Repository(name="c"),
            Repository(name="d"),
        ]
        result = check_documentation(repos)
        # 2 raw points over 4 repositories -> 0.5 / 10 * 20
        assert result.score == 1.0

        repos = [Repository(name="a", topics=("x",)), Repository(name="b")]
        result = check_documentation(repos)
        assert result.score == 1.0

        repos = [Repository(name="a", topics=("x",))] + [
            Repository(name=str(i)) for i in range(3)
        ]
        result = check_documentation(repos)
        assert result.score == 0.5
