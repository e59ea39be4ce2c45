"""
GitHub Portfolio Analyzer.

Scores a public GitHub profile as a developer portfolio and explains the score.
"""

__version__ = "0.1.0"
