"""
Portfolio metrics and the registry that loads them.

Each metric lives in its own module exposing a module-level ``METRIC``
(a MetricSpec). The registry imports them in a fixed order so that the
keyed result always lists the dimensions the same way.
"""

from importlib import import_module

from portfolio_analyzer.metrics.base import Metric, MetricContext, MetricSpec

_BUILTIN_MODULES = [
    "portfolio_analyzer.metrics.documentation",
    "portfolio_analyzer.metrics.structure",
    "portfolio_analyzer.metrics.activity",
    "portfolio_analyzer.metrics.organization",
    "portfolio_analyzer.metrics.impact",
    "portfolio_analyzer.metrics.technical_depth",
]


def load_metric_specs() -> list[MetricSpec]:
    """Load the built-in metric specs in scoring order."""
    specs: list[MetricSpec] = []
    for module_path in _BUILTIN_MODULES:
        module = import_module(module_path)
        spec = getattr(module, "METRIC", None)
        if isinstance(spec, MetricSpec):
            specs.append(spec)
    return specs


def compute_metrics(context: MetricContext) -> dict[str, Metric]:
    """Run every metric against the context.

    Returns:
        Mapping of metric key (e.g. "documentation") to its Metric.
    """
    return {spec.key: spec.checker(context) for spec in load_metric_specs()}


__all__ = [
    "Metric",
    "MetricContext",
    "MetricSpec",
    "compute_metrics",
    "load_metric_specs",
]
