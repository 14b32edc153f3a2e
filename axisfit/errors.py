from __future__ import annotations


class ChartDataError(ValueError):
    """Input data cannot be turned into a chart."""


class LayoutNotComputedError(RuntimeError):
    """Layout-dependent state was queried before `layout` ran."""


class LayoutError(RuntimeError):
    """The render backend failed while laying out text."""
