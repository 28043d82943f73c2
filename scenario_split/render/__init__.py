"""Render module - feature file reconstruction."""

from .feature_renderer import (
    LINE_SEPARATORS,
    TOOL_NAME,
    FeatureRenderer,
    RenderConfig,
    render,
    resolve_line_separator,
)

__all__ = [
    "LINE_SEPARATORS",
    "TOOL_NAME",
    "FeatureRenderer",
    "RenderConfig",
    "render",
    "resolve_line_separator",
]
