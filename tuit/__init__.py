"""Cell-grid terminals, views, styles, input events and ANSI renderers."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "interactive",
    "rect",
    "render",
    "style",
    "terminal",
    "terminals",
    "view",
    "view_split",
]