"""UI-agnostic code editor core: buffer, highlighter, and error overlay."""

__all__ = [
    "adapters",
    "buffer",
    "dispatch",
    "highlight",
    "overlay",
    "runtime",
    "view",
]

__version__ = "0.1.0"
