"""Caption text formatting."""

from frinkiac.text.line_wrapper import DEFAULT_MAX_LINE_LENGTH, caption_text, line_split, wrap

__all__ = [
    "DEFAULT_MAX_LINE_LENGTH",
    "caption_text",
    "line_split",
    "wrap",
]
