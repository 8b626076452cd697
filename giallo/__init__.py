"""TextMate-style scopes, theme selectors, colours, theme compilation and CSS generation."""

__version__ = "0.1.0"