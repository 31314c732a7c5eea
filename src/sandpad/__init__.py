"""sandpad: HTML/CSS/JS snippet editor with pluggable math-widget adapters."""

__version__ = "0.1.0"
