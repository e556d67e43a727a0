"""Build Mermaid timeline and user journey diagrams as text."""

__version__ = "0.1.0"