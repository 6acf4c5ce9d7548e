"""Resume-driven interview practice: extraction API, Gemini analysis and practice client."""

__version__ = "1.0.0"
