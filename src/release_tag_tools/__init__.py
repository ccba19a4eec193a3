"""Release tag automation: floating major tags, sequential minor releases, GitHub releases."""

__version__ = "0.1.0"
