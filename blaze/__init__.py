"""Parser, semantic passes, runtime helpers and collections for the Blaze language."""

__version__ = "0.1.0"