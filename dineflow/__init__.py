"""Restaurant ordering core: domain model and application services."""

__version__ = "0.1.0"