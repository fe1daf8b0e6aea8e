"""NavHub: aggregation, search and recommendations for a navigation directory."""

__version__ = "0.1.0"
