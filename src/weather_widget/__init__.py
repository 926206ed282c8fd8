"""Weather widget core: provider client, message derivers and widget controller."""

__version__ = "0.1.0"
