"""Cloud Foundry buildpack usage report."""

__version__ = "0.2.0"
