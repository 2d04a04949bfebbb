"""Configuration for finsight: data file locations and logging."""

from finsight.config.logging import configure_logging
from finsight.config.settings import resolve_data_dir

__all__ = ["configure_logging", "resolve_data_dir"]
