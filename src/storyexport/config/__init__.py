"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variable named by ``output.env`` (``STORYEXPORT_OUTPUT_DIR``)
"""

from .schema import ExportConfig, load_config

__all__ = ["ExportConfig", "load_config"]
