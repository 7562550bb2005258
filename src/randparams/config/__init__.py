"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variable referenced by ``seed_env`` (default seed)

Fields set explicitly on a parameter's :class:`Randomize` take precedence over
all of the above.
"""

from .schema import EngineSettings, Randomize, load_config

__all__ = ["EngineSettings", "Randomize", "load_config"]
