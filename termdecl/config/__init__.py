"""Configuration for termdecl."""

from .settings import get_env_var, get_log_level, get_render_size, validate_all_env_vars

__all__ = [
    "get_env_var",
    "get_log_level",
    "get_render_size",
    "validate_all_env_vars",
]
