"""Infrastructure layer: environment and configuration adapters."""

from weddingbook.infrastructure.settings import load_env, load_user_prefs

__all__ = ["load_env", "load_user_prefs"]
