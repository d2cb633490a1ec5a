from infrastructure.config.settings import Settings, load_env, load_settings

__all__ = ["Settings", "load_env", "load_settings"]
