"""Model-rocket vehicle description, input validation, weather lookup and design presets."""

__version__ = "0.1.0"

__all__ = ["mathtypes", "weather", "vehicle", "validation", "motors", "presets"]