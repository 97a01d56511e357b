"""An arcade shooter built on a small entity-component system."""

__version__ = "0.1.0"
__all__ = ["components", "config", "entity", "entity_manager", "game", "vec2"]