from .keyed import GradientStop, KeyedGradient

__all__ = ["GradientStop", "KeyedGradient"]
