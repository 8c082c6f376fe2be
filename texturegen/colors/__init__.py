from .ramp import ColorRamp, evaluate_ramp

__all__ = ["ColorRamp", "evaluate_ramp"]
