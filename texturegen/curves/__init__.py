from .response import FunctionCurve, IdentityCurve, Keyframe, KeyframeCurve, ResponseCurve

__all__ = ["ResponseCurve", "IdentityCurve", "FunctionCurve", "Keyframe", "KeyframeCurve"]
