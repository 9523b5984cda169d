from .exact import ProfileEvaluator

__all__ = ["ProfileEvaluator"]
