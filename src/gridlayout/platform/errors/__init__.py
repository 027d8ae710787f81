from .gridlayout_error import GridLayoutError

__all__ = ["GridLayoutError"]
