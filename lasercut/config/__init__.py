from .defaults import defaults

__all__ = ["defaults"]
