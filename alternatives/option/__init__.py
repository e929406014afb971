from .lazy import LazyCoroOption

__all__ = ("LazyCoroOption",)
