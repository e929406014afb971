"""
Log - monoidal accumulator for Writer
=====================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Ordered record of entries written by a computation.

    A list with monoidal operations:
    - empty: `Log()`
    - combine: concatenation, left entries first

    Laws:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))

    Neither operation mutates its operands.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Concatenate two logs into a new one.

        Example:
            Log.of("Handler 0: Step 1/2").combine(Log.of("Handler 0: Step 2/2"))
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """New log with one more entry at the end."""
        result: Log[A] = Log(self)
        result.append(item)
        return result


__all__ = ("Log",)
