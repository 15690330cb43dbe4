# ============================================================
# ==================== CONTINUATION STACK ====================
# ============================================================
#
# Every algorithm instance owns one of these.  A continuation is any
# zero-argument callable; invoking it performs one bounded unit of work
# (one comparison + possible swap) and may push further continuations
# holding the rest of the work.  Driving the stack to empty == running
# the algorithm to completion.


class ContinuationStack:
    """Strict LIFO of pending continuations."""

    __slots__ = ('_items',)

    def __init__(self):
        self._items = []

    def push(self, cont):
        self._items.append(cont)

    def pop(self):
        """Remove and return the top continuation, or None when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __repr__(self):
        return f"ContinuationStack(depth={len(self._items)})"


def drain(stack, limit=None):
    """
    Pop and invoke continuations until the stack is empty.
    Returns the number of continuations invoked.  `limit` caps the
    number of invocations (None = run to completion).
    """
    n = 0
    while not stack.is_empty():
        if limit is not None and n >= limit: break
        stack.pop()()
        n += 1
    return n
