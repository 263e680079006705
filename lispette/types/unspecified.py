from __future__ import annotations


class UnspecifiedType:
    """The value of forms evaluated only for effect, e.g. (if #f #f) or (set! x 1).

    Distinct from #f and from the empty list. It is truthy: only #f is false.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "#<unspecified>"

    def __eq__(self, other):
        return isinstance(other, UnspecifiedType)

    def __hash__(self):
        return hash(UnspecifiedType)


Unspecified = UnspecifiedType()
