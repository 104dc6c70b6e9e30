import math


class interval:
    __slots__ = ('min', 'max')

    def __init__(self, min: float = math.inf, max: float = -math.inf):
        self.min = min
        self.max = max

    @classmethod
    def from_intervals(cls, a: 'interval', b: 'interval') -> 'interval':
        return cls(a.min if a.min <= b.min else b.min,
                   a.max if a.max >= b.max else b.max)

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def middle(self) -> float:
        return (self.min + self.max) / 2.0

    def __eq__(self, other) -> bool:
        if not isinstance(other, interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __hash__(self):
        return hash((self.min, self.max))

    def __repr__(self) -> str:
        return f"interval({self.min}, {self.max})"


interval.empty = interval(math.inf, -math.inf)
interval.universe = interval(-math.inf, math.inf)
