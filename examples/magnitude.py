"""Magnitude of a 2D vector whose components are parameters."""

import math

from lazyexpr import Parameter


def pow2(n: float) -> float:
    return n**2


x, x_setter = Parameter.empty()
y, y_setter = Parameter.empty()
magnitude = (x.map(pow2) + y.map(pow2)).map(math.sqrt)

for vx, vy in [(5.0, 12.0), (5.0, 3.0), (3.0, 4.0)]:
    x_setter.set(vx)
    y_setter.set(vy)
    print(f"|({vx}, {vy})| = {magnitude.evaluate()}")
