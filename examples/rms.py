"""Root mean square of two values, one of them a parameter.

The expression is built once; changing the parameter and calling
`evaluate()` again recomputes the whole tree.
"""

import logging
import math

from lazyexpr import Parameter, UninitializedParameterError, lazy

logging.basicConfig(level=logging.DEBUG)

# Build the expression (nothing is computed here)
a, a_setter = Parameter.empty()
b = lazy(25.6)
rms = ((a + b) / lazy(2.0)).map(math.sqrt)

try:
    rms.evaluate()
except UninitializedParameterError as e:
    print(f"Before setting a: {e}")

a_setter.set(34.2)
print(f"rms(34.2, 25.6) = {rms.evaluate():.6f}")

a_setter.set(10.0)
print(f"rms(10.0, 25.6) = {rms.evaluate():.6f}")
