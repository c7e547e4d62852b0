"""Double-precision 4-vector used for every coordinate system in the toolkit.

The four slots are stored unlabelled in `dat`. The same type holds either
(x, y, z, t) or (r, phi, theta, t); the caller keeps track of which one a given
instance is in. Slot 3 is always the time component.
"""

import numpy as np


class Vec4:
    __slots__ = ("dat",)

    def __init__(self, a: float, b: float, c: float, d: float):
        # fresh storage for every instance, so copies never alias
        self.dat = np.array([a, b, c, d], dtype=float)

    def copy(self) -> "Vec4":
        return Vec4(*self.dat)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __getitem__(self, i):
        return float(self.dat[i])

    def __iter__(self):
        return (float(v) for v in self.dat)

    def __len__(self) -> int:
        return 4

    def __array__(self, dtype=None, copy=None):
        # always hand out a copy: writes must go through the conversion functions
        return np.array(self.dat, dtype=dtype)

    def __eq__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return bool(np.all(self.dat == other.dat))

    # mutated in place by the Schwarzschild -> rect conversion
    __hash__ = None

    def __repr__(self) -> str:
        return "Vec4({}, {}, {}, {})".format(*(repr(float(v)) for v in self.dat))


def vec4_rect(x: float, y: float, z: float, t: float) -> Vec4:
    """Create a 4-vector from rectangular (Cartesian) coordinates (x, y, z, t).

    Components are stored verbatim, nothing is validated.
    """
    return Vec4(x, y, z, t)
