"""Schwarzschild -> rectangular coordinate conversion.

Schwarzschild coordinates (r, phi, theta, t) have the same spatial part as
ordinary spherical coordinates: theta is measured from the +z axis (north
pole), phi is the azimuth in the xy-plane. The time coordinate is shared by
both systems and is never touched.

Units: geometric (G = c = 1). No special handling at r = 0 or at the poles,
the plain formulas give the degenerate points directly. NaN/inf propagate.
"""

import numpy as np

from sbh.vec4 import Vec4


def vec4_rect_from_schwarzschild(r: float, phi: float, theta: float, t: float) -> Vec4:
    """Return the Cartesian 4-vector (x, y, z, t) of the point (r, phi, theta, t).

    x = r sin(theta) cos(phi)
    y = r sin(theta) sin(phi)
    z = r cos(theta)
    """
    with np.errstate(invalid="ignore", over="ignore"):
        sin_phi = np.sin(phi)
        cos_phi = np.cos(phi)
        sin_theta = np.sin(theta)
        cos_theta = np.cos(theta)

        x = r * sin_theta * cos_phi
        y = r * sin_theta * sin_phi
        z = r * cos_theta

    return Vec4(x, y, z, t)


def vec4_schwarzschild_to_rect(q: Vec4) -> Vec4:
    """Convert q, given in Schwarzschild coordinates, to a new Cartesian vector."""
    return vec4_rect_from_schwarzschild(q.dat[0], q.dat[1], q.dat[2], q.dat[3])


def vec4_convert_schwarzschild_to_rect(p: Vec4) -> None:
    """Overwrite p (Schwarzschild) with its Cartesian coordinates, in place.

    Only slots 0-2 are written; the time slot is the same in both systems.
    """
    # read the whole pre-image before writing anything, dat[0] is r
    r = p.dat[0]
    with np.errstate(invalid="ignore", over="ignore"):
        sin_phi = np.sin(p.dat[1])
        cos_phi = np.cos(p.dat[1])
        sin_theta = np.sin(p.dat[2])
        cos_theta = np.cos(p.dat[2])

        p.dat[0] = r * sin_theta * cos_phi
        p.dat[1] = r * sin_theta * sin_phi
        p.dat[2] = r * cos_theta


def rect_from_schwarzschild_array(points) -> np.ndarray:
    """Vectorised Schwarzschild -> rect for an array of shape (..., 4).

    The last axis is read as (r, phi, theta, t). Returns a new float array of
    the same shape holding (x, y, z, t).
    """
    out = np.array(points, dtype=float)
    convert_schwarzschild_to_rect_array(out)
    return out


def convert_schwarzschild_to_rect_array(points: np.ndarray) -> None:
    """In-place version of `rect_from_schwarzschild_array` (float ndarray, shape (..., 4))."""
    r = points[..., 0].copy()
    with np.errstate(invalid="ignore", over="ignore"):
        sin_phi = np.sin(points[..., 1])
        cos_phi = np.cos(points[..., 1])
        sin_theta = np.sin(points[..., 2])
        cos_theta = np.cos(points[..., 2])

        points[..., 0] = r * sin_theta * cos_phi
        points[..., 1] = r * sin_theta * sin_phi
        points[..., 2] = r * cos_theta
