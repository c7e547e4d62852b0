"""Small runnable script: Schwarzschild geometry drawn in Cartesian space.

Run:
    python -m ui.prototype_matplotlib

Builds the event horizon (r = 2M), the photon sphere (r = 3M) and a thin
equatorial disk in Schwarzschild coordinates, converts them to (x, y, z) and
shows a 3D scatter plot.
"""

import matplotlib.pyplot as plt
import numpy as np

from sbh.coordinates import (
    convert_schwarzschild_to_rect_array,
    rect_from_schwarzschild_array,
    vec4_rect_from_schwarzschild,
    vec4_schwarzschild_to_rect,
)
from sbh.vec4 import Vec4


def sphere_points(r: float, n_phi: int = 48, n_theta: int = 24, t: float = 0.0) -> np.ndarray:
    """Return an (n_theta * n_phi, 4) array of Cartesian points on the sphere of radius r."""
    phi = np.linspace(0.0, 2.0 * np.pi, n_phi, endpoint=False)
    theta = np.linspace(0.0, np.pi, n_theta)
    pp, tt = np.meshgrid(phi, theta)

    pts = np.empty(pp.shape + (4,), dtype=float)
    pts[..., 0] = r
    pts[..., 1] = pp
    pts[..., 2] = tt
    pts[..., 3] = t
    convert_schwarzschild_to_rect_array(pts)
    return pts.reshape(-1, 4)


def disk_points(
    r_in: float = 6.0, r_out: float = 20.0, n_r: int = 8, n_phi: int = 96, t: float = 0.0
) -> np.ndarray:
    """Return Cartesian points of a thin disk in the equatorial plane (theta = pi/2)."""
    r = np.linspace(r_in, r_out, n_r)
    phi = np.linspace(0.0, 2.0 * np.pi, n_phi, endpoint=False)
    rr, pp = np.meshgrid(r, phi)

    sch = np.stack(
        [rr, pp, np.full_like(rr, np.pi / 2.0), np.full_like(rr, t)], axis=-1
    )
    return rect_from_schwarzschild_array(sch).reshape(-1, 4)


def camera_position(r: float = 30.0, phi: float = 0.0, theta: float = np.pi / 3.0) -> Vec4:
    """Observer position, as the renderer places its camera, in Cartesian coords."""
    return vec4_schwarzschild_to_rect(Vec4(r, phi, theta, 0.0))


def main(M: float = 1.0):
    print(f"Building Schwarzschild geometry (M = {M}).")
    horizon = sphere_points(2.0 * M)
    photon_sphere = sphere_points(3.0 * M, n_phi=36, n_theta=18)
    disk = disk_points(6.0 * M, 20.0 * M)
    cam = camera_position(30.0 * M)
    north = vec4_rect_from_schwarzschild(3.0 * M, 0.0, 0.0, 0.0)
    print(
        f"points: horizon={len(horizon)} photon_sphere={len(photon_sphere)} disk={len(disk)}"
    )

    fig = plt.figure(figsize=(6, 6))
    ax = fig.add_subplot(projection="3d")
    ax.scatter(horizon[:, 0], horizon[:, 1], horizon[:, 2], s=2, c="black")
    ax.scatter(
        photon_sphere[:, 0],
        photon_sphere[:, 1],
        photon_sphere[:, 2],
        s=1,
        c="tab:blue",
        alpha=0.3,
    )
    ax.scatter(disk[:, 0], disk[:, 1], disk[:, 2], s=2, c="orange")
    ax.scatter([cam[0]], [cam[1]], [cam[2]], marker="^", c="red")
    ax.scatter([north[0]], [north[1]], [north[2]], marker="*", c="tab:blue")

    lim = 20.0 * M
    ax.set_xlim(-lim, lim)
    ax.set_ylim(-lim, lim)
    ax.set_zlim(-lim, lim)
    ax.set_title("blackhole-sim geometry (Schwarzschild -> Cartesian)")
    plt.show()


if __name__ == "__main__":
    main()
