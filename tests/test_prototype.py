"""
Tests for the geometry helpers of the matplotlib prototype.
"""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from ui.prototype_matplotlib import camera_position, disk_points, sphere_points


class TestSpherePoints:
    def test_shape(self):
        pts = sphere_points(2.0, n_phi=10, n_theta=5)
        assert pts.shape == (50, 4)

    def test_all_on_sphere(self):
        pts = sphere_points(3.0)
        rho = np.linalg.norm(pts[:, :3], axis=1)
        np.testing.assert_allclose(rho, 3.0, rtol=1e-12)

    def test_poles_included(self):
        pts = sphere_points(2.0, n_phi=4, n_theta=3)
        assert pts[:, 2].max() == pytest.approx(2.0)
        assert pts[:, 2].min() == pytest.approx(-2.0)

    def test_time_slot(self):
        pts = sphere_points(2.0, t=4.0)
        assert np.all(pts[:, 3] == 4.0)


class TestDiskPoints:
    def test_equatorial(self):
        pts = disk_points(6.0, 20.0)
        np.testing.assert_allclose(pts[:, 2], 0.0, atol=1e-12)

    def test_radial_band(self):
        pts = disk_points(6.0, 20.0, n_r=4, n_phi=16)
        assert pts.shape == (64, 4)
        rho = np.hypot(pts[:, 0], pts[:, 1])
        assert rho.min() == pytest.approx(6.0)
        assert rho.max() == pytest.approx(20.0)


def test_camera_position_distance():
    cam = camera_position(30.0, phi=0.5, theta=1.0)
    assert np.linalg.norm(cam.dat[:3]) == pytest.approx(30.0)
    assert cam[3] == 0.0
