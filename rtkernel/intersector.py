"""
intersector.py - Ray/sphere intersection

The ray is moved into the sphere's object space with the inverse of the
sphere's transform, where the sphere is the unit sphere at the origin.
Substituting P(t) = O + tD into |P|² = 1 gives the quadratic

    a t² + b t + c = 0
    a = D · D
    b = 2 (D · (O - origin))
    c = (O - origin) · (O - origin) - 1

whose real roots are the intersection parameters.

Project: rtkernel
"""

import logging

import numpy as np
from typing import Tuple

from .rays import Ray
from .spheres import Sphere
from .vectors import GeometricVector

logger = logging.getLogger(__name__)


def intersect(sphere: Sphere, ray: Ray) -> Tuple[float, ...]:
    """
    Find where a ray meets a sphere.

    Parameters
    ----------
    sphere : Sphere
        Target sphere
    ray : Ray
        Ray in world space

    Returns
    -------
    tuple of float
        Empty if the ray misses, otherwise the two ray parameters in
        ascending order (equal for a tangent hit). Roots behind the
        origin (t < 0) are included.

    Raises
    ------
    DegenerateMatrixError
        If the sphere's transform is not invertible
    """
    local_ray = ray.transform(sphere.inverse_transform())

    sphere_to_ray = local_ray.origin - GeometricVector.point(0.0, 0.0, 0.0)

    a = local_ray.direction.dot(local_ray.direction)
    b = 2.0 * local_ray.direction.dot(sphere_to_ray)
    c = sphere_to_ray.dot(sphere_to_ray) - 1.0

    discriminant = b ** 2 - 4.0 * a * c
    if discriminant < 0:
        logger.debug("Ray %r misses sphere %d", ray, sphere.identifier)
        return ()

    root = np.sqrt(discriminant)
    t1 = (-b - root) / (2.0 * a)
    t2 = (-b + root) / (2.0 * a)
    return float(t1), float(t2)
