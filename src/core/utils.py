# core/utils.py
from core.vector import Vector3

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere, drawn from the given
    random.Random-compatible sampler.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        # Points too close to the origin cannot be normalized reliably.
        if 1e-12 < p.dot(p) < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
