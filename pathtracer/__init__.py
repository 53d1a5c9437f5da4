"""A small Monte Carlo path tracer: vectors, rays, spheres and planes, diffuse and
emissive materials, a pinhole camera, and a renderer for a Cornell box."""

__version__ = "0.1.0"

__all__ = ["camera", "geometry", "material", "ray", "render", "vec3"]