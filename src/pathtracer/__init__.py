"""CPU Monte Carlo path tracer for scenes of spheres."""
from pathtracer.core.vector import Vector3, Point3, Color
from pathtracer.materials.lambertian import Lambertian, make_lambertian
from pathtracer.materials.metal import Metal, make_metal
from pathtracer.materials.dielectric import Dielectric, make_dielectric
from pathtracer.materials.diffuse_light import DiffuseLight, make_emission
from pathtracer.renderer.raytracer import Renderer
from pathtracer.renderer.settings import RenderSettings

__version__ = "1.0.0"
