from materials.material import Material, MaterialType
from materials.smooth import Smooth
from materials.metal import Metal
from materials.dielectric import Dielectric

__all__ = ["Material", "MaterialType", "Smooth", "Metal", "Dielectric"]
