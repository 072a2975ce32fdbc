"""Part builders: one LaserCutFile per physical part.

Submodules:
  frame           Front plate with tile slots and mounting holes.
  tiles           Nested tile sheet with LED holes.
  diffuser        Acrylic LED diffuser.
  back_panel      Electronics plate with cable slot and guides.
  assembly_guide  Printable instruction sheet.
"""

from .frame import generate_main_frame
from .tiles import generate_tile_pieces
from .diffuser import generate_led_diffuser
from .back_panel import generate_back_panel
from .assembly_guide import generate_assembly_guide, assembly_instructions

__all__ = [
    "generate_main_frame", "generate_tile_pieces", "generate_led_diffuser",
    "generate_back_panel", "generate_assembly_guide", "assembly_instructions",
]
