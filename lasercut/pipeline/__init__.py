"""Pipeline stages: options, geometry, parts, svg, files.

Each run flows straight through, with no state kept between calls:

  options   parse and validate the user's choices
  geometry  plan the plate and tile sheet once (shared by every part)
  parts     build cut / engrave layers for each physical part
  svg       serialize one part's layers into a millimetre SVG document
  files     assemble the ordered list of output files
"""

from .files import (
    LaserCutRun, run_laser_cut, generate_laser_cut_files, files_to_dict, plan_summary,
)

__all__ = [
    "LaserCutRun", "run_laser_cut", "generate_laser_cut_files",
    "files_to_dict", "plan_summary",
]
