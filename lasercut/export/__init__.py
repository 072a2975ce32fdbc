"""Export: write generated files to disk, one at a time."""

from .download import (
    DOWNLOAD_DELAY_S,
    SVG_MEDIA_TYPE,
    download_all_laser_cut_files,
    download_laser_cut_file,
)

__all__ = [
    "DOWNLOAD_DELAY_S", "SVG_MEDIA_TYPE",
    "download_laser_cut_file", "download_all_laser_cut_files",
]
