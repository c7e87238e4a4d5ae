from .surfaces import classify, classify_grid, elevation, band_color, band_histogram

__all__ = ["classify", "classify_grid", "elevation", "band_color", "band_histogram"]
