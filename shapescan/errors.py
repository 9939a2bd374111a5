class ShapeScanError(Exception):
    """Base class for errors raised outside the detection core."""


class ImageLoadError(ShapeScanError):
    """The image source could not be read or decoded."""


class ManifestError(ShapeScanError):
    """An evaluation manifest is unreadable or does not match the schema."""
