"""Go release listing and caching, SDK download and unpacking, and go.mod reading."""

__version__ = "0.1.0"