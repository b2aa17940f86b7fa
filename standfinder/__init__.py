"""Stand Finder - match a personality-test chart URL to the closest stand."""

__version__ = "1.0.0"
