"""deutschpfad - German lessons, leveled review and a B1 mock exam for Bangla speakers."""

__version__ = "0.1.0"
