"""torchaberth: simultaneous polynomial root finding with Aberth's method."""

from . import polynomial, root_finding

__all__ = [
    "polynomial",
    "root_finding",
]

__version__ = "0.1.0"
