"""Load-cell scale building blocks: frame protocol, HX711 decoding, Kalman filters, LCD and serial-line helpers."""

__version__ = "0.1.0"

__all__ = [
    "convert",
    "message",
    "kalman",
    "lcd",
    "uartline",
    "loadcell",
]