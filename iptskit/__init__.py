"""Heatmap convolution and maxima search, HID usages and uinput output for IPTS touchscreens."""

__version__ = "0.1.0"
__all__ = ["convolution", "convolution5", "maximas", "uinput", "usage"]