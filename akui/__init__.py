"""Widget toolkit: geometry, messages, signals, windows, forms, buttons, spin boxes, settings, input tracking and a tick timer."""

__version__ = "0.1.0"