"""Driver-distraction restriction demo: decode restriction flags, limit UI text."""

__version__ = "0.1.0"
