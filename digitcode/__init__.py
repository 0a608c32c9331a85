"""Fixed-length code input widget model: profiles, code state, focus and control flags."""

__version__ = "0.1.0"

__all__ = ["control_flags", "profile", "digit_code", "focus", "widget"]