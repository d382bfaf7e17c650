"""Gamepad events, cached input state, backend code tables and a controller database filter."""

__version__ = "0.1.0"
__all__ = ["controllerdb", "ev", "state", "utils", "wgi_codes", "wgi_reading", "xinput"]