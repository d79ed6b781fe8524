"""YES TV API: catalog, clients, phone OTP and playback logs over JSON files."""

__version__ = "0.1.0"
