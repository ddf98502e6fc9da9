"""An in-memory hospital register of doctors, patients, consultations and prescriptions, with a console menu."""

__version__ = "0.1.0"
__all__ = ["models", "hospital", "cli", "demo"]