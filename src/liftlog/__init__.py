"""liftlog: in-memory workout templates and sessions."""

__version__ = "0.1.0"
