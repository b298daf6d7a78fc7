"""Sample message service: a FastAPI app that stores greetings in a database."""

__version__ = "1.0.0"
