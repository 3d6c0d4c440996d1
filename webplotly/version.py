# webplotly/version.py
__version__ = "0.2.0"

# Sent as the `platform` field with every request.
PLATFORM = "Python"
