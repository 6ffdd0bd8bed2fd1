"""
Application constants and metadata.
"""

# Application info
APP_NAME = "ngxlex"
APP_VERSION = "0.1.0"

# Default values
DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_ENCODING = "utf-8"
