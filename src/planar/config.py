"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps the logger namespace and log formatting in one
   place instead of scattering string literals through the package.
2. Consistency: Every handler created by `setup_logging` shares the same
   format, so console and file output line up.

Exports:
    LOGGER_NAME (str): Root logger namespace of the package.
    LOG_FORMAT (str): Record format used by all handlers.
    LOG_DATE_FORMAT (str): Timestamp format used by all handlers.
"""

# Global Constants
LOGGER_NAME: str = "planar"

# Format: Time - Module - Level - Message
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'
