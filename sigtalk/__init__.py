"""Send text between processes one bit at a time over SIGUSR1 and SIGUSR2.

Also provides small ASCII, byte-buffer, string and formatted-output helpers.
"""

__version__ = "0.1.0"