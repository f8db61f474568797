"""disklens - streaming disk usage scanner.

Scans a directory one level deep, sizes each child recursively and
streams the results while the scan is still running.
"""

__version__ = "0.1.0"
