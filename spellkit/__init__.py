"""Hash-table spell checker with queue, stack and blood-type inheritance utilities."""

__version__ = "0.1.0"