"""Exit codes used by the marketfeed CLI."""

VALIDATION_EXIT_CODE = 2
TRANSPORT_EXIT_CODE = 3
DECODE_EXIT_CODE = 4

__all__ = ["VALIDATION_EXIT_CODE", "TRANSPORT_EXIT_CODE", "DECODE_EXIT_CODE"]
