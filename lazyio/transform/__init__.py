from .effects import for_each, tap, tap_error
from .filter import filter_or_fail
from .zip import zip, zip_left, zip_right

__all__ = (
    # Zip
    "zip",
    "zip_left",
    "zip_right",
    # Effects
    "for_each",
    "tap",
    "tap_error",
    # Filter
    "filter_or_fail",
)
