"""
Exceptions raised by the scanning layer of Grocery Split

Parsing and splitting never raise; these are for callers deciding what to
tell the user after a scan.
"""

from data_models import ErrorDisplayInfo


class GrocerySplitError(Exception):
    """Base exception for all Grocery Split errors."""
    title = "Error"
    user_message = "Something went wrong. Please try again."
    recovery_action = ""

    def __init__(self, message: str = None):
        super().__init__(message or self.user_message)


class ScanningError(GrocerySplitError):
    """A scan produced nothing usable."""
    title = "Scanning Error"
    user_message = "Scanning failed. Please try again or use a different method."
    recovery_action = "retry"


class NoTextFoundError(ScanningError):
    """The recognizer returned no text at all."""
    user_message = ("No text could be detected in your image. "
                    "Make sure the receipt is clearly visible and well-lit.")
    recovery_action = "retake"


class InvalidReceiptImageError(ScanningError):
    """The recognized text does not look like a receipt."""
    user_message = ("This doesn't appear to be a receipt image. "
                    "Please select an image that shows purchase details.")
    recovery_action = "retake"


class NoItemsFoundError(ScanningError):
    """Receipt-like text with no parsable item lines."""
    user_message = ("We couldn't find any items with prices in this image. "
                    "You can add items manually instead.")
    recovery_action = "manual_entry"


class NoReceiptFoundError(ScanningError):
    """A decoded barcode/QR payload maps to no known receipt."""
    user_message = ("We couldn't find any receipt information in this code. "
                    "Please verify the QR code or barcode is from a supported merchant.")
    recovery_action = "retry"


def describe_error(error: Exception) -> ErrorDisplayInfo:
    """Turn any exception into something the UI can show"""
    if isinstance(error, GrocerySplitError):
        return ErrorDisplayInfo(
            title=error.title,
            message=str(error),
            recovery_action=error.recovery_action,
        )
    return ErrorDisplayInfo(
        title=GrocerySplitError.title,
        message="Something went wrong. Please try again or contact support if the issue persists.",
    )
