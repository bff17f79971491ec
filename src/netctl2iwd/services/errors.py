"""Conversion error kinds."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for every reason a single profile cannot be converted."""

    kind = "ConversionError"
    message = "Conversion failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @staticmethod
    def from_os_error(exc: OSError) -> ConversionError:
        """Map an OS-level failure onto the closed set of conversion errors."""
        if isinstance(exc, PermissionError):
            return PermissionDeniedError()
        if isinstance(exc, FileExistsError):
            return DestinationExistsError()
        return ConversionOSError()


class ProfileParseError(ConversionError):
    kind = "ParseError"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Unable to parse profile: {detail}")


class NotWirelessError(ConversionError):
    kind = "NotWireless"
    message = "Not a wireless profile"


class MissingKeysError(ConversionError):
    kind = "MissingKeys"
    message = "Key information missing"


class MissingSSIDError(ConversionError):
    kind = "MissingSSID"
    message = "SSID missing"


class UnsupportedSecurityError(ConversionError):
    kind = "Unsupported"
    message = "Unsupported security type"


class PermissionDeniedError(ConversionError):
    kind = "PermissionDenied"
    message = "Unable to open file"


class DestinationExistsError(ConversionError):
    kind = "FileExists"
    message = "File exists, refusing to overwrite"


class ConversionOSError(ConversionError):
    kind = "OSError"
    message = "Unknown error"
