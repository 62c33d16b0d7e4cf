"""Exception hierarchy for autotest-core."""

from __future__ import annotations

from typing import Optional


class AutotestError(Exception):
    """Base class for every error raised by autotest-core."""


class ConfigurationError(AutotestError):
    """Configuration-level misuse (missing credential, unreadable template set)."""


class UnsupportedProviderError(AutotestError, ValueError):
    """Raised when a provider is requested for an unknown vendor id."""

    def __init__(self, vendor_id: str, supported: Optional[list[str]] = None):
        self.vendor_id = vendor_id
        self.supported = supported or []
        message = f"Unsupported provider: {vendor_id}."
        if self.supported:
            message += f" Supported providers: {', '.join(self.supported)}"
        super().__init__(message)


class ProviderError(AutotestError):
    """
    A vendor call failed at the transport or auth level.

    Attributes:
        vendor: Vendor id of the adapter that issued the call
        status: HTTP status returned by the vendor, None when no response arrived
        body: Response body (or transport error text)
    """

    def __init__(self, vendor: str, status: Optional[int], body: str, message: Optional[str] = None):
        self.vendor = vendor
        self.status = status
        self.body = body
        if message is None:
            status_text = status if status is not None else "no response"
            message = f"{vendor} API error ({status_text}): {body}"
        super().__init__(message)


class DecodeError(AutotestError):
    """A vendor response could not be decoded as structured data."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__("decode failed")


class InvalidStepError(AutotestError, ValueError):
    """A step carries an action tag that is not recognized."""


class SynthesisError(AutotestError):
    """A script could not be synthesized from the given test cases."""


class MergeError(AutotestError):
    """An existing script artifact could not be merged."""


class ExecutionError(AutotestError):
    """A single test case faulted while being executed."""

    def __init__(self, test_case_id: str, message: str):
        self.test_case_id = test_case_id
        super().__init__(message)
