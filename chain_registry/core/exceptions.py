"""Shared exceptions module."""

from typing import Optional


class ChainRegistryException(Exception):
    """Base exception for chain registry access."""

    pass


class RegistryTransportError(ChainRegistryException):
    """Exception raised when a request never produced an HTTP response.

    Covers connection refusal, DNS failures and timeouts reported by the transport.
    """

    def __init__(self, url: str, reason: Optional[str] = "Transport failure"):
        """Create a new RegistryTransportError instance.

        Args:
        ----
            url (str): The URL that was being requested.
            reason (str, optional): Description of the failure. Has default message.

        """
        self.url = url
        self.reason = reason
        self.message = f"Request to {url} failed: {reason}"
        super().__init__(self.message)


class RegistryHTTPError(ChainRegistryException):
    """Exception raised when the registry host answers with an unexpected status."""

    def __init__(
        self,
        url: str,
        status_code: int,
        message: Optional[str] = None,
        retry_after: Optional[float] = None,
    ):
        """Create a new RegistryHTTPError instance.

        Args:
        ----
            url (str): The URL that was requested.
            status_code (int): The HTTP status code of the response.
            message (str, optional): Override for the error message.
            retry_after (float, optional): Seconds from the Retry-After header, if sent.

        """
        self.url = url
        self.status_code = status_code
        self.retry_after = retry_after
        self.message = message or f"Request to {url} returned HTTP {status_code}"
        super().__init__(self.message)


class RegistryDecodeError(ChainRegistryException):
    """Exception raised when a response body does not match the expected schema."""

    def __init__(self, url: str, reason: Optional[str] = "Invalid response body"):
        """Create a new RegistryDecodeError instance.

        Args:
        ----
            url (str): The URL whose body failed to decode.
            reason (str, optional): Description of the decoding failure. Has default message.

        """
        self.url = url
        self.reason = reason
        self.message = f"Could not decode response from {url}: {reason}"
        super().__init__(self.message)
