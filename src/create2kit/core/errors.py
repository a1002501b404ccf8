"""Exception hierarchy for address derivation and deployment helpers."""


class Create2Error(Exception):
    """Base class for all create2kit errors."""


class ValidationError(Create2Error, ValueError):
    """Input rejected before any output was produced."""


class InvalidAddressError(ValidationError):
    """Address is not 20 bytes or is not valid hex."""


class InvalidSaltError(ValidationError):
    """Salt does not fit in 256 unsigned bits."""


class InvalidInitCodeError(ValidationError):
    """Init code (or its hash) has the wrong type or length."""


class EncodingError(ValidationError):
    """Hex decoding or ABI encoding failed."""


class ConfigError(Create2Error, ValueError):
    """Client configuration is missing or malformed."""


class DeploymentError(Create2Error):
    """Deployment transaction failed or landed at an unexpected address."""


class AlreadyDeployedError(DeploymentError):
    """Code already exists at the predicted address."""

    def __init__(self, address: str):
        super().__init__(f"Contract already deployed at {address}")
        self.address = address
