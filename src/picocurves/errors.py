"""
Error kinds raised by the unified key layer.

Every public operation catches whatever the underlying curve code raises and
re-raises exactly one of these, chained to the original exception.
"""

from __future__ import annotations


class CurveError(ValueError):
    """Base class for all picocurves errors."""


class KeyGenerationError(CurveError):
    """Random-byte source or curve key generation failed."""


class PolicyError(CurveError):
    """Requested representation or feature is refused by this layer."""


class PublicKeyDerivationError(CurveError):
    """Underlying point derivation rejected the private key."""


class SharedSecretError(CurveError):
    """Key agreement failed or produced a degenerate secret."""


class SigningError(CurveError):
    """Signature generation failed."""


class ConversionError(CurveError):
    """JWK encode/decode failed."""


class ValidationError(CurveError):
    """Malformed input to a length-sensitive check."""


class UnknownCurveError(CurveError):
    """Curve metadata or name does not match any supported curve."""


__all__: tuple[str, ...] = (
    "ConversionError",
    "CurveError",
    "KeyGenerationError",
    "PolicyError",
    "PublicKeyDerivationError",
    "SharedSecretError",
    "SigningError",
    "UnknownCurveError",
    "ValidationError",
)
