"""
Exception types raised by the Baseline compatibility engine.

An unknown feature is not an error: it resolves to the ``unknown`` status.
"""


class BaselineCheckerError(Exception):
    """Base class for all engine errors."""


class NotInitializedError(BaselineCheckerError):
    """A diagnostic engine was used before a resolver was attached."""


class NotReadyError(BaselineCheckerError):
    """The linter was used before ``initialize()`` completed."""


class DuplicateFeatureError(BaselineCheckerError):
    """A feature id was registered twice."""

    def __init__(self, feature_id: str):
        super().__init__(f"Feature already registered: {feature_id}")
        self.feature_id = feature_id


class RegistrySealedError(BaselineCheckerError):
    """The registry no longer accepts new features."""


class RegistryLoadError(BaselineCheckerError):
    """Feature data could not be loaded."""


class ScanInProgressError(BaselineCheckerError):
    """A scan is already running on this scanner instance."""
