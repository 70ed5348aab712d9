"""Custom exception hierarchy for the proposal discovery service."""


class DiscoveryError(Exception):
    """Base exception for all discovery errors."""


class SourceUnavailable(DiscoveryError):
    """The proposal registry could not produce a proposal list."""


class QualitySourceError(DiscoveryError):
    """The quality oracle could not be queried."""


class QualityRecordDecodeError(DiscoveryError):
    """A quality record did not decode into a proposal reference."""


class ConfigurationError(DiscoveryError):
    """Error in service configuration."""
