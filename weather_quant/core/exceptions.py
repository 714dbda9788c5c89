"""Exception types raised by the weather-quant core."""


class WeatherQuantError(Exception):
    """Base class for all weather-quant errors."""


class InvalidInputError(WeatherQuantError, ValueError):
    """
    Raised for malformed numeric input.

    Covers non-numeric or non-finite temperatures, forecast values, bracket
    bounds and market probabilities, as well as bracket definitions that do
    not describe a usable interval. Values are never coerced to a default.
    """


class UnknownPipelineError(WeatherQuantError, LookupError):
    """Raised when a pipeline identifier does not match any registered pipeline."""

    def __init__(self, identifier, available):
        self.identifier = identifier
        self.available = list(available)
        super().__init__(
            f"Pipeline '{identifier}' not found. Available: {', '.join(self.available)}"
        )


class DegenerateDistributionWarning(UserWarning):
    """
    Informational flag attached to a bracket distribution.

    Returned (never raised) when every forecast has the same value, so the
    distribution width comes entirely from the standard deviation floor.
    """
