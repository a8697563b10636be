class ChartConfigError(ValueError):
    """Raised when a chart or series is configured with values the engine cannot draw."""
