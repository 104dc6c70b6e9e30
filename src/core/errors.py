class ConfigurationError(ValueError):
    """Invalid render configuration, raised before any rendering starts."""
