# logline/errors/config_error.py
class ConfigurationError(RuntimeError):
    """
    Raised when logger configuration loaded from the environment is invalid.
    """

    pass


__all__ = ["ConfigurationError"]
