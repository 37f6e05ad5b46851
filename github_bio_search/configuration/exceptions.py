"""Contains exceptions raised when reconciling application configuration."""


class ConfigurationError(Exception):
    """Raised when a configuration element has an invalid value."""

    def __init__(self, name: str, cli_name: str, env_name: str | None, reason: str) -> None:
        """Initializes the exception with the name of the invalid element and why it is invalid."""
        super().__init__(f"Invalid configuration element {name}: {reason}")
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name
        self.reason = reason
