"""
Custom exceptions for doubleslider.

This module provides domain-specific exceptions for better error handling
and clearer error messages throughout the package.

Only caller misuse is reported through exceptions. The interaction engine
itself is total over its input domain and never raises while handling a frame.
"""


class DoubleSliderError(Exception):
    """Base exception for all doubleslider errors."""

    pass


class ConfigError(DoubleSliderError):
    """Raised when a slider configuration is invalid or cannot be loaded."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        config_path: str | None = None,
    ):
        """
        Initialize ConfigError.

        Parameters
        ----------
        message : str
            Error message
        field_name : str | None
            Name of the invalid configuration field
        config_path : str | None
            Path to the preset file, if the config came from disk
        """
        self.field_name = field_name
        self.config_path = config_path

        full_message = message
        if field_name:
            full_message = f"{full_message} (field: {field_name})"
        if config_path:
            full_message = f"{full_message} (config: {config_path})"

        super().__init__(full_message)


class NumericTypeError(DoubleSliderError):
    """Raised when a value type cannot be used as a slider value."""

    def __init__(self, message: str, type_name: str | None = None):
        """
        Initialize NumericTypeError.

        Parameters
        ----------
        message : str
            Error message
        type_name : str | None
            Name of the rejected type or dtype
        """
        self.type_name = type_name

        full_message = message
        if type_name:
            full_message = f"{full_message} (type: {type_name})"

        super().__init__(full_message)


class ReplayScriptError(DoubleSliderError):
    """Raised when a recorded gesture script is malformed."""

    def __init__(
        self,
        message: str,
        script_path: str | None = None,
        frame_index: int | None = None,
    ):
        """
        Initialize ReplayScriptError.

        Parameters
        ----------
        message : str
            Error message
        script_path : str | None
            Path to the script file
        frame_index : int | None
            Index of the offending frame entry
        """
        self.script_path = script_path
        self.frame_index = frame_index

        full_message = message
        if frame_index is not None:
            full_message = f"{full_message} (frame: {frame_index})"
        if script_path:
            full_message = f"{full_message} (path: {script_path})"

        super().__init__(full_message)
