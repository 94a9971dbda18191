"""Exceptions raised by the conversion engine."""


class TranscoderError(Exception):
    """Base class for conversion errors."""


class FormatError(TranscoderError):
    """Input could not be decoded as a JSON document."""


class UnsupportedConversionError(TranscoderError):
    """The requested conversion kind is not known."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Unsupported conversion type: {kind}")


class DiagramRendererError(TranscoderError):
    """The diagram sub-renderer is missing, not ready or failed on a block."""
