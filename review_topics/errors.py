"""Extraction failure kinds."""


class ExtractionError(Exception):
    """Topic extraction could not produce topics."""

    def __init__(self, message: str = "Topic extraction failed"):
        self.message = message
        super().__init__(self.message)


class NoValidInputError(ExtractionError):
    """Corpus has no non-empty string documents."""

    def __init__(self, message: str = "No valid review texts available for topic extraction"):
        super().__init__(message)


class InferenceFailure(ExtractionError):
    """Topic inference failed on a valid corpus."""
