"""
Error taxonomy for the résumé pipeline.

Only InvalidInput reaches callers. ModelUnavailable and its subclass are
raised inside the model strategies and absorbed by the pipeline, which then
falls back to the rule-based strategies.
"""


class ResumePipelineError(RuntimeError):
    def __init__(self, message: str, *, code: str = "pipeline_error"):
        super().__init__(message)
        self.code = code


class InvalidInput(ResumePipelineError):
    """The payload for an operation that needs résumé data is not an object."""

    def __init__(self, message: str = "Resume data must be provided.", *, code: str = "invalid_input"):
        super().__init__(message, code=code)


class ModelUnavailable(ResumePipelineError):
    """The model is unconfigured, failed, timed out or returned unusable output."""

    def __init__(self, message: str = "Language model unavailable.", *, code: str = "llm_unavailable"):
        super().__init__(message, code=code)


class MalformedModelOutput(ModelUnavailable):
    """The model returned JSON that lacks the expected keys."""

    def __init__(self, message: str = "Language model returned malformed output.", *, code: str = "llm_invalid"):
        super().__init__(message, code=code)
