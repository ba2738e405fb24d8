"""Exceptions raised throughout the package."""


class GenjutsuError(Exception):
    """Base class for all package errors; carries a short detail message."""

    prefix = "Error"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class ModelNotLoadedError(GenjutsuError):
    """A model was used before it was loaded."""

    prefix = "Model not loaded"


class InvalidConfigError(GenjutsuError):
    """A configuration or an input did not meet a pipeline's requirements."""

    prefix = "Invalid configuration"


class GenerationFailedError(GenjutsuError):
    """A generation run did not produce a result."""

    prefix = "Generation failed"


class InvalidGaussianCloudError(GenjutsuError):
    """A Gaussian cloud or its serialized form is malformed."""

    prefix = "Invalid Gaussian cloud"


class RenderError(GenjutsuError):
    """Rendering a scene failed."""

    prefix = "Render error"