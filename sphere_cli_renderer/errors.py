#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


class SphereRendererError(Exception):
    """Base class for errors raised by the sphere renderer."""


class TextureLoadError(SphereRendererError, OSError):
    """The texture file could not be opened or read."""

    def __init__(self, path, reason=None):
        self.path = str(path)
        self.reason = reason
        message = f"Could not read texture '{self.path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class TextureFormatError(SphereRendererError, ValueError):
    """The texture text does not describe a usable character grid."""
