# ffmovie/domain/errors.py
from __future__ import annotations

from typing import Optional

from ffmovie.domain.enums.error_code import ErrorCode


class MovieError(Exception):
    """
    Base error for everything raised by ffmovie.

    Every error carries a stable numeric `code` next to its message, and the
    captured tool output when there was one.
    """
    default_code: Optional[ErrorCode] = None

    def __init__(self, message: str, code: Optional[int] = None, output: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.output = output

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"[{int(self.code)}] {self.message}"


class BinaryNotFoundError(MovieError):
    """The external tool did not answer with its version banner (missing or wrong binary)."""


class InvalidArgumentError(MovieError, ValueError):
    """A caller-supplied value is outside its valid domain."""


class MovieRuntimeError(MovieError, RuntimeError):
    """The tool ran but the requested result could not be produced."""


class FrameToolError(MovieRuntimeError):
    """A known error phrase was found in the frame extraction output."""
    default_code = ErrorCode.FRAME_TOOL_ERROR

    def __init__(self, message: str, phrase: str, code: Optional[int] = None, output: Optional[str] = None):
        super().__init__(message, code=code, output=output)
        self.phrase = phrase


class FrameNotWrittenError(MovieRuntimeError):
    """The tool finished without writing the frame file and reported nothing recognisable."""
    default_code = ErrorCode.FRAME_NOT_WRITTEN
