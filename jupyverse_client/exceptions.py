from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from httpx import Response


class ContentsError(Exception):
    """Base class for every error raised by the contents client."""


class AjaxError(ContentsError):
    """The request didn't complete, or its body couldn't be read."""

    def __init__(
        self,
        response: Response | None = None,
        status_text: str = "",
        error: BaseException | None = None,
    ):
        self.response = response
        self.status_text = status_text
        self.error = error
        super().__init__(status_text or str(error))

    @property
    def status(self) -> int:
        if self.response is None:
            return 0
        return self.response.status_code


class InvalidStatusError(ContentsError):
    def __init__(self, status: int, status_text: str = "", message: str | None = None):
        self.status = status
        self.status_text = status_text
        if message is None:
            message = f"Invalid Status: {status}"
        super().__init__(message)


class DirectoryNotFoundError(InvalidStatusError):
    def __init__(self, status: int = 400, status_text: str = ""):
        super().__init__(status, status_text, message="Directory not found")


class ContentsValidationError(ContentsError):
    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        super().__init__("; ".join(errors))
