"""Pydantic models describing the outcome of type-map loads."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..exceptions import MimeTypemapError


class LoadResult(BaseModel):
    """Outcome of loading one type-map source into a registry.

    :param source: Description of the loaded source (path, URL or stream)
    :type source: str
    :param bindings: Number of extension bindings applied by this load
    :type bindings: int
    :param error: Error message if the load failed
    :type error: Optional[str]
    :param error_code: Machine-readable error code if the load failed
    :type error_code: Optional[str]
    :param details: Additional error context
    :type details: Dict[str, Any]
    """

    source: str = Field(..., description="Path, URL or stream that was loaded")
    bindings: int = Field(0, description="Extension bindings applied")
    error: Optional[str] = Field(None, description="Failure message")
    error_code: Optional[str] = Field(None, description="Failure code")
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Additional failure context"
    )

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @classmethod
    def from_error(
        cls, source: str, error: BaseException, bindings: int = 0
    ) -> "LoadResult":
        """Build a failed result from an exception.

        :param source: Description of the source
        :type source: str
        :param error: The exception that ended the load
        :type error: BaseException
        :param bindings: Bindings applied before the failure
        :type bindings: int
        :return: Failed load result
        :rtype: LoadResult
        """
        if isinstance(error, MimeTypemapError):
            return cls(
                source=source,
                bindings=bindings,
                error=error.message,
                error_code=error.code,
                details=error.details,
            )
        return cls(
            source=source,
            bindings=bindings,
            error=str(error),
            error_code=type(error).__name__,
        )


__all__ = ["LoadResult"]
