"""Parser option schema using Pydantic for validation.

Options are validated up front so a misspelled key or a negative limit is
reported before any configuration text is parsed.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class ParserConfig(BaseModel):
    """Options controlling how dhcpcd.conf text is parsed.

    Attributes:
        fail_fast: Stop at the first failing line instead of collecting
            every failure.
        require_trailing_newline: Reject a final line that is not
            terminated by a newline.
        max_errors: Stop collecting after this many failures (0 = unlimited).
    """

    fail_fast: bool = False
    require_trailing_newline: bool = False
    max_errors: int = Field(default=0, ge=0)

    model_config = {"extra": "forbid", "frozen": True}

    @classmethod
    def default(cls) -> "ParserConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary.

        A nested ``parser`` table is unwrapped, so both ``{"fail_fast": true}``
        and ``{"parser": {"fail_fast": true}}`` are accepted.

        Raises:
            ValidationError: If configuration is invalid.
        """
        if set(data) == {"parser"} and isinstance(data["parser"], dict):
            data = data["parser"]
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    def error_limit_reached(self, count: int) -> bool:
        """Return True when ``count`` collected failures should end the parse."""
        if self.fail_fast:
            return count >= 1
        return bool(self.max_errors) and count >= self.max_errors
