"""
Domain entities - Core objects exchanged with the extraction core.
These are plain values; nothing here touches the filesystem.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .value_objects import ErrorKind, SlideUnitKind


@dataclass(frozen=True)
class ExtractionRequest:
    """
    A single extraction job.
    
    file_path points at the durably stored upload; original_name is the
    untrusted client-side name and is only used to sniff the extension.
    """
    file_path: Union[str, Path]
    original_name: str


@dataclass(frozen=True)
class ExtractionResult:
    """
    Outcome of an extraction: either text or an error, never both.
    
    Build instances with ExtractionResult.ok() / ExtractionResult.err().
    """
    text: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    def __post_init__(self):
        has_text = self.text is not None
        has_error = self.error_kind is not None
        if has_text == has_error:
            raise ValueError("ExtractionResult must carry either text or an error, not both")
        if has_error and not self.message:
            raise ValueError("Failed ExtractionResult requires a message")
        if has_text and self.message is not None:
            raise ValueError("Successful ExtractionResult cannot carry an error message")

    @classmethod
    def ok(cls, text: str) -> "ExtractionResult":
        return cls(text=text)

    @classmethod
    def err(cls, kind: ErrorKind, message: str) -> "ExtractionResult":
        return cls(error_kind=kind, message=message)

    @property
    def success(self) -> bool:
        return self.error_kind is None

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize into the payload shape used by upload handlers.
        
        Returns:
            {"success": True, "text": ...} or
            {"success": False, "error": ..., "kind": ...}
        """
        if self.success:
            return {"success": True, "text": self.text}
        return {"success": False, "error": self.message, "kind": self.error_kind.value}


@dataclass(frozen=True)
class SlideUnit:
    """Text of one slide or one notes page, addressed by its 1-based position in the deck."""
    ordinal_index: int
    kind: SlideUnitKind
    text: str

    def is_empty(self) -> bool:
        return not self.text.strip()

    def render(self) -> str:
        return f"{self.kind.value} {self.ordinal_index}:\n{self.text}\n\n"
