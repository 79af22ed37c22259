"""
Format Resolver - Pure functions mapping file names to supported formats.

The extension table is an immutable value; the dispatcher owns one and every
lookup (resolve, is_supported, listing, format_of) goes through it.
"""
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from ..domain.value_objects import UNKNOWN_FORMAT, SupportedFormat


def extension_of(file_name: str) -> str:
    """
    Get the lower-cased extension of a file name.
    
    Args:
        file_name: File name or path (e.g. 'Report.DOCX')
    
    Returns:
        Extension including the leading dot, or '' if there is none
    """
    return Path(file_name).suffix.lower()


class FormatTable:
    """
    Immutable, ordered mapping of file extensions to formats.
    
    Order of construction is the order reported by extensions(), which
    callers use verbatim in user-facing messages.
    """

    def __init__(self, entries: Iterable[Tuple[str, SupportedFormat]]):
        mapping = {}
        for extension, file_format in entries:
            extension = extension.lower()
            if not extension.startswith('.'):
                extension = f'.{extension}'
            if extension in mapping:
                raise ValueError(f"Duplicate extension in format table: {extension}")
            mapping[extension] = SupportedFormat(file_format)
        self._mapping: Mapping[str, SupportedFormat] = MappingProxyType(mapping)

    def __repr__(self) -> str:
        return f"FormatTable({list(self._mapping.items())!r})"

    def lookup(self, extension: str) -> Optional[SupportedFormat]:
        return self._mapping.get(extension.lower())

    def extensions(self) -> List[str]:
        return list(self._mapping.keys())

    def formats(self) -> List[SupportedFormat]:
        """Distinct formats in table order."""
        return list(dict.fromkeys(self._mapping.values()))

    def resolve(self, file_name: str) -> Optional[SupportedFormat]:
        """
        Resolve the format of a file from its name.
        
        Args:
            file_name: Original file name (e.g. 'slides.PPTX')
        
        Returns:
            SupportedFormat, or None if the extension is not registered
        """
        return self.lookup(extension_of(file_name))

    def is_supported(self, file_name: str) -> bool:
        return self.resolve(file_name) is not None

    def format_of(self, file_name: str) -> Union[SupportedFormat, str]:
        """Like resolve(), but returns 'unknown' instead of None."""
        resolved = self.resolve(file_name)
        return resolved if resolved is not None else UNKNOWN_FORMAT


DEFAULT_FORMAT_TABLE = FormatTable([
    (".docx", SupportedFormat.DOCX),
    (".pdf", SupportedFormat.PDF),
    (".ppt", SupportedFormat.PRESENTATION),
    (".pptx", SupportedFormat.PRESENTATION),
])
