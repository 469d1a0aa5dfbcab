from typing import Iterable, Optional
import json
import logging

from app.core.exceptions import ContentDecodeError

logger = logging.getLogger(__name__)


class SectionContentStore:
    """Section name -> text for one business plan being edited.

    Keys are never removed. Sections that drop out of the active template keep
    their text so switching back to that template restores it.
    """

    def __init__(self, content: Optional[dict] = None):
        self._sections: dict[str, str] = {}
        for name, text in (content or {}).items():
            self._sections[str(name)] = self._coerce(text)

    @staticmethod
    def _coerce(value) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return json.dumps(value, ensure_ascii=False)

    def reconcile(self, sections: Iterable[str]) -> list[str]:
        """Add an empty entry for every missing section; returns the names added."""
        added = []
        for name in sections:
            if name not in self._sections:
                self._sections[name] = ""
                added.append(name)
        return added

    def set_content(self, section_name: str, text: str) -> None:
        self._sections[section_name] = text

    def get_content(self, section_name: str) -> str:
        return self._sections.get(section_name, "")

    def serialize(self) -> str:
        return json.dumps(self._sections, ensure_ascii=False)

    @classmethod
    def deserialize(cls, blob: Optional[str], strict: bool = False) -> "SectionContentStore":
        if not blob:
            return cls()

        try:
            data = json.loads(blob)
        except (TypeError, ValueError) as e:
            if strict:
                raise ContentDecodeError(f"Business plan content is not valid JSON: {str(e)}") from e
            logger.warning(f"Discarding unparseable business plan content: {str(e)}")
            return cls()

        if not isinstance(data, dict):
            if strict:
                raise ContentDecodeError("Business plan content must be a JSON object")
            logger.warning(f"Discarding business plan content of type {type(data).__name__}")
            return cls()

        return cls(data)

    def as_dict(self) -> dict[str, str]:
        return dict(self._sections)

    def items(self):
        return self._sections.items()

    def __contains__(self, section_name) -> bool:
        return section_name in self._sections

    def __iter__(self):
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SectionContentStore):
            return NotImplemented
        return self._sections == other._sections

    def __repr__(self) -> str:
        return f"SectionContentStore({self._sections!r})"
