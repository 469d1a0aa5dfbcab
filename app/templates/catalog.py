"""Business plan template catalog.

A template identifier is either one of the predefined keys below or a custom
identifier that carries its own sections inline:

    custom:<name>:<section 1>\\n<section 2>\\n...

Resolution never fails; anything that cannot be understood resolves to the
standard template.
"""
from dataclasses import dataclass
from typing import Optional
import logging

from app.core.exceptions import InvalidTemplateError
from app.templates.standard_template import STANDARD_TEMPLATE
from app.templates.tech_startup_template import TECH_STARTUP_TEMPLATE
from app.templates.food_business_template import FOOD_BUSINESS_TEMPLATE

logger = logging.getLogger(__name__)

CUSTOM_PREFIX = "custom:"
DEFAULT_TEMPLATE_ID = "standard"

PREDEFINED_TEMPLATES = {
    "standard": STANDARD_TEMPLATE,
    "tech-startup": TECH_STARTUP_TEMPLATE,
    "food-business": FOOD_BUSINESS_TEMPLATE,
}


@dataclass(frozen=True)
class CustomTemplate:
    name: str
    sections: tuple

    @property
    def template_id(self) -> str:
        return build_custom_template_id(self.name, self.sections)


def is_custom_template(template_id: Optional[str]) -> bool:
    return isinstance(template_id, str) and template_id.startswith(CUSTOM_PREFIX)


def _split_sections(blob: str) -> list[str]:
    return [line.strip() for line in blob.split("\n") if line.strip()]


def parse_custom_template(template_id: Optional[str]) -> Optional[CustomTemplate]:
    """Decode a custom identifier, or return None when it is not a usable one."""
    if not is_custom_template(template_id):
        return None

    # Only the first two colons are separators; section names may contain colons
    parts = template_id.split(":", 2)
    if len(parts) < 3:
        return None

    _, name, blob = parts
    sections = _split_sections(blob)
    if not sections:
        return None

    return CustomTemplate(name=name, sections=tuple(sections))


def build_custom_template_id(name: str, sections) -> str:
    if ":" in name or "\n" in name:
        raise InvalidTemplateError("Template name cannot contain ':' or line breaks")

    cleaned = []
    for section in sections:
        if "\n" in section.strip():
            raise InvalidTemplateError(f"Section name cannot span lines: {section!r}")
        if section.strip():
            cleaned.append(section.strip())

    if not cleaned:
        raise InvalidTemplateError("A custom template needs at least one section")

    return f"{CUSTOM_PREFIX}{name}:" + "\n".join(cleaned)


def default_sections() -> list[str]:
    return list(PREDEFINED_TEMPLATES[DEFAULT_TEMPLATE_ID]["structure"])


def resolve_sections(template_id: Optional[str]) -> list[str]:
    """Return the ordered section names for a template identifier.

    Always returns a fresh, non-empty list. Duplicated section names in a
    custom template are passed through unchanged.
    """
    if is_custom_template(template_id):
        custom = parse_custom_template(template_id)
        if custom is None:
            logger.warning(f"Malformed custom template {template_id!r}, using {DEFAULT_TEMPLATE_ID}")
            return default_sections()
        return list(custom.sections)

    template = PREDEFINED_TEMPLATES.get(template_id)
    if template is None:
        if template_id:
            logger.warning(f"Unknown template {template_id!r}, using {DEFAULT_TEMPLATE_ID}")
        return default_sections()

    return list(template["structure"])


def template_display_name(template_id: Optional[str]) -> str:
    custom = parse_custom_template(template_id)
    if custom is not None:
        return custom.name or "Custom Business Plan"
    template = PREDEFINED_TEMPLATES.get(template_id, PREDEFINED_TEMPLATES[DEFAULT_TEMPLATE_ID])
    return template["name"]


def list_templates() -> list[dict]:
    return [
        {
            "id": template_id,
            "name": template["name"],
            "description": template["description"],
            "sections": list(template["structure"]),
        }
        for template_id, template in PREDEFINED_TEMPLATES.items()
    ]
