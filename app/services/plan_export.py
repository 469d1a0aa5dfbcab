from html import escape as escape_html
from typing import Optional
import markdown
from app.services.plan_editor import PlanEditorSession
from app.templates.catalog import template_display_name

PLAN_FORMAT = """
# {title}

**Template:** {template}
**Status:** {status}
**Client:** {client}
**Last updated:** {last_updated}

{sections}
"""

EMPTY_SECTION = "_No content yet._"


def _plain(text: str) -> str:
    return text


def _section_blocks(session: PlanEditorSession, quote=_plain) -> str:
    blocks = []
    for section in session.sections:
        text = quote(session.content.get_content(section).strip())
        blocks.append(f"## {quote(section)}\n\n{text or EMPTY_SECTION}")

    # Only retained sections that still carry text are worth exporting
    extra = [
        name for name in session.retained_sections()
        if session.content.get_content(name).strip()
    ]
    if extra:
        blocks.append("## Additional Sections")
        for name in extra:
            blocks.append(f"### {quote(name)}\n\n{quote(session.content.get_content(name).strip())}")

    return "\n\n".join(blocks)


def render_markdown(session: PlanEditorSession, client_name: Optional[str] = None, quote=_plain) -> str:
    last_updated = session.last_updated.strftime("%Y-%m-%d %H:%M") if session.last_updated else "never"
    return PLAN_FORMAT.format(
        title=quote(session.name or "Untitled Business Plan"),
        template=quote(template_display_name(session.template)),
        status=session.status.capitalize(),
        client=quote(client_name or "None"),
        last_updated=last_updated,
        sections=_section_blocks(session, quote)
    ).strip() + "\n"


def render_html(session: PlanEditorSession, client_name: Optional[str] = None) -> str:
    """Section text is user input, so markup in it is escaped before conversion."""
    return markdown.markdown(render_markdown(session, client_name, quote=escape_html))
