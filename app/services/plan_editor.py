from datetime import datetime
from typing import Optional
from app.core.config import settings
from app.core.exceptions import PlanNotFoundError, PlanValidationError
from app.models.business_plan import PlanStatus
from app.services.plan_persistence import BusinessPlanDocument, PlanPersistenceAdapter
from app.services.section_store import SectionContentStore
from app.templates.catalog import resolve_sections
import logging

logger = logging.getLogger(__name__)


class PlanEditorSession:
    """In-progress edit of one business plan.

    The section store is reconciled against the active template on creation
    and on every template change, so every section the template declares has
    at least an empty entry. Nothing is persisted until ``save``.
    """

    def __init__(
        self,
        plan_id: Optional[int] = None,
        name: str = "",
        template: Optional[str] = None,
        client_id: Optional[int] = None,
        status: str = PlanStatus.DRAFT.value,
        content: Optional[SectionContentStore] = None,
        last_updated: Optional[datetime] = None
    ):
        self.plan_id = plan_id
        self.name = name
        self.client_id = client_id
        self.status = status
        self.last_updated = last_updated
        self.content = content if content is not None else SectionContentStore()
        self.selected_section: Optional[str] = None
        self.template = template or settings.DEFAULT_TEMPLATE
        self.sections: list[str] = []
        self._apply_template()

    @classmethod
    def new(cls, template_id: Optional[str] = None, name: str = "", client_id: Optional[int] = None):
        return cls(name=name, template=template_id, client_id=client_id)

    @classmethod
    async def open(cls, adapter: PlanPersistenceAdapter, plan_id: int, strict: Optional[bool] = None):
        document = await adapter.load(plan_id)
        if document is None:
            raise PlanNotFoundError(plan_id)

        if strict is None:
            strict = settings.STRICT_CONTENT_DECODING
        content = SectionContentStore.deserialize(document.content, strict=strict)

        return cls(
            plan_id=document.id,
            name=document.name,
            template=document.template,
            client_id=document.client_id,
            status=document.status or PlanStatus.DRAFT.value,
            content=content,
            last_updated=document.last_updated
        )

    def _apply_template(self) -> None:
        self.sections = resolve_sections(self.template)
        added = self.content.reconcile(self.sections)
        if added:
            logger.debug(f"Added {len(added)} empty sections for template {self.template!r}")
        if self.selected_section not in self.sections:
            self.selected_section = self.sections[0]

    def change_template(self, template_id: Optional[str]) -> list[str]:
        self.template = template_id or settings.DEFAULT_TEMPLATE
        self._apply_template()
        return self.sections

    def select_section(self, section_name: str) -> None:
        if section_name not in self.sections:
            raise PlanValidationError(f"Section {section_name!r} is not part of the current template")
        self.selected_section = section_name

    def edit(self, text: str) -> None:
        self.content.set_content(self.selected_section, text)

    def set_section_content(self, section_name: str, text: str) -> None:
        self.content.set_content(section_name, text)

    def retained_sections(self) -> list[str]:
        """Sections holding content that the active template does not show."""
        return [name for name in self.content if name not in self.sections]

    def to_document(self) -> BusinessPlanDocument:
        return BusinessPlanDocument(
            id=self.plan_id,
            name=self.name,
            template=self.template,
            client_id=self.client_id,
            content=self.content.serialize(),
            status=self.status,
            last_updated=self.last_updated
        )

    async def save(self, adapter: PlanPersistenceAdapter) -> BusinessPlanDocument:
        """Create or update through the adapter.

        Errors propagate unchanged and leave the session as it was, so the
        save can be retried.
        """
        document = self.to_document()
        if self.plan_id is None:
            saved = await adapter.create(document)
            self.plan_id = saved.id
        else:
            saved = await adapter.update(self.plan_id, document)
        self.last_updated = saved.last_updated
        return saved
