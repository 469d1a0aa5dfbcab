from datetime import datetime, timezone
import pytest

from app.core.exceptions import ContentDecodeError, PlanNotFoundError, PlanValidationError
from app.services.plan_editor import PlanEditorSession
from app.services.plan_persistence import BusinessPlanDocument, PlanPersistenceAdapter

pytestmark = pytest.mark.asyncio


class InMemoryPlanPersistence(PlanPersistenceAdapter):
    def __init__(self, fail_with=None):
        self.plans = {}
        self.calls = []
        self.fail_with = fail_with
        self._next_id = 1

    async def load(self, plan_id):
        self.calls.append(("load", plan_id))
        return self.plans.get(plan_id)

    async def create(self, document):
        self.calls.append(("create", document))
        if self.fail_with:
            raise self.fail_with
        saved = BusinessPlanDocument(**{**document.__dict__, "id": self._next_id})
        saved.last_updated = datetime.now(timezone.utc)
        self.plans[saved.id] = saved
        self._next_id += 1
        return saved

    async def update(self, plan_id, document):
        self.calls.append(("update", plan_id, document))
        if self.fail_with:
            raise self.fail_with
        saved = BusinessPlanDocument(**{**document.__dict__, "id": plan_id})
        saved.last_updated = datetime.now(timezone.utc)
        self.plans[plan_id] = saved
        return saved


async def test_new_session_uses_standard_template():
    session = PlanEditorSession.new()
    assert session.template == "standard"
    assert len(session.sections) == 9
    assert session.sections[0] == "Executive Summary"
    assert session.selected_section == "Executive Summary"
    assert all(session.content.get_content(name) == "" for name in session.sections)


async def test_switching_template_retains_shared_section_content():
    session = PlanEditorSession.new("standard")
    session.select_section("Financial Projections")
    session.edit("Year 1: $50k")

    session.change_template("tech-startup")

    assert session.content.get_content("Financial Projections") == "Year 1: $50k"
    assert session.sections.index("Financial Projections") == 10
    # Still valid in the new template, so the selection is kept
    assert session.selected_section == "Financial Projections"


async def test_selection_falls_back_to_first_section():
    session = PlanEditorSession.new("standard")
    session.select_section("Appendix")

    session.change_template("tech-startup")
    assert session.selected_section == "Problem"


async def test_switching_away_and_back_preserves_content():
    session = PlanEditorSession.new("food-business")
    session.set_section_content("Menu & Products", "Croissants")
    before = session.content.as_dict()

    session.change_template("tech-startup")
    session.change_template("food-business")

    assert {name: session.content.get_content(name) for name in before} == before
    assert "Problem" in session.retained_sections()


async def test_custom_template_sections():
    session = PlanEditorSession.new("custom:My Plan:Overview\nBudget\n\nTeam")
    assert session.sections == ["Overview", "Budget", "Team"]


async def test_selecting_unknown_section_is_rejected():
    session = PlanEditorSession.new()
    with pytest.raises(PlanValidationError):
        session.select_section("Problem")


async def test_save_new_plan_creates():
    adapter = InMemoryPlanPersistence()
    session = PlanEditorSession.new("standard", name="Bakery")
    session.edit("Fresh bread daily")

    saved = await session.save(adapter)

    assert [call[0] for call in adapter.calls] == ["create"]
    assert session.plan_id == saved.id == 1
    assert session.last_updated is not None


async def test_save_existing_plan_updates_without_changing_id():
    adapter = InMemoryPlanPersistence()
    session = PlanEditorSession.new("standard", name="Bakery")
    await session.save(adapter)

    session.edit("Second draft")
    saved = await session.save(adapter)

    assert [call[0] for call in adapter.calls] == ["create", "update"]
    assert adapter.calls[1][1] == 1
    assert saved.id == 1
    assert session.plan_id == 1


async def test_saved_document_carries_serialized_content_and_metadata():
    adapter = InMemoryPlanPersistence()
    session = PlanEditorSession.new("tech-startup", name="Widgets", client_id=7)
    session.status = "active"
    session.edit("Nobody tracks widgets")

    await session.save(adapter)
    document = adapter.calls[0][1]

    assert document.template == "tech-startup"
    assert document.client_id == 7
    assert document.status == "active"
    assert '"Problem": "Nobody tracks widgets"' in document.content


async def test_open_reconciles_loaded_content():
    adapter = InMemoryPlanPersistence()
    adapter.plans[3] = BusinessPlanDocument(
        id=3, name="Cafe", template="food-business", content='{"Supply Chain": "Local farms"}'
    )

    session = await PlanEditorSession.open(adapter, 3)

    assert session.plan_id == 3
    assert session.content.get_content("Supply Chain") == "Local farms"
    assert len(session.content) == 10
    assert session.selected_section == "Executive Summary"


async def test_open_with_corrupted_content_starts_empty():
    adapter = InMemoryPlanPersistence()
    adapter.plans[1] = BusinessPlanDocument(id=1, name="Broken", template="standard", content="{oops")

    session = await PlanEditorSession.open(adapter, 1)
    assert session.content.get_content("Executive Summary") == ""
    assert len(session.content) == 9


async def test_open_with_corrupted_content_in_strict_mode():
    adapter = InMemoryPlanPersistence()
    adapter.plans[1] = BusinessPlanDocument(id=1, name="Broken", template="standard", content="{oops")

    with pytest.raises(ContentDecodeError):
        await PlanEditorSession.open(adapter, 1, strict=True)


async def test_open_missing_plan():
    with pytest.raises(PlanNotFoundError):
        await PlanEditorSession.open(InMemoryPlanPersistence(), 99)


async def test_failed_save_keeps_edits_for_retry():
    adapter = InMemoryPlanPersistence(fail_with=ConnectionError("network down"))
    session = PlanEditorSession.new("standard", name="Bakery")
    session.edit("Unsaved work")

    with pytest.raises(ConnectionError):
        await session.save(adapter)

    assert session.plan_id is None
    assert session.content.get_content("Executive Summary") == "Unsaved work"

    adapter.fail_with = None
    saved = await session.save(adapter)
    assert saved.id == 1
