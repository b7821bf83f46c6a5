"""Tests for the resume editing session."""

from __future__ import annotations

import pytest

from resume_builder.models.exceptions import (
    AuthorizationError,
    GatewayError,
    SaveUnavailableError,
)
from resume_builder.models.resume import (
    Education,
    PersonalInfo,
    Resume,
    TemplateStyle,
    WorkExperience,
    demo_resume,
)
from resume_builder.services.editor import SAVE_UNAVAILABLE_MESSAGE, ResumeEditor
from resume_builder.services.preview import ResumePreview


class FakeTimer:
    def __init__(self, delay: float, callback) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def start(self) -> None:
        pass

    def cancel(self) -> None:
        self.cancelled = True


class FakeTimerFactory:
    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def __call__(self, delay: float, callback) -> FakeTimer:
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    def fire_latest(self) -> None:
        timer = self.timers[-1]
        if not timer.cancelled:
            timer.callback()


class FakeGateway:
    def __init__(self, stored: Resume | None = None, load_error: Exception | None = None) -> None:
        self.stored = stored
        self.load_error = load_error
        self.saved: list[Resume] = []
        self.logged_out = False

    def load(self) -> Resume | None:
        if self.load_error is not None:
            raise self.load_error
        return self.stored

    def save(self, resume: Resume) -> None:
        self.saved.append(resume)

    def logout(self) -> None:
        self.logged_out = True


@pytest.fixture
def timers() -> FakeTimerFactory:
    return FakeTimerFactory()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def editor(gateway: FakeGateway, timers: FakeTimerFactory) -> ResumeEditor:
    session = ResumeEditor(gateway=gateway, timer_factory=timers)
    session.hydrate("42")
    return session


class TestHydrate:
    """Tests for loading the session document."""

    def test_new_session_is_empty(self) -> None:
        session = ResumeEditor()
        assert session.resume.template_style is TemplateStyle.PROFESSIONAL
        assert session.resume.work_experience == ()
        assert len(session.suggestions) == 4

    def test_loads_saved_resume(self, timers: FakeTimerFactory) -> None:
        stored = Resume(title="Saved", template_style=TemplateStyle.MINIMAL)
        session = ResumeEditor(gateway=FakeGateway(stored), timer_factory=timers)

        assert session.hydrate("42") == stored
        assert session.template_style is TemplateStyle.MINIMAL
        assert timers.timers == []

    def test_missing_resume_gives_empty(self, editor: ResumeEditor) -> None:
        assert editor.resume.title == "My Resume"
        assert editor.can_save

    def test_authorization_error_is_not_an_empty_resume(self, timers: FakeTimerFactory) -> None:
        gateway = FakeGateway(load_error=AuthorizationError("Invalid token", status_code=401))
        session = ResumeEditor(gateway=gateway, timer_factory=timers)

        with pytest.raises(AuthorizationError):
            session.hydrate("42")
        assert not session.can_save

    def test_load_error_never_overwrites_stored_resume(self, timers: FakeTimerFactory) -> None:
        gateway = FakeGateway(
            stored=Resume(title="Real CV"),
            load_error=GatewayError("Server error", status_code=500),
        )
        session = ResumeEditor(gateway=gateway, timer_factory=timers)

        with pytest.raises(GatewayError):
            session.hydrate("42")
        assert session.resume.title == "My Resume"
        assert not session.can_save

        session.update(target_role="Data Engineer")
        assert timers.timers == []
        with pytest.raises(SaveUnavailableError, match="could not be loaded"):
            session.save_now()
        assert gateway.saved == []
        assert gateway.stored.title == "Real CV"

    def test_successful_rehydrate_reenables_saving(self, timers: FakeTimerFactory) -> None:
        gateway = FakeGateway(load_error=GatewayError("Server error", status_code=503))
        session = ResumeEditor(gateway=gateway, timer_factory=timers)
        with pytest.raises(GatewayError):
            session.hydrate("42")

        gateway.load_error = None
        session.hydrate("42")
        assert session.can_save
        session.update(title="Recovered")
        timers.fire_latest()
        assert [r.title for r in gateway.saved] == ["Recovered"]

    def test_demo_session(self, gateway: FakeGateway) -> None:
        session = ResumeEditor(gateway=gateway)
        assert session.hydrate("demo-user", demo=True) == demo_resume()
        assert not session.can_save

    def test_anonymous_session(self, gateway: FakeGateway) -> None:
        session = ResumeEditor(gateway=gateway)
        session.hydrate(None)
        assert not session.can_save


class TestEdits:
    """Every edit replaces the document with a new value."""

    def test_update_is_copy_on_write(self, editor: ResumeEditor) -> None:
        before = editor.resume
        after = editor.update(title="Data Engineer CV")
        assert before.title == "My Resume"
        assert after.title == "Data Engineer CV"
        assert editor.resume is after

    def test_template_style_is_coerced(self, editor: ResumeEditor) -> None:
        editor.set_template_style("modern")
        assert editor.template_style is TemplateStyle.MODERN
        editor.set_template_style("fancy")
        assert editor.template_style is TemplateStyle.PROFESSIONAL

    def test_update_personal_info_keeps_other_fields(self, editor: ResumeEditor) -> None:
        editor.update_personal_info(full_name="Jane", email="jane@example.com")
        editor.update_personal_info(phone="555")
        assert editor.resume.personal_info == PersonalInfo(
            full_name="Jane", email="jane@example.com", phone="555", linkedin="", website=""
        )

    def test_update_skills_converts_lists(self, editor: ResumeEditor) -> None:
        editor.update_skills(technical=["Python", "SQL"])
        assert editor.resume.skills.technical == ("Python", "SQL")

    def test_suggestions_follow_edits(self, editor: ResumeEditor) -> None:
        editor.update_skills(soft=["Mentoring"])
        assert not any("soft skills" in s for s in editor.suggestions)

    def test_add_update_remove_entry(self, editor: ResumeEditor) -> None:
        job = editor.add_entry("work_experience", company="Acme", position="Dev")
        assert isinstance(job, WorkExperience)

        updated = editor.update_entry("work_experience", job.id, current=True, achievements=["Led 3 launches"])
        assert updated.id == job.id
        assert editor.resume.work_experience == (updated,)
        assert updated.achievements == ("Led 3 launches",)

        assert editor.remove_entry("work_experience", job.id) is True
        assert editor.resume.work_experience == ()
        assert editor.remove_entry("work_experience", job.id) is False

    def test_add_ready_made_entry(self, editor: ResumeEditor) -> None:
        edu = Education(institution="MIT")
        editor.add_entry("education", edu)
        assert editor.resume.education == (edu,)

    def test_add_wrong_entry_type(self, editor: ResumeEditor) -> None:
        with pytest.raises(TypeError):
            editor.add_entry("education", WorkExperience())

    def test_unknown_section(self, editor: ResumeEditor) -> None:
        with pytest.raises(ValueError, match="Unknown section"):
            editor.add_entry("hobbies", name="Chess")

    def test_update_missing_entry(self, editor: ResumeEditor) -> None:
        with pytest.raises(KeyError):
            editor.update_entry("projects", "nope", name="X")

    def test_preview_refreshes_when_mounted(self, gateway: FakeGateway) -> None:
        preview = ResumePreview()
        session = ResumeEditor(gateway=gateway, preview=preview)
        session.update(title="Before preview")
        assert not preview.is_mounted

        preview.show(session.resume)
        session.update_personal_info(full_name="Jane")
        assert preview.element.resume.personal_info.full_name == "Jane"


class TestAutosave:
    def test_edits_schedule_latest_snapshot(
        self, editor: ResumeEditor, gateway: FakeGateway, timers: FakeTimerFactory
    ) -> None:
        editor.update(title="A")
        editor.update(title="AB")
        editor.update(title="ABC")

        assert [t.cancelled for t in timers.timers] == [True, True, False]
        assert timers.timers[-1].delay == 2.0

        timers.fire_latest()
        assert [r.title for r in gateway.saved] == ["ABC"]

    @pytest.mark.parametrize("user_id, demo", [("demo-user", True), (None, False)])
    def test_disabled_without_saving_user(
        self,
        gateway: FakeGateway,
        timers: FakeTimerFactory,
        user_id: str | None,
        demo: bool,
    ) -> None:
        session = ResumeEditor(gateway=gateway, timer_factory=timers)
        session.hydrate(user_id, demo=demo)
        session.update(title="Edited")

        assert timers.timers == []
        assert gateway.saved == []

    def test_logout_cancels_pending_save(
        self, editor: ResumeEditor, gateway: FakeGateway, timers: FakeTimerFactory
    ) -> None:
        editor.update(title="Unsaved")
        editor.logout()

        timers.fire_latest()
        assert gateway.saved == []
        assert gateway.logged_out
        assert editor.resume.title == "My Resume"
        assert editor.user_id is None

    def test_close_cancels_pending_save(
        self, editor: ResumeEditor, gateway: FakeGateway, timers: FakeTimerFactory
    ) -> None:
        editor.update(title="Unsaved")
        editor.close()

        timers.fire_latest()
        assert gateway.saved == []
        assert not editor.autosave.pending


class TestSaveNow:
    def test_saves_current_document(
        self, editor: ResumeEditor, gateway: FakeGateway, timers: FakeTimerFactory
    ) -> None:
        editor.update(title="Manual")
        editor.save_now()

        assert gateway.saved == [editor.resume]
        assert timers.timers[-1].cancelled
        assert editor.autosave.last_saved is not None

    @pytest.mark.parametrize("user_id, demo", [("demo-user", True), (None, False)])
    def test_unavailable_without_saving_user(
        self, gateway: FakeGateway, user_id: str | None, demo: bool
    ) -> None:
        session = ResumeEditor(gateway=gateway)
        session.hydrate(user_id, demo=demo)
        with pytest.raises(SaveUnavailableError, match="Save is unavailable"):
            session.save_now()
        assert SAVE_UNAVAILABLE_MESSAGE.endswith("Please sign in to save your resume.")


class TestExportText:
    def test_exports_current_document(self, editor: ResumeEditor) -> None:
        editor.update_personal_info(full_name="Jane Q. Public")
        assert editor.export_text() == "JANE Q. PUBLIC\n==============\n\n"
