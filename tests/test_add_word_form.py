from __future__ import annotations

import pytest

from wordbook.services.add_word_form import AddWordForm, Notification, UserProfile
from wordbook.services.query_cache import QueryCache
from wordbook.utils.errors import BackendError, ValidationError


def _form(client, *, target=None, mother=None, show_import_button=True) -> AddWordForm:
    form = AddWordForm(
        client=client,
        cache=QueryCache(),
        profile=UserProfile(target_language=target, mother_language=mother),
        show_import_button=show_import_button,
    )
    form.load_languages()
    return form


def test_target_language_is_preselected(fake_client):
    assert _form(fake_client, target="UK").selected_language == {"code": "uk", "name": "Ukrainian"}
    assert _form(fake_client, target="xx").selected_language is None
    assert _form(fake_client).selected_language is None


def test_translations_are_capped_by_language_count(fake_client):
    form = _form(fake_client)

    drafts = [form.add_translation() for _ in range(3)]
    assert len({d.id for d in drafts}) == 3
    assert not form.can_add_translation

    assert form.add_translation() is None
    assert len(form.translations) == 3


def test_first_translation_defaults_to_mother_language(fake_client):
    form = _form(fake_client, mother="en")

    first = form.add_translation()
    second = form.add_translation()

    assert first.language_code == "en"
    assert second.language_code == ""


def test_update_and_remove_translation(fake_client):
    form = _form(fake_client)
    a = form.add_translation()
    b = form.add_translation()

    form.update_translation(a.id, "language_code", "de")
    form.update_translation(a.id, "translation", "Haus")
    form.remove_translation(b.id)
    form.remove_translation(999)

    assert [(t.id, t.language_code, t.translation) for t in form.translations] == [(a.id, "de", "Haus")]

    with pytest.raises(ValueError):
        form.update_translation(a.id, "id", "7")


def test_submit_requires_word_and_language(fake_client):
    form = _form(fake_client)
    form.set_word("house")
    assert not form.can_submit

    form.select_language("en")
    form.set_word("")
    assert not form.can_submit
    with pytest.raises(ValidationError):
        form.submit()
    assert fake_client.created == []


def test_submit_sends_only_complete_translations(fake_client):
    form = _form(fake_client, target="en")
    form.cache.set(("words", 1, 10), ["stale"])
    form.cache.set(("languages",), ["kept"])
    form.set_word("house")
    for code, text in (("de", "Haus"), ("uk", "  "), ("", "casa")):
        draft = form.add_translation()
        form.update_translation(draft.id, "language_code", code)
        form.update_translation(draft.id, "translation", text)

    assert form.submit() is True

    assert fake_client.created == [
        {
            "language_code": "en",
            "word": "house",
            "translations": [{"language_code": "de", "translation": "Haus"}],
        }
    ]
    assert form.notification == Notification(open=True, message="Word created successfully", severity="success")
    assert ("words", 1, 10) not in form.cache
    assert form.cache.get(("languages",)) == ["kept"]
    assert form.word == ""
    assert form.translations == []
    assert form.selected_language["code"] == "en"


def test_submit_failure_keeps_form_state(fake_client):
    fake_client.create_error = BackendError("HTTP 409", status=409)
    form = _form(fake_client, target="en")
    form.set_word("house")
    form.add_translation()

    assert form.submit() is False

    assert form.notification == Notification(open=True, message="Error creating word", severity="error")
    assert form.word == "house"
    assert len(form.translations) == 1


def test_submit_with_unexpected_status_does_nothing(fake_client):
    fake_client.create_status = 200
    form = _form(fake_client, target="en")
    form.set_word("house")

    assert form.submit() is False
    assert form.notification.open is False
    assert form.word == "house"


def test_import_reports_counters(fake_client, tmp_path):
    form = _form(fake_client)
    form.cache.set(("words", 2, 10), ["stale"])

    report = form.import_file(tmp_path / "words.json")

    assert report["imported"] == 3
    assert form.notification.message == (
        "3 words imported successfully. 1 duplicates. 0 passed. 2 errors."
    )
    assert form.notification.severity == "success"
    assert len(form.cache) == 0


def test_import_without_file_or_when_disabled(fake_client, tmp_path):
    assert _form(fake_client).import_file(None) is None
    assert _form(fake_client, show_import_button=False).import_file(tmp_path / "w.json") is None
    assert fake_client.imported == []


def test_import_failure_notifies(fake_client, tmp_path):
    fake_client.import_error = BackendError("HTTP 400", status=400)
    form = _form(fake_client)

    assert form.import_file(tmp_path / "w.json") is None
    assert form.notification.severity == "error"
    assert form.notification.message == "Error importing words"


def test_close_notification(fake_client):
    form = _form(fake_client, target="en")
    form.set_word("house")
    form.submit()

    form.close_notification()

    assert form.notification == Notification()


def test_draft_counter_is_not_a_constructor_argument(fake_client):
    with pytest.raises(TypeError):
        AddWordForm(client=fake_client, cache=QueryCache(), _ids=iter([7]))

    assert "_ids" not in repr(_form(fake_client))
