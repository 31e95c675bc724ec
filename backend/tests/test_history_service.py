from datetime import datetime, timezone

import yaml

from resume_tailor.services.history_service import ResumeHistoryStore


def test_saved_entry_is_listed(tmp_path):
    store = ResumeHistoryStore(tmp_path / "history.yaml")

    entry_id = store.save_resume_to_history("user-1", "FINAL RESUME", "Senior PM role", title="Acme PM")

    entries = store.get_user_resume_history("user-1")
    assert [e.id for e in entries] == [entry_id]
    assert entries[0].resume_text == "FINAL RESUME"
    assert entries[0].job_description == "Senior PM role"
    assert entries[0].title == "Acme PM"
    assert entries[0].timestamp.tzinfo is not None


def test_history_is_newest_first_and_per_user(tmp_path):
    store = ResumeHistoryStore(tmp_path / "history.yaml")

    first = store.save_resume_to_history("user-1", "one", "jd")
    store.save_resume_to_history("user-2", "other user", "jd")
    second = store.save_resume_to_history("user-1", "two", "jd")

    assert [e.id for e in store.get_user_resume_history("user-1")] == [second, first]
    assert len(store.get_user_resume_history("user-2")) == 1
    assert store.get_user_resume_history("nobody") == []


def test_blank_title_falls_back_to_default(tmp_path):
    store = ResumeHistoryStore(tmp_path / "history.yaml")
    store.save_resume_to_history("user-1", "text", "jd", title="")

    assert store.get_user_resume_history("user-1")[0].title == "Resume"


def test_history_survives_a_new_store(tmp_path):
    path = tmp_path / "nested" / "history.yaml"
    entry_id = ResumeHistoryStore(path).save_resume_to_history("user-1", "text", "jd")

    reloaded = ResumeHistoryStore(path)

    assert [e.id for e in reloaded.get_user_resume_history("user-1")] == [entry_id]
    assert "history" in yaml.safe_load(path.read_text(encoding="utf-8"))


def test_equal_timestamps_keep_insertion_order(tmp_path):
    path = tmp_path / "history.yaml"
    stamp = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc).isoformat()
    path.write_text(
        yaml.dump(
            {
                "history": [
                    {"id": "a", "user_id": "u", "resume_text": "A", "job_description": "jd", "timestamp": stamp},
                    {"id": "b", "user_id": "u", "resume_text": "B", "job_description": "jd", "timestamp": stamp},
                ]
            }
        ),
        encoding="utf-8",
    )

    assert [e.id for e in ResumeHistoryStore(path).get_user_resume_history("u")] == ["b", "a"]


def test_unreadable_file_starts_empty(tmp_path):
    path = tmp_path / "history.yaml"
    path.write_text("history: [unclosed", encoding="utf-8")

    assert ResumeHistoryStore(path).get_user_resume_history("u") == []


def test_invalid_entries_are_skipped(tmp_path):
    path = tmp_path / "history.yaml"
    path.write_text(
        yaml.dump({"history": [{"id": "broken"}, "not a mapping"]}),
        encoding="utf-8",
    )

    assert ResumeHistoryStore(path).get_user_resume_history("u") == []
