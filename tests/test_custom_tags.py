"""
Tests for the custom tag subsystem: legacy migration, store operations,
the per-user JSON file backend and the HTTP routes.
"""
import json
import shutil
import tempfile
from pathlib import Path

import pytest
from flask import Flask

from app.custom_tags import (
    CustomTag,
    CustomTagStore,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    UserDataError,
    create_custom_tags_module,
    empty_custom_tags,
    migrate_custom_tags,
)
from app.custom_tags.services import CUSTOM_TAGS_STORAGE_KEY


class TestMigration:
    """Decoding stored blobs of old and new shapes."""

    def test_legacy_strings_upgraded(self):
        data = migrate_custom_tags({"math": ["A", "B"]})
        assert data["math"] == [CustomTag("A", "default"), CustomTag("B", "default")]
        assert data["physics"] == []

    def test_mixed_shapes(self):
        data = migrate_custom_tags({
            "english": ["old", {"name": "new", "category": "语法"}, {"name": "nocat"}, 42, {"category": "x"}],
        })
        assert data["english"] == [
            CustomTag("old", "default"),
            CustomTag("new", "语法"),
            CustomTag("nocat", "default"),
        ]

    def test_unknown_subjects_ignored(self):
        data = migrate_custom_tags({"history": ["A"], "other": ["B"]})
        assert "history" not in data
        assert data["other"] == [CustomTag("B")]

    def test_non_object_payload(self):
        assert migrate_custom_tags(["A"]) == empty_custom_tags()
        assert migrate_custom_tags(None) == empty_custom_tags()

    def test_duplicates_within_subject_collapsed(self):
        data = migrate_custom_tags({"math": ["A", {"name": "A", "category": "x"}]})
        assert data["math"] == [CustomTag("A", "default")]


class TestCustomTagStore:
    """Store operations over an in-memory key-value backend."""

    def setup_method(self):
        self.kv = InMemoryKeyValueStore()
        self.store = CustomTagStore(self.kv)

    def test_empty_store(self):
        assert self.store.get_custom_tags() == empty_custom_tags()
        assert self.store.get_all_custom_tags_flat() == []

    def test_add_and_reject_duplicate(self):
        assert self.store.add_custom_tag("math", "三角函数", "函数") is True
        assert self.store.add_custom_tag("math", "三角函数", "函数") is False
        assert self.store.get_custom_tags()["math"] == [CustomTag("三角函数", "函数")]

    def test_same_name_in_other_subject(self):
        assert self.store.add_custom_tag("math", "三角函数", "函数") is True
        assert self.store.add_custom_tag("physics", "三角函数", "default") is True
        assert self.store.get_all_custom_tags_flat() == ["三角函数", "三角函数"]

    def test_name_trimmed(self):
        assert self.store.add_custom_tag("math", "  配方法  ") is True
        assert self.store.add_custom_tag("math", "配方法") is False
        assert self.store.get_custom_tags()["math"][0].name == "配方法"

    @pytest.mark.parametrize("subject,name", [
        ("math", ""),
        ("math", "   "),
        ("history", "A"),
        ("math", None),
    ])
    def test_invalid_additions(self, subject, name):
        assert self.store.add_custom_tag(subject, name) is False
        assert self.kv.get(CUSTOM_TAGS_STORAGE_KEY) is None

    def test_remove(self):
        self.store.add_custom_tag("english", "虚拟语气")
        assert self.store.remove_custom_tag("english", "虚拟语气") is True
        assert self.store.get_custom_tags()["english"] == []

    def test_remove_missing_leaves_store_unchanged(self):
        self.store.add_custom_tag("math", "A")
        before = self.kv.get(CUSTOM_TAGS_STORAGE_KEY)

        assert self.store.remove_custom_tag("math", "B") is False
        assert self.store.remove_custom_tag("history", "A") is False
        assert self.kv.get(CUSTOM_TAGS_STORAGE_KEY) == before

    def test_flat_list_follows_subject_order(self):
        self.store.add_custom_tag("other", "O")
        self.store.add_custom_tag("chemistry", "C")
        self.store.add_custom_tag("math", "M")
        assert self.store.get_all_custom_tags_flat() == ["M", "C", "O"]

    def test_is_custom_tag(self):
        self.store.add_custom_tag("physics", "等效电路")
        assert self.store.is_custom_tag("等效电路")
        assert not self.store.is_custom_tag("浮力")

    def test_import_legacy_format(self):
        assert self.store.import_custom_tags(json.dumps({"math": ["A", "B"]})) is True
        assert [tag.to_dict() for tag in self.store.get_custom_tags()["math"]] == [
            {"name": "A", "category": "default"},
            {"name": "B", "category": "default"},
        ]

    @pytest.mark.parametrize("payload", ["not json", "[1, 2]", "\"text\"", ""])
    def test_invalid_import_keeps_state(self, payload):
        self.store.add_custom_tag("math", "A")
        before = self.kv.get(CUSTOM_TAGS_STORAGE_KEY)

        assert self.store.import_custom_tags(payload) is False
        assert self.kv.get(CUSTOM_TAGS_STORAGE_KEY) == before

    def test_export_then_import_into_other_store(self):
        self.store.add_custom_tag("math", "A", "代数")
        self.store.add_custom_tag("other", "B")
        exported = self.store.export_custom_tags()

        other = CustomTagStore(InMemoryKeyValueStore())
        assert other.import_custom_tags(exported) is True
        assert other.get_custom_tags() == self.store.get_custom_tags()

    def test_export_is_readable_json(self):
        self.store.add_custom_tag("math", "三角函数")
        exported = self.store.export_custom_tags()
        assert "三角函数" in exported
        assert json.loads(exported)["math"] == [{"name": "三角函数", "category": "default"}]

    def test_clear(self):
        self.store.add_custom_tag("math", "A")
        self.store.clear_custom_tags()
        assert self.store.get_all_custom_tags_flat() == []

    def test_stats(self):
        self.store.add_custom_tag("math", "A")
        self.store.add_custom_tag("math", "B")
        self.store.add_custom_tag("english", "C")
        assert self.store.get_custom_tags_stats() == {
            "math": 2, "english": 1, "physics": 0, "chemistry": 0, "other": 0, "total": 3
        }

    def test_corrupt_blob_reads_as_empty(self):
        self.kv.set(CUSTOM_TAGS_STORAGE_KEY, "{broken")
        assert self.store.get_custom_tags() == empty_custom_tags()
        assert self.store.add_custom_tag("math", "A") is True

    def test_any_object_with_get_set_remove_is_a_backend(self):
        class RecordingStore:
            def __init__(self):
                self.writes = []

            def get(self, key):
                return self.writes[-1][1] if self.writes else None

            def set(self, key, value):
                self.writes.append((key, value))

            def remove(self, key):
                self.writes.clear()

        backend = RecordingStore()
        store = CustomTagStore(backend, storage_key="k")
        assert store.add_custom_tag("chemistry", "配平")
        assert backend.writes[0][0] == "k"
        assert store.get_all_custom_tags_flat() == ["配平"]

    def test_legacy_blob_read_transparently(self):
        self.kv.set(CUSTOM_TAGS_STORAGE_KEY, json.dumps({"physics": ["旧标签"]}, ensure_ascii=False))
        assert self.store.get_custom_tags()["physics"] == [CustomTag("旧标签", "default")]
        assert self.store.add_custom_tag("physics", "新标签")
        stored = json.loads(self.kv.get(CUSTOM_TAGS_STORAGE_KEY))
        assert stored["physics"] == [
            {"name": "旧标签", "category": "default"},
            {"name": "新标签", "category": "default"},
        ]


class TestJsonFileKeyValueStore:
    """Per-user JSON file backend."""

    def setup_method(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.user_data_dir = self.temp_dir / "user_data"

    def teardown_method(self):
        shutil.rmtree(self.temp_dir)

    def test_missing_file_reads_none(self):
        kv = JsonFileKeyValueStore("u1", self.user_data_dir)
        assert kv.get("key") is None
        assert not self.user_data_dir.exists()

    def test_set_creates_file(self):
        kv = JsonFileKeyValueStore("u1", self.user_data_dir)
        kv.set("key", "value")

        data = json.loads((self.user_data_dir / "u1.json").read_text(encoding="utf-8"))
        assert data["storage"] == {"key": "value"}
        assert kv.get("key") == "value"

    def test_other_fields_preserved(self):
        self.user_data_dir.mkdir()
        user_file = self.user_data_dir / "u1.json"
        user_file.write_text(json.dumps({"profile": {"stage": "junior_high"}}), encoding="utf-8")

        kv = JsonFileKeyValueStore("u1", self.user_data_dir)
        kv.set("key", "value")
        kv.remove("key")

        data = json.loads(user_file.read_text(encoding="utf-8"))
        assert data["profile"] == {"stage": "junior_high"}
        assert data["storage"] == {}

    def test_users_isolated(self):
        CustomTagStore(JsonFileKeyValueStore("u1", self.user_data_dir)).add_custom_tag("math", "A")
        other = CustomTagStore(JsonFileKeyValueStore("u2", self.user_data_dir))
        assert other.get_all_custom_tags_flat() == []

    def test_non_utf8_file_reads_as_empty(self):
        self.user_data_dir.mkdir()
        user_file = self.user_data_dir / "u1.json"
        user_file.write_bytes(b"\xff\xfe{\"storage\": {}}")

        store = CustomTagStore(JsonFileKeyValueStore("u1", self.user_data_dir))
        assert store.get_custom_tags() == empty_custom_tags()
        assert store.get_all_custom_tags_flat() == []

    def test_unreadable_file_is_never_overwritten(self):
        self.user_data_dir.mkdir()
        user_file = self.user_data_dir / "u1.json"
        corrupt = '{"password_hash": "x", "storage": {}'
        user_file.write_text(corrupt, encoding="utf-8")

        store = CustomTagStore(JsonFileKeyValueStore("u1", self.user_data_dir))
        with pytest.raises(UserDataError):
            store.add_custom_tag("math", "A")
        with pytest.raises(UserDataError):
            store.clear_custom_tags()
        assert user_file.read_text(encoding="utf-8") == corrupt

    def test_non_object_file_is_never_overwritten(self):
        self.user_data_dir.mkdir()
        user_file = self.user_data_dir / "u1.json"
        user_file.write_text("[1, 2]", encoding="utf-8")

        kv = JsonFileKeyValueStore("u1", self.user_data_dir)
        assert kv.get("key") is None
        with pytest.raises(UserDataError):
            kv.set("key", "value")
        assert user_file.read_text(encoding="utf-8") == "[1, 2]"

    @pytest.mark.parametrize("uid", ["../escaped", "a/b", "", "..", "u1.json", "名字", "u1\n"])
    def test_unsafe_uid_rejected(self, uid):
        with pytest.raises(ValueError):
            JsonFileKeyValueStore(uid, self.user_data_dir)


class TestCustomTagRoutes:
    """HTTP endpoints of the custom tag blueprint."""

    def setup_method(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.user_data_dir = self.temp_dir / "user_data"

        module = create_custom_tags_module(user_data_dir=self.user_data_dir)
        self.service = module["service"]

        flask_app = Flask(__name__)
        flask_app.config['TESTING'] = True
        flask_app.register_blueprint(module["blueprint"])
        self.client = flask_app.test_client()
        self.client.set_cookie('uid', 'route_user')

    def teardown_method(self):
        shutil.rmtree(self.temp_dir)

    def test_add_and_list(self):
        res = self.client.post('/api/custom-tags', json={"subject": "math", "name": " 三角函数 ", "category": "函数"})
        assert res.status_code == 201
        assert res.get_json()["tag"] == {"name": "三角函数", "category": "函数"}

        res = self.client.get('/api/custom-tags')
        assert res.status_code == 200
        assert res.get_json()["math"] == [{"name": "三角函数", "category": "函数"}]

    def test_duplicate_add_conflicts(self):
        self.client.post('/api/custom-tags', json={"subject": "math", "name": "A"})
        res = self.client.post('/api/custom-tags', json={"subject": "math", "name": "A"})
        assert res.status_code == 409

    def test_add_without_body(self):
        res = self.client.post('/api/custom-tags')
        assert res.status_code == 409

    def test_delete(self):
        self.client.post('/api/custom-tags', json={"subject": "physics", "name": "等效电路"})

        res = self.client.delete('/api/custom-tags/physics/等效电路')
        assert res.status_code == 200
        res = self.client.delete('/api/custom-tags/physics/等效电路')
        assert res.status_code == 404

    def test_export_import(self):
        self.client.post('/api/custom-tags', json={"subject": "math", "name": "A"})

        res = self.client.get('/api/custom-tags/export')
        assert res.status_code == 200
        assert 'attachment' in res.headers['Content-Disposition']
        exported = res.get_data(as_text=True)

        self.client.post('/api/custom-tags/clear')
        assert self.client.get('/api/custom-tags/stats').get_json()["total"] == 0

        res = self.client.post('/api/custom-tags/import', data=exported, content_type='application/json')
        assert res.status_code == 200
        assert self.client.get('/api/custom-tags/stats').get_json()["math"] == 1

    def test_invalid_import(self):
        res = self.client.post('/api/custom-tags/import', data="not json", content_type='text/plain')
        assert res.status_code == 400
        assert res.get_json()["status"] == "invalid"

    def test_tags_are_per_user(self):
        self.client.post('/api/custom-tags', json={"subject": "math", "name": "A"})
        assert (self.user_data_dir / "route_user.json").exists()

        self.client.set_cookie('uid', 'someone_else')
        assert self.client.get('/api/custom-tags').get_json()["math"] == []

    def test_store_failure_returns_500(self):
        # A regular file where the user data directory should be
        self.temp_dir.joinpath("user_data").write_text("", encoding="utf-8")
        res = self.client.post('/api/custom-tags', json={"subject": "math", "name": "A"})
        assert res.status_code == 500
        assert res.get_json()["message"] == "Failed to add custom tag"

    def test_unreadable_user_file_returns_500(self):
        self.user_data_dir.mkdir()
        user_file = self.user_data_dir / "route_user.json"
        user_file.write_text('{"password_hash": "x", "storage": {}', encoding="utf-8")

        assert self.client.get('/api/custom-tags').status_code == 200
        res = self.client.post('/api/custom-tags', json={"subject": "math", "name": "A"})
        assert res.status_code == 500
        assert user_file.read_text(encoding="utf-8") == '{"password_hash": "x", "storage": {}'

    def test_path_traversal_uid_stays_inside_user_data(self):
        self.client.set_cookie('uid', '../escaped')
        res = self.client.post('/api/custom-tags', json={"subject": "math", "name": "A"})
        assert res.status_code == 201

        assert not (self.temp_dir / "escaped.json").exists()
        assert (self.user_data_dir / "anonymous.json").exists()
        assert sorted(p.name for p in self.temp_dir.rglob("*.json")) == ["anonymous.json"]
