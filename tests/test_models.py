"""Tests for models module."""
from bookmark_search.models import Bookmark, Segment, record_fields


class TestBookmark:
    def test_from_dict(self):
        bookmark = Bookmark.from_dict({
            "id": 7,
            "title": "GitHub",
            "search_title": "GitHub Home",
            "url": "https://github.com",
            "tags": ["dev", None, "git"],
        })
        assert bookmark.id == "7"
        assert bookmark.search_title == "GitHub Home"
        assert bookmark.tags == ("dev", "git")

    def test_from_dict_missing_fields(self):
        bookmark = Bookmark.from_dict({})
        assert bookmark == Bookmark()
        assert bookmark.search_title is None

    def test_folder_round_trip(self):
        data = {"id": "5", "title": "GitHub", "url": "https://github.com", "tags": ["Work"], "folder": "bookmark_bar/Work"}
        assert Bookmark.from_dict(data).to_dict() == data

    def test_to_dict_omits_empty_search_title(self):
        data = Bookmark(title="A", url="https://a.dev", tags=("x",), id="1").to_dict()
        assert data == {"id": "1", "title": "A", "url": "https://a.dev", "tags": ["x"]}


class TestRecordFields:
    def test_dict(self):
        record = {"title": "A", "url": "https://a.dev", "tags": ["x"]}
        assert record_fields(record) == ("A", "https://a.dev", ["x"])

    def test_prefers_search_title(self):
        assert record_fields(Bookmark(title="A", search_title="B"))[0] == "B"

    def test_malformed(self):
        assert record_fields({"title": 1, "url": None, "tags": "notalist"}) == ("", "", [])

    def test_plain_object(self):
        assert record_fields(object()) == ("", "", [])


class TestSegment:
    def test_to_dict(self):
        assert Segment("abc", True).to_dict() == {"text": "abc", "highlighted": True}
