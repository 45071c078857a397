"""Shared fixtures for tests."""
import json
import pytest


SAMPLE_BOOKMARKS = {
    "checksum": "test",
    "roots": {
        "bookmark_bar": {
            "children": [
                {
                    "id": "1",
                    "name": "Python Docs",
                    "type": "url",
                    "url": "https://docs.python.org"
                },
                {
                    "id": "2",
                    "name": "Work",
                    "type": "folder",
                    "children": [
                        {
                            "id": "3",
                            "name": "Jira Board",
                            "type": "url",
                            "url": "https://jira.example.com/board"
                        },
                        {
                            "id": "4",
                            "name": "Dev",
                            "type": "folder",
                            "children": [
                                {
                                    "id": "5",
                                    "name": "GitHub",
                                    "type": "url",
                                    "url": "https://github.com"
                                }
                            ]
                        }
                    ]
                }
            ],
            "id": "0",
            "name": "Bookmarks Bar",
            "type": "folder"
        },
        "other": {
            "children": [
                {
                    "id": "7",
                    "name": "Stack Overflow",
                    "type": "url",
                    "url": "https://stackoverflow.com"
                }
            ],
            "id": "100",
            "name": "Other Bookmarks",
            "type": "folder"
        },
        "synced": {
            "children": [],
            "id": "200",
            "name": "Mobile Bookmarks",
            "type": "folder"
        }
    },
    "version": 1
}


@pytest.fixture
def sample_bookmarks_path(tmp_path):
    """Create a temporary bookmarks file with sample data."""
    bookmarks_file = tmp_path / "Bookmarks"
    bookmarks_file.write_text(json.dumps(SAMPLE_BOOKMARKS, indent=3))
    return bookmarks_file


@pytest.fixture
def sample_bookmarks():
    """Return sample bookmarks as a list of records."""
    return [
        {"id": "1", "url": "https://docs.python.org", "title": "Python Docs", "tags": ["python", "documentation"]},
        {"id": "2", "url": "https://github.com", "title": "GitHub", "tags": ["dev", "git"]},
        {"id": "3", "url": "https://google.com", "title": "Google", "tags": ["search"]},
        {"id": "4", "url": "https://sqlite.org/guide", "title": "SQLite Guide", "tags": ["database", "tutorial"]},
        {"id": "5", "url": "https://stackoverflow.com", "title": "Stack Overflow", "tags": ["dev", "qa"]},
    ]
