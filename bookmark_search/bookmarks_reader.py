"""Chrome bookmarks reader module."""
import json
import os
import sys
from pathlib import Path
from typing import List, Dict, Any, Optional


ROOT_NAMES = ("bookmark_bar", "other", "synced")


def get_chrome_bookmarks_path(profile: str = "Default") -> Path:
    """Get the path to Chrome bookmarks file.

    Args:
        profile: Chrome profile name (default: "Default")

    Returns:
        Path to the Bookmarks file
    """
    home = Path.home()
    if os.name == "nt":  # Windows
        chrome_path = home / "AppData" / "Local" / "Google" / "Chrome" / "User Data" / profile / "Bookmarks"
    elif sys.platform == "darwin":  # macOS
        chrome_path = home / "Library" / "Application Support" / "Google" / "Chrome" / profile / "Bookmarks"
    elif os.name == "posix":  # Linux
        chrome_path = home / ".config" / "google-chrome" / profile / "Bookmarks"
        # Also check for chromium
        if not chrome_path.exists():
            chrome_path = home / ".config" / "chromium" / profile / "Bookmarks"
    else:
        raise OSError(f"Unsupported operating system: {os.name}")

    return chrome_path


def load_bookmarks_file(bookmarks_path: Path) -> Dict[str, Any]:
    """Load Chrome bookmarks JSON file.

    Args:
        bookmarks_path: Path to bookmarks file

    Returns:
        Parsed JSON bookmarks data

    Raises:
        FileNotFoundError: If bookmarks file doesn't exist
        json.JSONDecodeError: If bookmarks file is malformed
    """
    if not bookmarks_path.exists():
        raise FileNotFoundError(f"Bookmarks file not found at {bookmarks_path}")

    with open(bookmarks_path, "r", encoding="utf-8") as f:
        return json.load(f)


def extract_bookmarks(
    node: Dict[str, Any],
    bookmarks: List[Dict[str, Any]],
    path: str = "",
    folders: Optional[List[str]] = None,
) -> None:
    """Recursively extract bookmarks from Chrome bookmarks structure.

    Args:
        node: Current node in the bookmarks tree
        bookmarks: List to accumulate bookmarks
        path: Current folder path
        folders: Names of the folders enclosing this node, used as tags
    """
    folders = folders or []

    if node.get("type") == "url":
        bookmarks.append({
            "id": node.get("id", ""),
            "url": node.get("url", ""),
            "title": node.get("name", ""),
            "folder": path,
            "tags": list(folders),
        })
    elif node.get("type") == "folder":
        folder_name = node.get("name", "")
        new_path = f"{path}/{folder_name}" if path else folder_name
        new_folders = folders + [folder_name] if folder_name and folder_name not in folders else folders
        for child in node.get("children", []):
            extract_bookmarks(child, bookmarks, new_path, new_folders)


def read_chrome_bookmarks(
    bookmarks_path: Optional[Path] = None,
    profile: str = "Default",
) -> List[Dict[str, Any]]:
    """Read all bookmarks from Chrome bookmarks file.

    Args:
        bookmarks_path: Optional path to bookmarks file. If None, uses the
            Chrome location for ``profile``.
        profile: Chrome profile name

    Returns:
        List of bookmarks, each with 'id', 'url', 'title', 'folder' and 'tags'.
        Folder paths use the root key as prefix (e.g. 'bookmark_bar/Work');
        tags are the enclosing folder names below the root (e.g. ['Work']).

    Raises:
        FileNotFoundError: If bookmarks file doesn't exist
        json.JSONDecodeError: If bookmarks file is malformed
    """
    if bookmarks_path is None:
        bookmarks_path = get_chrome_bookmarks_path(profile)

    bookmarks_data = load_bookmarks_file(bookmarks_path)

    all_bookmarks: List[Dict[str, Any]] = []

    # Chrome stores bookmarks in roots: bookmark_bar, other, synced
    roots = bookmarks_data.get("roots", {})

    for root_name in ROOT_NAMES:
        if root_name in roots:
            # Root folder names are not tags
            for child in roots[root_name].get("children", []):
                extract_bookmarks(child, all_bookmarks, root_name)

    return all_bookmarks
