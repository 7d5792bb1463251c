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
        # Fall back to chromium
        if not chrome_path.exists():
            chrome_path = home / ".config" / "chromium" / profile / "Bookmarks"
    else:
        raise OSError(f"Unsupported operating system: {os.name}")

    return chrome_path


def load_bookmarks_file(bookmarks_path: Path) -> Dict[str, Any]:
    """Load a Chrome bookmarks JSON file.

    Raises:
        FileNotFoundError: If bookmarks file doesn't exist
        json.JSONDecodeError: If bookmarks file is malformed
    """
    if not bookmarks_path.exists():
        raise FileNotFoundError(f"Bookmarks file not found at {bookmarks_path}")

    with open(bookmarks_path, "r", encoding="utf-8") as f:
        return json.load(f)


def extract_bookmarks(node: Dict[str, Any], bookmarks: List[Dict[str, str]], path: str = "") -> None:
    """Recursively collect bookmarks below a node.

    Args:
        node: Current node in the bookmarks tree
        bookmarks: List to accumulate bookmarks
        path: Folder path of the node's parent, "/"-separated
    """
    node_type = node.get("type")
    if node_type == "url":
        bookmarks.append({
            "id": node.get("id", ""),
            "url": node.get("url", ""),
            "title": node.get("name", ""),
            "folder": path,
        })
    elif node_type == "folder":
        name = node.get("name", "")
        child_path = f"{path}/{name}" if path else name
        for child in node.get("children", []):
            extract_bookmarks(child, bookmarks, child_path)


def read_chrome_bookmarks(bookmarks_path: Optional[Path] = None, profile: str = "Default") -> List[Dict[str, str]]:
    """Read all bookmarks from a Chrome bookmarks file.

    Root folders are reported under their internal key (``bookmark_bar``,
    ``other``, ``synced``) rather than their display name.

    Args:
        bookmarks_path: Path to the bookmarks file. If None, uses the Chrome location for ``profile``.
        profile: Chrome profile name, used only when bookmarks_path is None

    Returns:
        List of bookmarks with 'id', 'url', 'title' and 'folder' keys

    Raises:
        FileNotFoundError: If bookmarks file doesn't exist
        json.JSONDecodeError: If bookmarks file is malformed
    """
    if bookmarks_path is None:
        bookmarks_path = get_chrome_bookmarks_path(profile)

    roots = load_bookmarks_file(bookmarks_path).get("roots", {})

    all_bookmarks: List[Dict[str, str]] = []
    for root_name in ROOT_NAMES:
        root = roots.get(root_name)
        if not root:
            continue
        for child in root.get("children", []):
            extract_bookmarks(child, all_bookmarks, root_name)

    return all_bookmarks
