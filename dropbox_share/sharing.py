from __future__ import annotations

from typing import Any, Dict, List

ACCESS_LEVEL = "editor"


def build_share_entries(folder_paths: List[str], emails: List[str]) -> List[Dict[str, Any]]:
    """
    One share_folder_batch entry per folder, every email as a member:

      {"path": "/A",
       "members": [{"member": {".tag": "email", "email": "x@y.com"},
                    "access_level": {".tag": "editor"}}]}
    """
    return [
        {
            "path": path,
            "members": [
                {
                    "member": {".tag": "email", "email": email},
                    "access_level": {".tag": ACCESS_LEVEL},
                }
                for email in emails
            ],
        }
        for path in folder_paths
    ]


def parse_emails(raw: str | None) -> List[str]:
    """ "a@x.com, b@y.com" -> ["a@x.com", "b@y.com"] """
    return [e.strip() for e in (raw or "").split(",") if e.strip()]
