#!/usr/bin/env python3
"""
dropbox_share.dropbox_client

Dropbox API v2 helper:
- Exchange app credentials for a bearer token
- List the folders at the account root
- Share a batch of folders with email members

Uses:
- https://api.dropbox.com/oauth2/token
- https://api.dropboxapi.com/2/files/list_folder
- https://api.dropboxapi.com/2/sharing/share_folder_batch
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from .credentials import DropboxCredentials
from .sharing import build_share_entries

OAUTH_TOKEN_URL = "https://api.dropbox.com/oauth2/token"
RPC = "https://api.dropboxapi.com/2"

DEFAULT_TIMEOUT_S = 60

log = logging.getLogger(__name__)


class DropboxError(RuntimeError):
    def __init__(self, message: str, *, status: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body


class ShareError(DropboxError):
    pass


def _parse_json(r: requests.Response, what: str) -> Any:
    try:
        return r.json()
    except ValueError:
        raise DropboxError(
            f"{what}: non-JSON response {r.status_code}: {r.text[:500]}",
            status=r.status_code,
            body=r.text,
        )


def get_access_token(credentials: DropboxCredentials, timeout_s: int = DEFAULT_TIMEOUT_S) -> str:
    """
    client_credentials grant. The form fields go in the body so they match
    the urlencoded Content-Type requests sets for data=.
    """
    try:
        r = requests.post(
            OAUTH_TOKEN_URL,
            data={
                "grant_type": "client_credentials",
                "client_id": credentials.client_id,
                "client_secret": credentials.client_secret,
            },
            timeout=timeout_s,
        )
    except requests.RequestException as e:
        raise DropboxError(f"token request failed: {e}") from e

    if r.status_code >= 400:
        raise DropboxError(
            f"token exchange failed ({r.status_code}): {r.text[:500]}",
            status=r.status_code,
            body=r.text,
        )

    data = _parse_json(r, "token exchange")
    token = data.get("access_token") if isinstance(data, dict) else None
    if not isinstance(token, str) or not token:
        raise DropboxError("token response has no access_token", status=r.status_code, body=r.text)
    return token


@dataclass
class DropboxClient:
    access_token: str
    timeout_s: int = DEFAULT_TIMEOUT_S

    def __post_init__(self) -> None:
        if not (self.access_token or "").strip():
            raise ValueError("Missing Dropbox access token")

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }

    def _post(self, endpoint: str, payload: dict) -> requests.Response:
        url = f"{RPC}{endpoint}"
        log.debug(f"POST {url}")
        try:
            return requests.post(
                url,
                headers=self._headers(),
                data=json.dumps(payload),
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            raise DropboxError(f"{endpoint} request failed: {e}") from e

    def list_root_folders(self) -> list[str]:
        """
        One page of the root listing. Returns path_display of every entry
        that has one, in response order.
        """
        r = self._post(
            "/files/list_folder",
            {
                "path": "",
                "recursive": False,
                "include_media_info": False,
                "include_deleted": False,
                "include_has_explicit_shared_members": False,
                "include_mounted_folders": True,
            },
        )
        if r.status_code >= 400:
            log.error(f"list_folder failed ({r.status_code}): {r.text}")
            raise DropboxError(
                f"list_folder failed ({r.status_code}): {r.text[:500]}",
                status=r.status_code,
                body=r.text,
            )

        data = _parse_json(r, "list_folder")
        entries = data.get("entries") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise DropboxError("list_folder response has no entries list", status=r.status_code, body=r.text)

        # cursor is not followed
        if data.get("has_more"):
            log.warning("list_folder returned has_more=true; only the first page is shared")

        paths: list[str] = []
        for e in entries:
            disp = e.get("path_display") if isinstance(e, dict) else None
            if isinstance(disp, str):
                paths.append(disp)
        return paths

    def share_folders(self, folder_paths: list[str], emails: list[str]) -> dict:
        entries = build_share_entries(folder_paths, emails)
        log.info(f"Sharing {len(entries)} folder(s) with {len(emails)} member(s)")

        r = self._post("/sharing/share_folder_batch", {"entries": entries})
        if r.status_code >= 400:
            raise ShareError(
                f"share_folder_batch failed ({r.status_code}): {r.text[:500]}",
                status=r.status_code,
                body=r.text,
            )
        if not r.text.strip():
            return {}
        try:
            return r.json()
        except ValueError:
            # accepted by Dropbox; the body is informational only
            log.warning(f"share_folder_batch returned non-JSON body ({r.status_code}): {r.text[:500]}")
            return {}
