#!/usr/bin/env python3
"""dropbox_share.credentials

Loads the Dropbox app credentials from a local JSON file:

   {
     "client_id": "<app key>",
     "client_secret": "<app secret>"
   }

Both fields are required strings. There is no defaulting and no
environment fallback for the values themselves; only the file location
can be chosen by the caller.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_PATH = "config.json"


class CredentialsError(ValueError):
    pass


@dataclass(frozen=True)
class DropboxCredentials:
    client_id: str
    client_secret: str


def load_credentials(path: str | Path = DEFAULT_CONFIG_PATH) -> DropboxCredentials:
    """Read and validate the credentials file.

    Raises FileNotFoundError (or another OSError) when the file cannot be
    read, and CredentialsError when its content is not the expected shape.
    """
    p = Path(path)
    text = p.read_text(encoding="utf-8")

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise CredentialsError(f"{p.name}: invalid JSON ({e})") from e

    if not isinstance(raw, dict):
        raise CredentialsError(f"{p.name}: expected a JSON object")

    values = {}
    for key in ("client_id", "client_secret"):
        if key not in raw:
            raise CredentialsError(f"{p.name}: missing field '{key}'")
        if not isinstance(raw[key], str):
            raise CredentialsError(f"{p.name}: field '{key}' must be a string")
        values[key] = raw[key]

    return DropboxCredentials(**values)
