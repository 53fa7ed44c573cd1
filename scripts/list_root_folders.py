#!/usr/bin/env python3
"""
list_root_folders.py

Prints the root folders the share run would pick up, without sharing.

Usage:
  python -m scripts.list_root_folders
  DROPBOX_CONFIG_PATH="secrets/dropbox.json" python -m scripts.list_root_folders
"""

import os
from dotenv import load_dotenv

load_dotenv()

from dropbox_share import DropboxClient, get_access_token, load_credentials


def main():
    config_path = os.getenv("DROPBOX_CONFIG_PATH", "").strip() or "config.json"

    creds = load_credentials(config_path)
    dbx = DropboxClient(access_token=get_access_token(creds))

    folders = dbx.list_root_folders()
    print(f"\n{len(folders)} folder(s) at the root:\n")
    for p in folders:
        print(f"  [DIR]  {p}")


if __name__ == "__main__":
    main()
