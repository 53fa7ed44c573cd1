#!/usr/bin/env python3
"""
Share every top-level Dropbox folder with a list of collaborators (editor).

Examples:
  # credentials from ./config.json, one recipient
  python -m dropbox_share.main --email alice@example.com

  # several recipients, explicit config file
  python -m dropbox_share.main --config secrets/dropbox.json \
    --email alice@example.com --email bob@example.com

Optional env vars (a local .env is loaded first):
  DROPBOX_CONFIG_PATH="config.json"
  DROPBOX_SHARE_EMAILS="alice@example.com,bob@example.com"
  DROPBOX_TIMEOUT_S="60"

Notes:
- Only the first page of the root listing is shared.
- A failed share call is reported but does not change the exit status.
"""

from __future__ import annotations

import argparse
import logging
import os

from dotenv import load_dotenv

from .credentials import DEFAULT_CONFIG_PATH, CredentialsError, load_credentials
from .dropbox_client import DEFAULT_TIMEOUT_S, DropboxClient, DropboxError, ShareError, get_access_token
from .sharing import parse_emails

log = logging.getLogger("dropbox-share")


def positive_int(value: str) -> int:
    try:
        n = int(str(value).strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value!r}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dropbox-share")
    ap.add_argument(
        "--config",
        default=None,
        help=f"Path to the credentials JSON (default: $DROPBOX_CONFIG_PATH or {DEFAULT_CONFIG_PATH}).",
    )
    ap.add_argument(
        "--email",
        action="append",
        default=None,
        help="Recipient address; repeat for several. Overrides $DROPBOX_SHARE_EMAILS.",
    )
    ap.add_argument(
        "--timeout",
        type=positive_int,
        default=None,
        help=f"Per-request timeout in seconds (default: $DROPBOX_TIMEOUT_S or {DEFAULT_TIMEOUT_S}).",
    )
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config_path = args.config or os.getenv("DROPBOX_CONFIG_PATH", "").strip() or DEFAULT_CONFIG_PATH
    emails = [e.strip() for e in args.email if e.strip()] if args.email else parse_emails(os.getenv("DROPBOX_SHARE_EMAILS"))
    if not emails:
        ap.error("no recipients: pass --email or set DROPBOX_SHARE_EMAILS")

    timeout_s = args.timeout
    if timeout_s is None:
        try:
            timeout_s = positive_int(os.getenv("DROPBOX_TIMEOUT_S", "").strip() or DEFAULT_TIMEOUT_S)
        except argparse.ArgumentTypeError as e:
            ap.error(f"DROPBOX_TIMEOUT_S {e}")

    try:
        credentials = load_credentials(config_path)
        token = get_access_token(credentials, timeout_s=timeout_s)
        dbx = DropboxClient(access_token=token, timeout_s=timeout_s)
        folder_paths = dbx.list_root_folders()
    except (OSError, CredentialsError, DropboxError) as e:
        log.error(f"{type(e).__name__}: {e}")
        return 1

    log.info(f"Found {len(folder_paths)} folder(s) at the root")
    if not folder_paths:
        log.info("Nothing to share")
        return 0

    try:
        dbx.share_folders(folder_paths, emails)
    except ShareError as e:
        print(f"Error sharing folders: {e.body}")
        return 0
    except DropboxError as e:
        log.error(f"{type(e).__name__}: {e}")
        return 1

    print(f"Shared {len(folder_paths)} folder(s) with {', '.join(emails)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
