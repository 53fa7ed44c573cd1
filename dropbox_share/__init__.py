__all__ = [
    "DropboxCredentials",
    "CredentialsError",
    "load_credentials",
    "DropboxClient",
    "DropboxError",
    "ShareError",
    "get_access_token",
    "build_share_entries",
]

from .credentials import DropboxCredentials, CredentialsError, load_credentials
from .dropbox_client import DropboxClient, DropboxError, ShareError, get_access_token
from .sharing import build_share_entries
