import json
import tempfile
import unittest
from pathlib import Path

from dropbox_share.credentials import CredentialsError, DropboxCredentials, load_credentials


class TestLoadCredentials(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, content: str) -> Path:
        p = self.dir / "config.json"
        p.write_text(content, encoding="utf-8")
        return p

    def test_valid_file(self):
        p = self._write(json.dumps({"client_id": "app-key", "client_secret": "app-secret"}))
        creds = load_credentials(p)
        self.assertEqual(creds, DropboxCredentials(client_id="app-key", client_secret="app-secret"))

    def test_extra_fields_ignored(self):
        p = self._write(json.dumps({"client_id": "a", "client_secret": "b", "note": 1}))
        self.assertEqual(load_credentials(p).client_secret, "b")

    def test_missing_secret(self):
        p = self._write(json.dumps({"client_id": "a"}))
        with self.assertRaises(CredentialsError) as ctx:
            load_credentials(p)
        self.assertIn("client_secret", str(ctx.exception))

    def test_missing_id(self):
        p = self._write(json.dumps({"client_secret": "b"}))
        with self.assertRaises(CredentialsError):
            load_credentials(p)

    def test_non_string_field(self):
        p = self._write(json.dumps({"client_id": 123, "client_secret": "b"}))
        with self.assertRaises(CredentialsError):
            load_credentials(p)

    def test_malformed_json(self):
        p = self._write("{ not json")
        with self.assertRaises(CredentialsError):
            load_credentials(p)

    def test_top_level_not_object(self):
        p = self._write(json.dumps(["a", "b"]))
        with self.assertRaises(CredentialsError):
            load_credentials(p)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_credentials(self.dir / "nope.json")


if __name__ == "__main__":
    unittest.main()
