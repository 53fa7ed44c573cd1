import json

import requests


def make_response(status_code: int, body) -> requests.Response:
    """Real requests.Response with a canned body (dict/list -> JSON, str -> text)."""
    r = requests.Response()
    r.status_code = status_code
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    r._content = (body or "").encode("utf-8")
    r.encoding = "utf-8"
    return r
