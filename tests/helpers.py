import json
from typing import Any, Optional
from unittest.mock import MagicMock

import requests


def make_response(status_code: int = 200, body: Any = None, raw: Optional[bytes] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode()
    else:
        response._content = b""
    return response


def fake_session(response: Optional[requests.Response] = None, error: Optional[Exception] = None) -> MagicMock:
    session = MagicMock(spec=requests.Session)
    if error is not None:
        session.post.side_effect = error
    else:
        session.post.return_value = response if response is not None else make_response()
    return session
