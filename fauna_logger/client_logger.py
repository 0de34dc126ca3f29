"""Observer helpers that render each completed request as a log entry.

Example::

    from fauna_logger import logger, LineSink

    observer = logger(LineSink())
    client = Client(observer=observer, ...)

Every time the client finishes a request it calls ``observer(request_result)``
and the sink receives a block such as::

    Fauna GET /users/42
      Credentials: secret
      Response headers: {
        "content-type": "application/json"
      }
      Response JSON: {
        "id": 42
      }
      Response (200): Network latency 123ms
"""
from __future__ import annotations
from typing import Any, Callable, Mapping, Optional

from .json_utils import to_json_pretty
from .models import RequestResult

INDENT = '  '

def logger(sink: Callable[[str], Any]) -> Callable[[RequestResult], None]:
    """Build an observer that passes a rendered entry for each result to ``sink``.

    The observer holds no state of its own, so it may be called from any
    thread the client completes requests on. Serializing concurrent writes is
    up to the sink.
    """
    def observe(request_result: RequestResult) -> None:
        sink(show_request_result(request_result))
    return observe

def show_request_result(request_result: RequestResult) -> str:
    """Translate a :class:`RequestResult` into a string suitable for logging."""
    rr = request_result
    lines = [
        f'Fauna {str(rr.method).upper()} /{rr.path}{_query_string_for_logging(rr.query)}',
        f'  Credentials: {rr.auth}',
    ]
    # None and False omit the line; an empty body is still shown
    if rr.request_content is not None and rr.request_content is not False:
        lines.append(f'  Request JSON: {_indent(to_json_pretty(rr.request_content))}')
    lines.append(f'  Response headers: {_indent(to_json_pretty(dict(rr.response_headers)))}')
    lines.append(f'  Response JSON: {_indent(to_json_pretty(rr.response_content))}')
    lines.append(f'  Response ({rr.status_code}): Network latency {int(rr.time_taken * 1000)}ms')
    return '\n'.join(lines)

def _indent(text: str) -> str:
    return ('\n' + INDENT).join(text.split('\n'))

def _query_string_for_logging(query: Optional[Mapping[str, Any]]) -> str:
    if not query:
        return ''
    return '?' + '&'.join(f'{k}={v}' for k, v in query.items())
