"""Dataclass model for a single completed request/response exchange.

The record is built by the client once the response has arrived and is handed
read-only to observers such as :func:`fauna_logger.client_logger.logger`.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import parse_qsl, urlsplit
import time

import requests

from .json_utils import safe_json_load

@dataclass(frozen=True, slots=True)
class RequestResult:
    method: str
    path: str
    query: Optional[Mapping[str, Any]]
    auth: Any
    request_content: Any
    response_headers: Mapping[str, str]
    response_content: Any
    status_code: int
    start_time: float
    end_time: float
    response_raw: str = ''
    elapsed: Optional[float] = None

    @property
    def time_taken(self) -> float:
        """Seconds spent on the request.

        ``elapsed`` when the client measured it directly, otherwise
        ``end_time - start_time``.
        """
        if self.elapsed is not None:
            return self.elapsed
        return self.end_time - self.start_time

    @classmethod
    def from_response(
        cls,
        response: requests.Response,
        auth: Any = None,
        request_content: Any = None,
    ) -> 'RequestResult':
        """Capture a completed ``requests`` exchange.

        ``auth`` falls back to the request's ``Authorization`` header and
        ``request_content`` to the JSON-decoded request body. Bodies that are
        not JSON become ``None``. Repeated query keys keep only their last
        value (``?a=1&a=2`` gives ``{'a': '2'}``).

        ``time_taken`` is ``response.elapsed``.
        """
        request = response.request
        url = urlsplit(request.url or '')
        query = dict(parse_qsl(url.query, keep_blank_values=True)) or None
        if auth is None:
            auth = request.headers.get('Authorization')
        if request_content is None and request.body:
            body = request.body
            if isinstance(body, bytes):
                body = body.decode('utf-8', errors='replace')
            request_content = safe_json_load(body)
        elapsed = response.elapsed.total_seconds()
        end_time = time.time()
        return cls(
            method=request.method or '',
            path=url.path.lstrip('/'),
            query=query,
            auth=auth,
            request_content=request_content,
            response_headers=dict(response.headers),
            response_content=safe_json_load(response.text),
            status_code=response.status_code,
            start_time=end_time - elapsed,
            end_time=end_time,
            response_raw=response.text,
            elapsed=elapsed,
        )
