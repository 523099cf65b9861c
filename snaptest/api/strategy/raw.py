"""Raw HTTP request strategy."""

from typing import Any

from ..format.Format import Format
from ..format.FormatKind import FormatKind
from .lines import lines
from .Strategy import Strategy


def raw() -> Strategy:
    """Snapshot an HTTP request as its method, URL, sorted headers and body.

    Works with any request object exposing ``method``, ``url``, ``headers`` and
    ``body`` or ``content`` (requests' PreparedRequest, httpx.Request, ...).
    """

    def snapshot(subject: Any) -> Format:
        return Format.text(render_request(subject), "txt")

    return Strategy(
        name="raw",
        path_extension="txt",
        kind=FormatKind.TEXT,
        snapshot=snapshot,
        diff=lines().diff,
    )


def render_request(request: Any) -> str:
    method = getattr(request, "method", None)
    url = getattr(request, "url", None)
    if not method or url is None:
        raise TypeError(
            f"raw strategy requires a request with 'method' and 'url' (found: {type(request).__name__})"
        )

    out = [f"{str(method).upper()} {url}"]
    headers = getattr(request, "headers", None) or {}
    for name, value in sorted(dict(headers).items(), key=lambda item: (str(item[0]).lower(), str(item[1]))):
        out.append(f"{name}: {value}")

    text = "\n".join(out)
    body = _body(request)
    if body:
        text += "\n\n" + body
    return text + "\n"


def _body(request: Any) -> str:
    body = getattr(request, "body", None)
    if body is None:
        body = getattr(request, "content", None)
    if body is None:
        return ""
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode("utf-8", errors="backslashreplace")
    return str(body)
