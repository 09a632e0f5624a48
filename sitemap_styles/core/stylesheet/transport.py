from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from starlette.responses import Response


class TransportClosedError(RuntimeError):
    pass


class Transport(ABC):
    """Output side of a stylesheet render: one response, written once."""

    @abstractmethod
    def set_content_type(self, mime_type: str, charset: str) -> None:
        """Set the response Content-Type header."""

    @abstractmethod
    def write_raw(self, data: str) -> None:
        """Append already-escaped output to the response body."""

    @abstractmethod
    def terminate(self) -> None:
        """Finish the response. Nothing may be written afterwards."""


class ResponseTransport(Transport):
    """Buffers a render and hands it over as a Starlette Response."""

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.content_type: Optional[str] = None
        self._chunks: List[bytes] = []
        self._terminated = False

    @property
    def terminated(self) -> bool:
        return self._terminated

    def set_content_type(self, mime_type: str, charset: str) -> None:
        self._ensure_open()
        self.content_type = f"{mime_type}; charset={charset}"

    def write_raw(self, data: str) -> None:
        self._ensure_open()
        self._chunks.append(data.encode("utf-8"))

    def terminate(self) -> None:
        self._terminated = True

    def body(self) -> bytes:
        return b"".join(self._chunks)

    def to_response(self) -> Response:
        if not self._terminated:
            raise RuntimeError("Render did not terminate the transport")
        return Response(content=self.body(), status_code=self.status_code, media_type=self.content_type)

    def _ensure_open(self) -> None:
        if self._terminated:
            raise TransportClosedError("Transport already terminated")
