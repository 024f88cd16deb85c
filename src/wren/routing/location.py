"""The fragment identifier and its change events.

``Location`` plays the part of ``window.location.hash``: assigning a new
fragment publishes a change event that the navigator consumes. As with
a browser, assigning the fragment that is already current is a no-op.
"""

import math

import anyio
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream


def normalize_fragment(fragment: str) -> str:
    """Return *fragment* with exactly one leading ``#``."""
    return "#" + fragment.removeprefix("#")


def split_fragment(fragment: str) -> tuple[str, str]:
    """Split a fragment into its path and raw query string.

    An empty fragment is the root path::

        "#/search?q=go"  -> ("/search", "q=go")
        ""               -> ("/", "")
    """
    body = fragment.removeprefix("#")
    path, _, query = body.partition("?")
    return path or "/", query


class Location:
    """Holds the current fragment and publishes changes to it."""

    __slots__ = ("_fragment", "_receive", "_send")

    def __init__(self, fragment: str = "") -> None:
        self._fragment = normalize_fragment(fragment) if fragment else ""
        send, receive = anyio.create_memory_object_stream(max_buffer_size=math.inf)
        self._send: MemoryObjectSendStream[str] = send
        self._receive: MemoryObjectReceiveStream[str] = receive

    @property
    def fragment(self) -> str:
        return self._fragment

    def assign(self, path: str) -> bool:
        """Set the fragment to *path*.

        Returns True when the fragment changed and a change event was
        published.
        """
        fragment = normalize_fragment(path)
        if fragment == self._fragment:
            return False
        self._fragment = fragment
        self._send.send_nowait(fragment)
        return True

    def changes(self) -> MemoryObjectReceiveStream[str]:
        """Return the stream of change events."""
        return self._receive

    def close(self) -> None:
        """Stop publishing; consumers of ``changes()`` finish iterating."""
        self._send.close()
