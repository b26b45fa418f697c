"""Relays incremental generator output to a push channel.

A RelaySession moves OPENING -> STREAMING -> FINALIZING -> CLOSED. Any
upstream failure goes straight to CLOSED with one error event and nothing
persisted. A cancelled session (client gone) stops pulling, emits nothing
further and persists nothing.
"""

import threading
from collections.abc import Iterator
from enum import Enum

from app.generation.base import BaseGenerator
from app.generation.postprocess import strip_code_fences
from app.logging.logger import Log
from app.relay.events import chunk_event, done_event, error_event
from app.tracking.recorder import TrackingRecorder

STREAM_FAILED_MESSAGE = "Stream failed"


class RelayState(str, Enum):
    OPENING = "opening"
    STREAMING = "streaming"
    FINALIZING = "finalizing"
    CLOSED = "closed"


class RelaySession:
    """Per-request binding of an event stream, its artifact buffer and upload id."""

    def __init__(
        self,
        *,
        generator: BaseGenerator,
        recorder: TrackingRecorder,
        cleaned_text: str,
        template: str,
        upload_id: str | None = None,
    ) -> None:
        self._generator = generator
        self._recorder = recorder
        self._cleaned_text = cleaned_text
        self._template = template
        self.upload_id = upload_id
        self.state = RelayState.OPENING
        self._buffer: list[str] = []
        self._cancelled = threading.Event()

    @property
    def artifact(self) -> str:
        return strip_code_fences("".join(self._buffer))

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Stop the session without emitting or persisting anything more. Thread-safe."""
        if self.state is not RelayState.CLOSED and not self._cancelled.is_set():
            Log.info(f"Relay cancelled after {len(self._buffer)} chunks")
        self._cancelled.set()

    def events(self) -> Iterator[str]:
        """Yield framed events: chunk*, then exactly one of done or error."""
        if self.state is not RelayState.OPENING:
            raise RuntimeError("Relay session can only be consumed once")
        self.state = RelayState.STREAMING
        fragments = self._generator.generate_stream(self._cleaned_text, self._template)
        try:
            for fragment in fragments:
                if self._cancelled.is_set():
                    self._close()
                    return
                if not fragment:
                    continue
                self._buffer.append(fragment)
                yield chunk_event(fragment)
                if self._cancelled.is_set():
                    self._close()
                    return
        except GeneratorExit:
            self._cancelled.set()
            self._close()
            raise
        except Exception as exc:
            self._close()
            if self._cancelled.is_set():
                return
            Log.error(f"Stream error after {len(self._buffer)} chunks: {exc}")
            yield error_event(str(exc) or STREAM_FAILED_MESSAGE)
            return
        finally:
            close = getattr(fragments, "close", None)
            if close is not None:
                close()

        if self._cancelled.is_set():
            self._close()
            return

        self.state = RelayState.FINALIZING
        self._finalize()
        self.state = RelayState.CLOSED
        yield done_event()

    def _finalize(self) -> None:
        if not self._buffer:
            Log.warning("Stream finished but no chunks had text")
        artifact = self.artifact
        if self.upload_id and artifact:
            self._recorder.record_result(self.upload_id, self._generator.model_id, artifact)
        Log.info(f"Stream complete: {len(self._buffer)} chunks, {len(artifact)} chars")

    def _close(self) -> None:
        self.state = RelayState.CLOSED


class Relay:
    """Opens relay sessions over a generator and a tracking recorder."""

    def __init__(self, generator: BaseGenerator, recorder: TrackingRecorder) -> None:
        self._generator = generator
        self._recorder = recorder

    def open(self, cleaned_text: str, template: str, upload_id: str | None) -> RelaySession:
        return RelaySession(
            generator=self._generator,
            recorder=self._recorder,
            cleaned_text=cleaned_text,
            template=template,
            upload_id=upload_id,
        )
