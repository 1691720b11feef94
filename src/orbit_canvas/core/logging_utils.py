"""Logging helpers scoped to the orbit canvas package."""
from __future__ import annotations

import json
import time
from datetime import datetime
from pathlib import Path
from typing import Optional


class SessionLogger:
    """Buffered logger that stores canvas interaction events to CSV."""

    EVENTS_HEADER = ["t", "type", "x", "y", "details"]

    def __init__(
        self,
        root_dir: str | Path = "data/sessions",
        session_id: Optional[str] = None,
        *,
        flush_threshold: int = 50,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        def make_candidate(suffix: Optional[int] = None) -> str:
            base = session_id or f"{timestamp}_session"
            if suffix is None:
                return base
            if session_id:
                return f"{session_id}_{suffix}"
            return f"{base}_{suffix:02d}"

        candidate_id = make_candidate()
        suffix = 1
        while (self.root_dir / candidate_id).exists():
            candidate_id = make_candidate(suffix)
            suffix += 1

        self.session_id = candidate_id
        self.session_dir = self.root_dir / self.session_id
        self.session_dir.mkdir(parents=True, exist_ok=False)

        self.events_path = self.session_dir / "events.csv"
        self.meta_path = self.session_dir / "meta.json"

        self._ev_file = self.events_path.open("w", newline="")
        self._ev_file.write(",".join(self.EVENTS_HEADER) + "\n")
        self._ev_file.flush()
        self._ev_buffer: list[str] = []
        self._ev_threshold = max(1, flush_threshold)
        self._start = time.perf_counter()

        last_session_marker = self.root_dir / "last_session.txt"
        last_session_marker.write_text(self.session_id, encoding="utf-8")

    def write_meta(self, meta: dict) -> None:
        with self.meta_path.open("w", encoding="utf-8") as fh:
            json.dump(meta, fh, indent=2, sort_keys=True)

    def elapsed(self) -> float:
        return time.perf_counter() - self._start

    def log_event(
        self,
        event_type: str,
        x: float | None = None,
        y: float | None = None,
        details: object = "",
    ) -> None:
        values = (self.elapsed(), event_type, x, y, details)
        self._ev_buffer.append(",".join(self._format_value(v) for v in values))
        if len(self._ev_buffer) >= self._ev_threshold:
            self._flush_events()

    def close(self) -> None:
        if self._ev_file.closed:
            return
        self._flush_events()
        self._ev_file.close()

    def _flush_events(self) -> None:
        if self._ev_buffer:
            self._ev_file.write("\n".join(self._ev_buffer) + "\n")
            self._ev_file.flush()
            self._ev_buffer.clear()

    @staticmethod
    def _format_value(value: object) -> str:
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return f"{value:.10g}"
        # Keep one event per row.
        return str(value).replace(",", ";").replace("\n", " ")

    def __enter__(self) -> "SessionLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


__all__ = ["SessionLogger"]
