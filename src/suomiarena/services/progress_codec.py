"""Conversion of player progress to and from CSV and JSON."""
import csv
import io
import json
import logging
from typing import Iterable, List, Optional

from suomiarena.models.session_models import GameMode, PlayerProgress, TimeRecord, TopicProgress

logger = logging.getLogger(__name__)

HEADER = ["Kind", "Mode", "TopicKey", "Payload"]
KIND_BEST_TIME = "best-time"
KIND_TOPIC_PROGRESS = "topic-progress"

EXPORT_HEADER = ["Mode", "Topic", "Time (seconds)", "Time (formatted)", "Accuracy %", "Item Count", "Date"]


def format_time(ms: int) -> str:
    """Format milliseconds as m:ss."""
    seconds = ms // 1000
    return f"{seconds // 60}:{seconds % 60:02d}"


def _write_rows(rows: Iterable[List]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


def progress_to_csv(progress: PlayerProgress) -> str:
    """Serialise progress to the tagged CSV document stored by the data server."""
    rows = [HEADER]
    for record in progress.best_times:
        payload = {
            "timeMs": record.time_ms,
            "date": record.date,
            "accuracy": record.accuracy,
            "itemCount": record.item_count,
        }
        rows.append([KIND_BEST_TIME, record.mode.value, record.topic_key, json.dumps(payload, ensure_ascii=False)])
    for topic in progress.topic_progress:
        payload = {"completed": topic.completed, "date": topic.date}
        rows.append([KIND_TOPIC_PROGRESS, topic.mode.value, topic.topic_key, json.dumps(payload, ensure_ascii=False)])
    return _write_rows(rows)


def csv_to_progress(text: str) -> Optional[PlayerProgress]:
    """Parse a tagged CSV document.

    Returns None when the document is empty, has the wrong header, has no
    data rows or contains a row that cannot be decoded. Rows of unknown kind
    are skipped.
    """
    if not text or not text.strip():
        return None

    best_times = []
    topic_progress = []
    row_count = 0
    try:
        reader = csv.reader(io.StringIO(text.strip()))
        header = next(reader)
        if header != HEADER:
            logger.warning(f"Unexpected progress CSV header: {header}")
            return None
        for line_number, row in enumerate(reader, start=2):
            if not row:
                continue
            row_count += 1
            if len(row) != len(HEADER):
                raise ValueError(f"line {line_number}: expected {len(HEADER)} fields, got {len(row)}")
            kind, mode, topic_key, raw_payload = row
            if kind not in (KIND_BEST_TIME, KIND_TOPIC_PROGRESS):
                logger.warning(f"Skipping progress row of unknown kind {kind!r} on line {line_number}")
                continue
            payload = json.loads(raw_payload)
            if not isinstance(payload, dict):
                raise ValueError(f"line {line_number}: payload is not an object")
            if kind == KIND_BEST_TIME:
                best_times.append(
                    TimeRecord(
                        mode=GameMode(mode),
                        topic_key=topic_key,
                        time_ms=int(payload["timeMs"]),
                        date=str(payload.get("date", "")),
                        accuracy=int(payload.get("accuracy", 0)),
                        item_count=int(payload.get("itemCount", 0)),
                    )
                )
            else:
                topic_progress.append(
                    TopicProgress(
                        mode=GameMode(mode),
                        topic_key=topic_key,
                        completed=bool(payload["completed"]),
                        date=str(payload.get("date", "")),
                    )
                )
    except (csv.Error, ValueError, KeyError, TypeError) as e:
        logger.warning(f"Invalid progress CSV: {e}")
        return None

    if not row_count:
        logger.info("Progress CSV has a header but no data rows")
        return None

    return PlayerProgress(best_times=tuple(best_times), topic_progress=tuple(topic_progress))


def progress_to_json(progress: PlayerProgress) -> str:
    """Serialise progress for device-local storage."""
    return json.dumps(progress.to_dict(), ensure_ascii=False)


def json_to_progress(text: str) -> Optional[PlayerProgress]:
    """Parse locally stored progress; None when missing or malformed."""
    if not text:
        return None
    try:
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("stored progress is not an object")
        return PlayerProgress.from_dict(data)
    except (ValueError, KeyError, TypeError) as e:
        logger.warning(f"Invalid stored progress: {e}")
        return None


def export_times_csv(records: Iterable[TimeRecord]) -> str:
    """Render best times as the downloadable results table."""
    rows = [EXPORT_HEADER]
    for record in records:
        rows.append([
            record.mode.value,
            record.topic_key,
            (record.time_ms + 500) // 1000,
            format_time(record.time_ms),
            record.accuracy,
            record.item_count,
            record.date,
        ])
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="\n").writerows(rows)
    return buffer.getvalue()
