"""JSON Lines file sink for alerts."""

import json
from pathlib import Path
from typing import Any, TextIO

from mev_detect.exceptions import SinkError
from mev_detect.serialization import to_dict


class JsonFileSink:
    """Append records to one JSON Lines file per topic."""

    def __init__(self, output_dir: str | Path) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write ``<topic>.jsonl`` files into.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._files: dict[str, TextIO] = {}
        self._counts: dict[str, int] = {}

    def path_for(self, topic: str) -> Path:
        # mev.alerts -> mev_alerts.jsonl
        return self.output_dir / (topic.replace(".", "_") + ".jsonl")

    def write(self, topic: str, record: Any) -> None:
        """Append one record."""
        f = self._files.get(topic)
        if f is None:
            try:
                f = open(self.path_for(topic), "a", encoding="utf-8")
            except OSError as e:
                raise SinkError(f"Cannot open output for {topic}: {e}") from e
            self._files[topic] = f

        f.write(json.dumps(to_dict(record), ensure_ascii=False, default=str) + "\n")
        f.flush()
        self._counts[topic] = self._counts.get(topic, 0) + 1

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Append a batch of records."""
        for record in records:
            self.write(topic, record)

    def close(self) -> None:
        """Close open files and print summary."""
        for f in self._files.values():
            f.close()
        self._files.clear()
        print(f"JSON files written to: {self.output_dir}")
        for topic, count in self._counts.items():
            print(f"  {topic}: {count} records")
