"""Console sink for debugging and development."""

import json
from typing import Any

from mev_detect.serialization import to_dict


class ConsoleSink:
    """Output records to console (stdout) as JSON."""

    def __init__(self, pretty: bool = False) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        """
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write(self, topic: str, record: Any) -> None:
        """Print one record."""
        data = to_dict(record)
        if self.pretty:
            print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        else:
            print(json.dumps(data, ensure_ascii=False, default=str))
        self._counts[topic] = self._counts.get(topic, 0) + 1

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Print a batch of records."""
        for record in records:
            self.write(topic, record)

    def close(self) -> None:
        """Print summary."""
        print(f"\n{'='*60}")
        print("Console Sink Summary")
        print("=" * 60)
        for topic, count in self._counts.items():
            print(f"  {topic}: {count} records")
