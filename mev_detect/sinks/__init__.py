"""Output sinks for sandwich alerts."""

from mev_detect.sinks.console import ConsoleSink
from mev_detect.sinks.json_file import JsonFileSink
from mev_detect.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink"]
