"""Alert deduplication and publishing."""

from mev_detect.alerts.dedup import AlertDeduplicator, alert_key
from mev_detect.alerts.pipeline import AlertPipeline, build_alert

__all__ = ["AlertDeduplicator", "AlertPipeline", "alert_key", "build_alert"]
