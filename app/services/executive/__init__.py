"""Executive dashboard: metric extractors, pillar scorer, alerts."""

from app.services.executive.alerts import Alert, generate_alerts, sort_alerts
from app.services.executive.dashboard_engine import (
    ExecutiveSummary,
    build_executive_summary,
    compute_executive_summary,
)
from app.services.executive.dataset_loader import CondominiumDataset, load_dataset
from app.services.executive.metrics import MetricSnapshot, extract_metrics
from app.services.executive.pillars import PillarScore, compute_overall, score_pillars

__all__ = [
    "Alert",
    "CondominiumDataset",
    "ExecutiveSummary",
    "MetricSnapshot",
    "PillarScore",
    "build_executive_summary",
    "compute_executive_summary",
    "compute_overall",
    "extract_metrics",
    "generate_alerts",
    "load_dataset",
    "score_pillars",
    "sort_alerts",
]
