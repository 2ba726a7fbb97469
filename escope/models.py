"""Data models for cluster, node, index, shard, GC and term-vector information."""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from escope import constants

_UNIT = 1024
_UNIT_LETTERS = "kmgt"
_SIZE_MULTIPLIERS = (
    ("kb", 1024),
    ("mb", 1024 * 1024),
    ("gb", 1024 * 1024 * 1024),
    ("tb", 1024 * 1024 * 1024 * 1024),
)


def parse_size(size_str: str) -> int:
    """Parse a size string such as "512b" into a byte count; 0 when unparsable.

    A single trailing "b" is stripped before unit suffixes are looked at.
    """
    if size_str in (constants.EMPTY_STRING, constants.DASH_STRING):
        return 0

    text = size_str.strip().lower()
    if text.endswith("b"):
        text = text[:-1]

    multiplier = 1
    for suffix, factor in _SIZE_MULTIPLIERS:
        if text.endswith(suffix):
            multiplier = factor
            text = text[: -len(suffix)]
            break

    if not text or text != text.strip():
        return 0
    try:
        value = float(text)
    except ValueError:
        return 0
    result = value * multiplier
    if not math.isfinite(result):
        return 0
    return int(result)


def format_bytes(num_bytes: int) -> str:
    """Render a byte count with one decimal and a lower-case unit, e.g. "1.5kb"."""
    if num_bytes == 0:
        return constants.ZERO_BYTE_STRING
    if num_bytes < _UNIT:
        return f"{num_bytes}b"
    div, exp = _UNIT, 0
    n = num_bytes // _UNIT
    while n >= _UNIT:
        div *= _UNIT
        exp += 1
        n //= _UNIT
    return f"{num_bytes / div:.1f}{_UNIT_LETTERS[exp]}b"


# --- health check models ---


@dataclass
class CheckNodeHealth:
    timestamp: Optional[datetime] = None
    node_id: str = ""
    name: str = ""
    cpu_usage: float = 0.0
    heap_usage: float = 0.0


@dataclass
class ShardHealth:
    timestamp: Optional[datetime] = None
    started_shards: int = 0
    initializing_shards: int = 0
    relocating_shards: int = 0
    unassigned_shards: int = 0


@dataclass
class IndexHealth:
    timestamp: Optional[datetime] = None
    name: str = ""
    health: str = ""
    status: str = ""
    docs: str = ""
    size: str = ""


@dataclass
class ResourceUsage:
    timestamp: Optional[datetime] = None
    node_count: int = 0
    cpu_usage: float = 0.0
    heap_usage: float = 0.0
    disk_total: int = 0
    disk_available: int = 0


@dataclass
class Performance:
    timestamp: Optional[datetime] = None
    index_total: int = 0
    index_time_in_millis: int = 0
    query_total: int = 0
    query_time_in_millis: int = 0


@dataclass
class SegmentWarnings:
    high_segment_indices: int = 0
    small_segment_indices: int = 0
    large_segment_indices: int = 0


# --- cluster models ---


@dataclass
class ClusterInfo:
    timestamp: Optional[datetime] = None
    cluster_name: str = ""
    status: str = ""
    number_of_nodes: int = 0
    active_primary_shards: int = 0
    active_shards: int = 0
    unassigned_shards: int = 0
    relocating_shards: int = 0
    initializing_shards: int = 0
    delayed_unassigned_shards: int = 0
    number_of_pending_tasks: int = 0
    number_of_in_flight_fetch: int = 0
    task_max_waiting_in_queue_millis: int = 0
    active_shards_percent_as_number: float = 0.0
    timed_out: bool = False


@dataclass
class NodeBreakdown:
    data_nodes: int = 0
    master_nodes: int = 0
    ingest_nodes: int = 0
    coordinating_nodes: int = 0

    def __str__(self) -> str:
        labelled = (
            ("Data", self.data_nodes),
            ("Master", self.master_nodes),
            ("Ingest", self.ingest_nodes),
            ("Coord", self.coordinating_nodes),
        )
        parts = [f"{label}: {count}" for label, count in labelled if count > 0]
        return ", ".join(parts) if parts else "unknown"


@dataclass
class ClusterStats:
    cluster_name: str = ""
    status: str = ""

    total_nodes: int = 0
    data_nodes: int = 0
    master_nodes: int = 0
    ingest_nodes: int = 0
    coordinating_nodes: int = 0

    total_disk_bytes: int = 0
    used_disk_bytes: int = 0
    available_disk_bytes: int = 0
    disk_usage_percent: float = 0.0

    total_heap_bytes: int = 0
    used_heap_bytes: int = 0
    heap_usage_percent: float = 0.0
    total_memory_bytes: int = 0
    used_memory_bytes: int = 0
    memory_usage_percent: float = 0.0

    total_documents: int = 0
    total_indices: int = 0
    primary_shards: int = 0
    total_shards: int = 0
    avg_shard_size_gb: float = 0.0

    es_version: str = ""
    jvm_versions: list[str] = field(default_factory=list)

    def node_breakdown(self) -> str:
        """Describe the node roles present, e.g. "Data: 3, Master: 1"."""
        return str(
            NodeBreakdown(
                data_nodes=self.data_nodes,
                master_nodes=self.master_nodes,
                ingest_nodes=self.ingest_nodes,
                coordinating_nodes=self.coordinating_nodes,
            )
        )


# --- GC models ---


@dataclass
class MemorySpace:
    used: int = 0
    max: int = 0
    used_str: str = ""
    max_str: str = ""
    percent: float = 0.0


@dataclass
class GCMetrics:
    count: int = 0
    total_time: int = 0
    avg_time: float = 0.0
    count_str: str = ""
    total_time_str: str = ""
    avg_time_str: str = ""


@dataclass
class GCPerformance:
    frequency: float = 0.0
    throughput: float = 0.0
    memory_pressure: str = ""
    frequency_str: str = ""
    throughput_str: str = ""


@dataclass
class GCInfo:
    node_name: str = ""
    eden_space: MemorySpace = field(default_factory=MemorySpace)
    survivor_space: MemorySpace = field(default_factory=MemorySpace)
    old_generation: MemorySpace = field(default_factory=MemorySpace)
    total_heap: MemorySpace = field(default_factory=MemorySpace)
    young_gc: GCMetrics = field(default_factory=GCMetrics)
    old_gc: GCMetrics = field(default_factory=GCMetrics)
    full_gc: GCMetrics = field(default_factory=GCMetrics)
    performance: GCPerformance = field(default_factory=GCPerformance)


@dataclass
class GCCollection:
    nodes: list[GCInfo] = field(default_factory=list)
    total: GCPerformance = field(default_factory=GCPerformance)


# --- index models ---


@dataclass
class IndexInfo:
    alias: str = ""
    name: str = ""
    health: str = ""
    status: str = ""
    docs_count: str = ""
    store_size: str = ""
    primary: str = ""
    replica: str = ""


@dataclass
class LuceneStats:
    index_name: str = ""
    segment_count: int = 0
    segment_memory: str = ""
    segment_memory_bytes: int = 0
    index_memory: str = ""
    index_memory_bytes: int = 0
    terms_memory: str = ""
    terms_memory_bytes: int = 0
    stored_memory: str = ""
    stored_memory_bytes: int = 0
    doc_values_memory: str = ""
    doc_values_memory_bytes: int = 0
    points_memory: str = ""
    points_memory_bytes: int = 0
    norms_memory: str = ""
    norms_memory_bytes: int = 0
    fixed_bit_set_memory: str = ""
    fixed_bit_set_memory_bytes: int = 0
    version_map_memory: str = ""
    version_map_memory_bytes: int = 0
    max_unsafe_auto_id_timestamp: int = 0


@dataclass
class IndexDetailInfo:
    name: str = ""
    search_rate: str = ""
    index_rate: str = ""
    avg_query_time: str = ""
    avg_index_time: str = ""


@dataclass
class IndexStatsSnapshot:
    index_name: str = ""
    query_total: int = 0
    query_time: int = 0
    index_total: int = 0
    index_time: int = 0
    timestamp: Optional[datetime] = None


class IndexStatsCache:
    """Thread-safe store of the latest stats snapshot per index."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshots: dict[str, IndexStatsSnapshot] = {}

    def get_snapshot(self, index_name: str) -> Optional[IndexStatsSnapshot]:
        """Return the stored snapshot for an index, or None if there is none."""
        with self._lock:
            return self._snapshots.get(index_name)

    def set_snapshot(self, snapshot: IndexStatsSnapshot) -> None:
        """Store a snapshot, replacing any earlier one for the same index."""
        with self._lock:
            self._snapshots[snapshot.index_name] = snapshot


# --- node models ---


@dataclass
class NodeInfo:
    name: str = ""
    ip: str = ""
    roles: list[str] = field(default_factory=list)
    cpu_percent: str = ""
    mem_percent: str = ""
    heap_percent: str = ""
    disk_percent: str = ""
    disk_avail: str = ""
    disk_total: str = ""
    documents: int = 0
    heap_used: str = ""
    heap_max: str = ""


@dataclass
class NodeStat:
    node_ip: str = ""
    primary_shards: int = 0
    replica_shards: int = 0
    total_shards: int = 0
    total_size: int = 0
    index_count: int = 0


@dataclass
class BalanceAnalysis:
    most_loaded_node: str = ""
    least_loaded_node: str = ""
    max_shards: int = 0
    min_shards: int = 0
    balance_ratio: float = 0.0
    is_balanced: bool = False
    recommendation: str = ""


@dataclass
class NodeHealth:
    node_name: str = ""
    status: str = ""
    cpu_usage: float = 0.0
    memory_usage: float = 0.0
    heap_usage: float = 0.0
    disk_usage: float = 0.0
    is_healthy: bool = False
    issues: list[str] = field(default_factory=list)


# --- segment models ---


@dataclass
class SegmentInfo:
    index: str = ""
    segment_count: int = 0
    size_bytes: int = 0


# --- shard models ---


@dataclass
class ShardInfo:
    index: str = ""
    shard: str = ""
    prirep: str = ""
    state: str = ""
    docs: str = ""
    store: str = ""
    ip: str = ""
    node: str = ""


@dataclass
class ShardStat:
    index_name: str = ""
    primary_shards: int = 0
    replica_shards: int = 0
    total_shards: int = 0
    total_size: int = 0
    node_count: int = 0
    nodes: set[str] = field(default_factory=set)


@dataclass
class ShardDistribution:
    node_distribution: dict[str, int] = field(default_factory=dict)
    index_distribution: dict[str, ShardStat] = field(default_factory=dict)


@dataclass
class ShardWarnings:
    unassigned_shards: int = 0
    relocating_shards: int = 0
    initializing_shards: int = 0
    unbalanced_shards: bool = False
    unbalanced_ratio: float = 0.0
    recommendations: list[str] = field(default_factory=list)
    critical_issues: list[str] = field(default_factory=list)
    warning_issues: list[str] = field(default_factory=list)


# --- term vector models ---


@dataclass
class TermInfo:
    field: str = ""
    term: str = ""
    term_freq: int = 0