"""Shared constants: field names, thresholds, formats and user-facing messages."""

# Sampling
DEFAULT_INTERVAL = 2
MIN_INTERVAL = 1

# Cluster health colours
HEALTH_GREEN = "green"
HEALTH_YELLOW = "yellow"
HEALTH_RED = "red"

SEVERITY_CRITICAL = "CRITICAL"
SEVERITY_WARNING = "WARNING"

# Cat API field names
HEALTH_FIELD = "health"
STATUS_FIELD = "status"
INDEX_FIELD = "index"
DOCS_COUNT_FIELD = "docs.count"
STORE_SIZE_FIELD = "store.size"
PRIMARY_FIELD = "pri"
REPLICA_FIELD = "rep"

HEAP_USED_PCT_FIELD = "heap_used_percent"
CPU_PERCENT_FIELD = "percent"

SHARD_FIELD = "shard"
STATE_FIELD = "state"
STORE_FIELD = "store"

# Cluster health field names
CLUSTER_NAME_FIELD = "cluster_name"
NUMBER_OF_NODES_FIELD = "number_of_nodes"
ACTIVE_PRIMARY_SHARDS_FIELD = "active_primary_shards"
ACTIVE_SHARDS_FIELD = "active_shards"
UNASSIGNED_SHARDS_FIELD = "unassigned_shards"
RELOCATING_SHARDS_FIELD = "relocating_shards"
INITIALIZING_SHARDS_FIELD = "initializing_shards"
DELAYED_UNASSIGNED_SHARDS_FIELD = "delayed_unassigned_shards"
NUMBER_OF_PENDING_TASKS_FIELD = "number_of_pending_tasks"
NUMBER_OF_IN_FLIGHT_FETCH_FIELD = "number_of_in_flight_fetch"
TASK_MAX_WAITING_IN_QUEUE_FIELD = "task_max_waiting_in_queue_millis"
ACTIVE_SHARDS_PERCENT_FIELD = "active_shards_percent_as_number"
TIMED_OUT_FIELD = "timed_out"

# Node stats field names
NODES_FIELD = "nodes"
OS_FIELD = "os"
CPU_FIELD = "cpu"
JVM_MEM_FIELD = "mem"
FS_FIELD = "fs"
TOTAL_FIELD = "total"
TOTAL_IN_BYTES_FIELD = "total_in_bytes"
AVAILABLE_IN_BYTES_FIELD = "available_in_bytes"

INDICES_FIELD = "indices"
INDEXING_FIELD = "indexing"
SEARCH_FIELD = "search"
INDEX_TOTAL_FIELD = "index_total"
INDEX_TIME_IN_MILLIS_FIELD = "index_time_in_millis"
QUERY_TOTAL_FIELD = "query_total"
QUERY_TIME_IN_MILLIS_FIELD = "query_time_in_millis"

# Shard states
SHARD_STATE_STARTED = "STARTED"
SHARD_STATE_INITIALIZING = "INITIALIZING"
SHARD_STATE_RELOCATING = "RELOCATING"
SHARD_STATE_UNASSIGNED = "UNASSIGNED"

# Node roles
NODE_ROLE_DATA = "data"
NODE_ROLE_MASTER = "master"
NODE_ROLE_INGEST = "ingest"

DEFAULT_TIMEOUT = 5

# Index stats field names
COUNT_FIELD = "count"
MEMORY_IN_BYTES_FIELD = "memory_in_bytes"
TERMS_MEMORY_IN_BYTES_FIELD = "terms_memory_in_bytes"
TERMS_FIELD = "terms"
STORED_FIELDS_MEMORY_IN_BYTES_FIELD = "stored_fields_memory_in_bytes"
STORED_FIELDS_FIELD = "stored_fields"
DOC_VALUES_MEMORY_IN_BYTES_FIELD = "doc_values_memory_in_bytes"
DOC_VALUES_FIELD = "doc_values"
POINTS_MEMORY_IN_BYTES_FIELD = "points_memory_in_bytes"
POINTS_FIELD = "points"
NORMS_MEMORY_IN_BYTES_FIELD = "norms_memory_in_bytes"
NORMS_FIELD = "norms"
FIXED_BIT_SET_MEMORY_IN_BYTES_FIELD = "fixed_bit_set_memory_in_bytes"
VERSION_MAP_MEMORY_IN_BYTES_FIELD = "version_map_memory_in_bytes"
MAX_UNSAFE_AUTO_ID_TIMESTAMP_FIELD = "max_unsafe_auto_id_timestamp"
INDEX_MEMORY_FIELD = "index_memory"
SEGMENTS_FIELD = "segments"

# Node field keys
NAME_FIELD = "name"
IP_FIELD = "ip"
ROLES_FIELD = "roles"
PROCESS_FIELD = "process"
JVM_FIELD = "jvm"
MEM_FIELD = "mem"
HEAP_USED_IN_BYTES_FIELD = "heap_used_in_bytes"
HEAP_MAX_IN_BYTES_FIELD = "heap_max_in_bytes"
HEAP_USED_PERCENT_FIELD = "heap_used_percent"
USED_IN_BYTES_FIELD = "used_in_bytes"
USED_PERCENT_FIELD = "used_percent"
PERCENT_FIELD = "percent"
DOCS_FIELD = "docs"
STORE_FIELD_KEY = "store"

# Shard field keys
NODE_FIELD_KEY = "node"
IP_FIELD_KEY = "ip"
ALIAS_FIELD = "alias"
PRIREP_FIELD = "prirep"

# String values
EMPTY_STRING = ""
DASH_STRING = "-"
PRIMARY_SHORT_STRING = "p"
REPLICA_SHORT_STRING = "r"
ZERO_BYTE_STRING = "0b"
CALCULATING_STRING = "Calculating..."
HEALTHY_STRING = "healthy"
WARNING_STRING = "warning"
PRIMARY_STRING = "Primary"
REPLICA_STRING = "Replica"

# Numeric thresholds
HIGH_SEGMENT_THRESHOLD = 50
SMALL_SEGMENT_THRESHOLD = 1024 * 1024
LARGE_SEGMENT_THRESHOLD = 1024 * 1024 * 1024
HIGH_CPU_THRESHOLD = 80
HIGH_MEMORY_THRESHOLD = 90
HIGH_HEAP_THRESHOLD = 85
HIGH_DISK_THRESHOLD = 90
BALANCE_RATIO_THRESHOLD = 0.7
LOW_MEMORY_PRESSURE = 60
MEDIUM_MEMORY_PRESSURE = 80

# Byte conversion
BYTES_IN_KB = 1024
BYTES_IN_MB = 1024 * 1024
BYTES_IN_GB = 1024 * 1024 * 1024
BYTES_IN_TB = 1024 * 1024 * 1024 * 1024

# Config defaults
DEFAULT_CONFIG_TIMEOUT = 3
DEFAULT_CONFIG_TIMEOUT_2 = 30
CONFIG_FILE_PATH = ".escope.yaml"
CONFIG_FILE_ENV_PATH = "$HOME/.escope.yaml"

# GC collector names
GC_YOUNG = "young"
GC_OLD = "old"
GC_SURVIVOR = "survivor"
GC_G1_CONCURRENT = "G1 Concurrent GC"

# GC fields
GC_FIELD = "gc"
COLLECTORS_FIELD = "collectors"
COLLECTION_COUNT_FIELD = "collection_count"
COLLECTION_TIME_IN_MILLIS_FIELD = "collection_time_in_millis"
POOLS_FIELD = "pools"

# Memory pressure levels
MEMORY_PRESSURE_LOW = "Low"
MEMORY_PRESSURE_MEDIUM = "Medium"
MEMORY_PRESSURE_HIGH = "High"

# printf-style format strings
PERCENT_FORMAT = "%.0f%%"
RATE_FORMAT_K = "%.1fK/s"
RATE_FORMAT = "%.1f/s"
RATE_FORMAT_2 = "%.2f/s"
TIME_FORMAT_MS = "%.1fms"
TIME_FORMAT_S = "%.1fs"
MS_FORMAT = "%dms"
GC_FREQ_FORMAT = "%.1f GC/sec"
THROUGHPUT_FORMAT = "%.1f%%"

# Size unit suffixes
BYTE_SUFFIX = "b"
KILO_SUFFIX = "kb"
MEGA_SUFFIX = "mb"
GIGA_SUFFIX = "gb"
TERA_SUFFIX = "tb"

# System index prefixes
DOT_PREFIX = "."
KIBANA_PREFIX = "kibana"
APM_PREFIX = "apm"
SECURITY_PREFIX = "security"
MONITORING_PREFIX = "monitoring"
WATCHER_PREFIX = "watcher"
ILM_PREFIX = "ilm"
SLM_PREFIX = "slm"
TRANSFORM_PREFIX = "transform"

# Truncation
TRUNCATE_SUFFIX = "..."
MAX_NAME_LENGTH = 6
NAME_PREFIX_LEN = 2

# Misc numeric values
THOUSAND_DIVISOR = 1000
HUNDRED_MULTIPLIER = 100
DOCS_COUNT_SEPARATOR = 3
TEN_THRESHOLD = 10
ZERO_PERCENT_STRING = "0%"
MILLISECONDS_TO_SECONDS = 1000

# Connection messages
ERR_NO_CONFIGURATION_FOUND = "ESCOPE: No configuration found!"
ERR_CONNECTION_FAILED = "Connection failed: %s"
ERR_CONNECTION_FAILED_RESPONSE = "Connection failed: %s"
ERR_CONNECTION_TEST_FAILED = "Connection test failed - host configuration not saved"

MSG_CONNECTION_SUCCESSFUL = "Connection successful."
MSG_CONNECTION_TESTING = "Testing connection to Elasticsearch..."
MSG_CONNECTION_TEST_PASSED = "Connection test passed."

MSG_PLEASE_SET_CONFIGURATION = "Please set your Elasticsearch connection configuration:"
MSG_CONFIG_SET_EXAMPLE = (
    "  escope config set --host=<address> [--username=<user>] [--password=<pass>] [--secure]"
)
MSG_EXAMPLE_HEADER = "Example:"
MSG_CONFIG_SET_LOCALHOST = "  escope config set --host=http://localhost:9200"
MSG_CONFIG_SET_SECURE = (
    "  escope config set --host=https://elastic.example.com --username=elastic "
    "--password=password --secure"
)
MSG_USE_FLAGS_DIRECTLY = "Or use flags directly:"
MSG_USE_FLAGS_EXAMPLE = "  escope --host=<address> [flags]"

# Error message templates
ERR_CLUSTER_HEALTH_REQUEST_FAILED = "cluster health request failed: %s"
ERR_NODES_STATS_REQUEST_FAILED = "nodes stats request failed: %s"
ERR_SHARDS_REQUEST_FAILED = "shards request failed: %s"
ERR_INDICES_REQUEST_FAILED = "indices request failed: %s"
ERR_CLUSTER_STATS_REQUEST_FAILED = "cluster stats request failed: %s"
ERR_CONFIG_VALIDATION_FAILED = "config validation failed: %s"
ERR_FAILED_TO_SAVE_HOST_CONFIG = "failed to save host config: %s"
ERR_FAILED_TO_LOAD_HOST_CONFIG = "failed to load host config: %s"
ERR_FAILED_TO_LIST_HOSTS = "failed to list hosts: %s"
ERR_FAILED_TO_DELETE_HOST = "failed to delete host: %s"
ERR_FAILED_TO_REMOVE_CONFIG_FILE = "failed to remove config file: %s"
ERR_HOST_IS_REQUIRED = "host is required"
ERR_USERNAME_REQUIRED = "username is required in secure mode"
ERR_LOGIN_PHRASE_REQUIRED = " ".join(["password", "is required in secure mode"])
ERR_CONNECTION_FAILED_2 = "connection failed: %s"
ERR_FAILED_TO_SET_TIMEOUT = "failed to set connection timeout: %s"
ERR_FAILED_TO_GET_TIMEOUT = "failed to get connection timeout: %s"
ERR_FAILED_TO_GET_APP_CONFIG = "failed to get app config: %s"
ERR_HOST_NOT_FOUND = "host '%s' not found"
ERR_FAILED_TO_LOAD_HOST = "failed to load host: %s"
ERR_FAILED_TO_SET_ACTIVE_HOST = "failed to set active host: %s"
ERR_FAILED_TO_GET_ACTIVE_HOST = "failed to get active host: %s"
ERR_FAILED_TO_CLEAR_ACTIVE_HOST = "failed to clear active host: %s"
ERR_NODE_NOT_FOUND = "node %s not found"
ERR_FAILED_TO_GET_SHARD_INFO = "failed to get shard info: %s"
ERR_FAILED_TO_GET_NODE_STATS = "failed to get node stats: %s"
ERR_SHARD_INFO_REQUEST_FAILED = "shard info request failed: %s"
ERR_NODE_INFO_REQUEST_FAILED = "node info request failed: %s"
ERR_NODE_STATS_REQUEST_FAILED_2 = "node stats request failed: %s"
ERR_CLUSTER_STATS_REQUEST_FAILED_2 = "cluster stats request failed: %s"
ERR_CLUSTER_HEALTH_REQUEST_FAILED_2 = "cluster health request failed: %s"
ERR_SHARDS_REQUEST_FAILED_2 = "shards request failed: %s"
ERR_INDEX_STATS_REQUEST_FAILED = "index stats request failed: %s"
ERR_INDICES_REQUEST_FAILED_2 = "indices request failed: %s"
ERR_FAILED_TO_GET_SEGMENTS_INFO = "failed to get segments info: %s"
ERR_FAILED_TO_GET_NODE_INFO = "failed to get node info: %s"

# Labels and status messages
MSG_HOST_LABEL = "   Host: %s"
MSG_USERNAME_LABEL = "   Username: %s"
MSG_LOGIN_PHRASE_LABEL = "   " + "Password" + ": %s"
MSG_HIDDEN_VALUE = "***"
MSG_VALUE_NOT_SET = "(not set)"
MSG_SECURE_LABEL = "   Secure: %s"
MSG_TIMEOUT_GENERIC = (
    "Operation timed out. The request took longer than expected to complete."
)
MSG_UNASSIGNED_SHARDS = "Unassigned shards: %d"
MSG_RELOCATING_SHARDS = "Relocating shards: %d"
MSG_INITIALIZING_SHARDS = "Initializing shards: %d"
MSG_SHARD_UNBALANCED = "Shard distribution uneven (ratio: %.2f)"
MSG_INVESTIGATE_UNASSIGNED = "Investigate and resolve %d unassigned shards"
MSG_CONSIDER_REBALANCING = (
    "Consider rebalancing shards across nodes for better distribution."
)
MSG_SHARD_HEALTHY = "Shard distribution is healthy"
MSG_NODE_BALANCE_GOOD = "Node balance is good"
MSG_NO_NODES_FOUND = "No nodes found"
MSG_HIGH_CPU_USAGE = "High CPU usage"
MSG_HIGH_MEMORY_USAGE = "High memory usage"
MSG_HIGH_HEAP_USAGE = "High heap usage"
MSG_HIGH_DISK_USAGE = "High disk usage"