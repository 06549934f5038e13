"""Log Ingest - Data models"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LogRecord:
    """Parsed W3C access log entry"""
    timestamp: datetime
    client_ip: str
    username: str
    site_name: str
    computer_name: str
    server_ip: str
    port: int
    method: str
    uri_stem: str
    uri_query: str
    status: int
    win32_status: int
    bytes_sent: int
    time_taken: int
    version: str
    host: str
    user_agent: str
    cookie: str
    referrer: str


@dataclass(frozen=True)
class AggregateResult:
    """Request count for one client IP"""
    ip_address: str
    count: int
    octet_rank: int
