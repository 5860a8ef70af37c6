"""Report → row mapping — pure functions, no side effects."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from speedtest_logger import BYTES_PER_MBPS
from speedtest_logger.models import LogReport, Report, SpeedTestReport, parse_report

Row = dict[str, Any]


def _log_row(report: LogReport) -> Row:
    return {
        "When": report.timestamp,
        "Type": report.type,
        "ISP": report.isp,
        "Message": report.message,
        "Level": report.level,
    }


def _speedtest_row(report: SpeedTestReport) -> Row:
    # Bandwidth and byte columns keep their labels but hold Mbps-scaled values.
    return {
        "When": report.timestamp,
        "Type": report.type,
        "ISP": report.isp,
        "DL Bandw": report.download.bandwidth / BYTES_PER_MBPS,
        "DL Bytes": report.download.bytes / BYTES_PER_MBPS,
        "DL Elapsed": report.download.elapsed,
        "UL Bandw": report.upload.bandwidth / BYTES_PER_MBPS,
        "UL Bytes": report.upload.bytes / BYTES_PER_MBPS,
        "UL Elapsed": report.upload.elapsed,
        "Ping Jitter": report.ping.jitter,
        "Ping Latency": report.ping.latency,
        "Source IP": report.interface.external_ip,
        "Source MAC": report.interface.mac_addr,
        "Dest ID": report.server.id,
        "Dest Name": report.server.name,
        "Dest Loc": f"{report.server.location}, {report.server.country}",
        "Dest Host": report.server.host,
        "Dest IP": report.server.ip,
        "Dest Port": report.server.port,
        "Result ID": report.result.id,
        "Result URL": report.result.url,
    }


def report_to_row(report: Report) -> Row:
    """Flatten a parsed report into a row keyed by column name."""
    if isinstance(report, LogReport):
        return _log_row(report)
    if isinstance(report, SpeedTestReport):
        return _speedtest_row(report)
    raise TypeError(f"Unsupported report type: {type(report).__name__}")


def build_row(data: Any) -> Row:
    """Parse a raw JSON document and flatten it into a row."""
    return report_to_row(parse_report(data))


def order_row(row: Mapping[str, Any], header: Sequence[str]) -> list[Any]:
    """Return *row* values in *header* order; missing columns become ``""``."""
    return [row.get(column, "") for column in header]
