"""Data models for speed-test reports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

LOG_TYPE = "log"


@dataclass(frozen=True)
class Transfer:
    """One direction of a speed test (download or upload), raw units."""

    bandwidth: Any
    bytes: Any
    elapsed: Any

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Transfer:
        return cls(
            bandwidth=data["bandwidth"],
            bytes=data["bytes"],
            elapsed=data["elapsed"],
        )


@dataclass(frozen=True)
class Ping:
    jitter: Any
    latency: Any

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Ping:
        return cls(jitter=data["jitter"], latency=data["latency"])


@dataclass(frozen=True)
class Interface:
    external_ip: Any
    mac_addr: Any

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Interface:
        return cls(external_ip=data["externalIp"], mac_addr=data["macAddr"])


@dataclass(frozen=True)
class Server:
    id: Any
    name: Any
    location: Any
    country: Any
    host: Any
    ip: Any
    port: Any

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Server:
        return cls(
            id=data["id"],
            name=data["name"],
            location=data["location"],
            country=data["country"],
            host=data["host"],
            ip=data["ip"],
            port=data["port"],
        )


@dataclass(frozen=True)
class Result:
    id: Any
    url: Any

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Result:
        return cls(id=data["id"], url=data["url"])


@dataclass(frozen=True)
class LogReport:
    """A log event emitted by the speed-test runner instead of a result."""

    timestamp: Any
    isp: Any
    message: Any
    level: Any
    type: str = LOG_TYPE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LogReport:
        return cls(
            timestamp=data["timestamp"],
            isp=data["isp"],
            message=data["message"],
            level=data["level"],
        )


@dataclass(frozen=True)
class SpeedTestReport:
    """A full speed-test result.

    ``type`` is whatever the runner reported (usually ``"result"``); it is
    never ``"log"``.
    """

    type: Any
    timestamp: Any
    isp: Any
    download: Transfer
    upload: Transfer
    ping: Ping
    interface: Interface
    server: Server
    result: Result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SpeedTestReport:
        return cls(
            type=data.get("type"),
            timestamp=data["timestamp"],
            isp=data["isp"],
            download=Transfer.from_dict(data["download"]),
            upload=Transfer.from_dict(data["upload"]),
            ping=Ping.from_dict(data["ping"]),
            interface=Interface.from_dict(data["interface"]),
            server=Server.from_dict(data["server"]),
            result=Result.from_dict(data["result"]),
        )


Report = Union[LogReport, SpeedTestReport]


def parse_report(data: Any) -> Report:
    """Build the report variant selected by the document's ``type`` field.

    Raises
    ------
    TypeError
        If *data* is not a JSON object.
    KeyError
        If a field required by the selected variant is missing.
    """
    if not isinstance(data, Mapping):
        raise TypeError(f"Report must be a JSON object, got {type(data).__name__}")
    if data.get("type") == LOG_TYPE:
        return LogReport.from_dict(data)
    return SpeedTestReport.from_dict(data)
