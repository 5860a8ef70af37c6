"""speedtest-logger — Append speed-test results to a CSV file and a Google Sheet."""

__version__ = "0.1.0"

BYTES_PER_MBPS = 125000
"""1 Mbps expressed in bytes per second."""

DEFAULT_SPREADSHEET_ID = "18KzsHwRy_57ojkfIaX23-eDHCixd6pj_M5GZVThmZqA"
DEFAULT_CREDS_FILE = ".account.json"
DEFAULT_CSV_FILE = "results.csv"

DEFAULT_HEADER: list[str] = [
    "When",
    "Type",
    "ISP",
    "DL Bandw",
    "DL Bytes",
    "DL Elapsed",
    "UL Bandw",
    "UL Bytes",
    "UL Elapsed",
    "Ping Jitter",
    "Ping Latency",
    "Source IP",
    "Source MAC",
    "Dest ID",
    "Dest Name",
    "Dest Loc",
    "Dest Host",
    "Dest IP",
    "Dest Port",
    "Result ID",
    "Result URL",
    "Message",
    "Level",
]
