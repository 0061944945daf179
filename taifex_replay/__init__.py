"""Extract TAIFEX market data messages from PCAP-like capture log files."""

__version__ = "0.1.0"
__all__ = ["errors", "packet_simulator"]