"""Replay TAIFEX messages out of a PCAP-like capture file."""

from __future__ import annotations

import logging
import os
import struct
from typing import BinaryIO, Iterator, Optional

from taifex_replay.errors import LogIOError

logger = logging.getLogger(__name__)

DEFAULT_GLOBAL_HEADER_SIZE = 24
DEFAULT_PACKET_HEADER_SIZE = 16
TAIFEX_ESC_CODE = 0x1B
MAX_SANE_PACKET_LENGTH = 70000

# Captured length sits at offset 8 of the per-packet header, native byte order.
_CAPTURED_LENGTH = struct.Struct("=I")
_CAPTURED_LENGTH_OFFSET = 8


class LogFilePacketSimulator:
    """Reads packet records from a PCAP-like file and extracts TAIFEX messages.

    The file starts with a global header that is skipped, followed by records
    made of a fixed-size packet header and the captured data.  Each TAIFEX
    message is the tail of the captured data starting at the first ESC byte.
    """

    def __init__(
        self,
        filepath: str | os.PathLike,
        global_header_size: int = DEFAULT_GLOBAL_HEADER_SIZE,
        packet_header_size: int = DEFAULT_PACKET_HEADER_SIZE,
    ) -> None:
        self.filepath = os.fspath(filepath)
        self.global_header_size = global_header_size
        self.packet_header_size = packet_header_size
        self._file: Optional[BinaryIO] = None
        self._stream_failed = False
        logger.debug("LogFilePacketSimulator created for file: %s", self.filepath)

    def open(self) -> None:
        """Open the file and skip the global header.

        Raises LogIOError if the file cannot be opened or is shorter than the
        global header.
        """
        if self._file is not None:
            logger.warning("Log file %s is already open.", self.filepath)
            return
        try:
            handle = open(self.filepath, "rb")
        except OSError as exc:
            logger.error("Failed to open log file: %s", self.filepath)
            raise LogIOError(f"Failed to open log file: {self.filepath}") from exc

        if self.global_header_size > 0:
            size = os.fstat(handle.fileno()).st_size
            if size < self.global_header_size:
                handle.close()
                message = (
                    f"Failed to seek past global header ({self.global_header_size} bytes) "
                    f"in: {self.filepath}. File might be too short."
                )
                logger.error(message)
                raise LogIOError(message)
            handle.seek(self.global_header_size)

        self._file = handle
        self._stream_failed = False
        logger.info("Log file opened successfully: %s", self.filepath)

    def close(self) -> None:
        """Close the file if it is open."""
        if self._file is not None:
            self._file.close()
            self._file = None
            logger.info("Log file closed: %s", self.filepath)

    def is_open(self) -> bool:
        """Return True while the file is open."""
        return self._file is not None and not self._file.closed

    def has_next_packet(self) -> bool:
        """Return True if more bytes remain and no read has failed."""
        if not self.is_open() or self._stream_failed:
            return False
        return bool(self._file.peek(1)[:1])

    def _read_captured_length(self) -> Optional[int]:
        header = self._file.read(self.packet_header_size)
        if len(header) < self.packet_header_size:
            self._stream_failed = True
            if not header:
                logger.debug("EOF before reading PCAP packet header from: %s", self.filepath)
            else:
                logger.debug(
                    "Incomplete PCAP packet header (read %d/%d bytes) at EOF in: %s",
                    len(header),
                    self.packet_header_size,
                    self.filepath,
                )
            return None
        if self.packet_header_size < _CAPTURED_LENGTH_OFFSET + _CAPTURED_LENGTH.size:
            logger.error(
                "PCAP packet header size (%d) is too small to contain standard "
                "length field at offset 8.",
                self.packet_header_size,
            )
            return None
        (length,) = _CAPTURED_LENGTH.unpack_from(header, _CAPTURED_LENGTH_OFFSET)
        return length

    def get_next_taifex_packet(self) -> bytes:
        """Read the next record and return the TAIFEX message it carries.

        Returns empty bytes when nothing could be read, the record is empty or
        corrupt, or the captured data holds no ESC byte.
        """
        if not self.has_next_packet():
            return b""

        length = self._read_captured_length()
        if length is None:
            return b""

        if length == 0:
            logger.warning(
                "PCAP record indicates zero captured data length in: %s. "
                "Skipping this record.",
                self.filepath,
            )
            return b""

        if length > MAX_SANE_PACKET_LENGTH:
            logger.error(
                "PCAP record indicates excessively large captured data length (%d) "
                "in: %s. Stopping further processing of this file.",
                length,
                self.filepath,
            )
            self.close()
            return b""

        data = self._file.read(length)
        if len(data) < length:
            self._stream_failed = True
            logger.error(
                "Failed to read captured packet data (expected length %d, read %d bytes) from: %s",
                length,
                len(data),
                self.filepath,
            )
            return b""

        start = data.find(TAIFEX_ESC_CODE)
        if start < 0:
            logger.debug(
                "TAIFEX ESC code (0x1B) not found in current captured packet data segment in: %s",
                self.filepath,
            )
            return b""
        return data[start:]

    def __enter__(self) -> "LogFilePacketSimulator":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[bytes]:
        """Yield every TAIFEX message found, opening the file if needed."""
        if not self.is_open():
            self.open()
        while self.has_next_packet():
            packet = self.get_next_taifex_packet()
            if packet:
                yield packet