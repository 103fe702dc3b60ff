"""Answers one question: is the internet reachable right now?

Writes to the local store are gated on this check.
"""
import socket
from abc import ABC, abstractmethod
from utils.app_config import get_connectivity_probe, is_offline_mode
from utils.logging_setup import get_logger

logger = get_logger("finance_tracker.connectivity")


class Connectivity(ABC):
    @abstractmethod
    def is_online(self) -> bool:
        ...


class StaticConnectivity(Connectivity):
    """Fixed answer. Used for the configured offline mode and in tests."""

    def __init__(self, online: bool = True):
        self.online = online

    def is_online(self) -> bool:
        return self.online


class SocketConnectivity(Connectivity):
    """Online when a TCP connection to host:port opens within timeout."""

    def __init__(self, host: str, port: int, timeout: float = 2.0):
        self._host = host
        self._port = port
        self._timeout = timeout

    def is_online(self) -> bool:
        try:
            with socket.create_connection((self._host, self._port), timeout=self._timeout):
                return True
        except OSError as e:
            logger.debug("Connectivity probe to %s:%s failed: %s", self._host, self._port, e)
            return False


def connectivity_from_config() -> Connectivity:
    if is_offline_mode():
        logger.info("Offline mode enabled in config; writes are disabled")
        return StaticConnectivity(online=False)
    host, port, timeout = get_connectivity_probe()
    return SocketConnectivity(host, port, timeout)
