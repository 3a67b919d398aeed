# lan.py
import logging
import socket

logger = logging.getLogger(__name__)

LOOPBACK = "127.0.0.1"

# Never contacted: connect() on a UDP socket only selects a route.
_PROBES = (
    (socket.AF_INET, ("8.8.8.8", 80)),
    (socket.AF_INET6, ("2001:4860:4860::8888", 80)),
)


def resolve_lan_ip() -> str:
    """Address the OS would use for outbound traffic, or loopback when offline."""
    for family, target in _PROBES:
        try:
            with socket.socket(family, socket.SOCK_DGRAM) as s:
                s.connect(target)
                return s.getsockname()[0]
        except OSError as e:
            logger.debug("LAN probe via %s failed: %s", target[0], e)
    return LOOPBACK


def join_host_port(host: str, port) -> str:
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def lan_url(port) -> str:
    return "http://" + join_host_port(resolve_lan_ip(), port)
