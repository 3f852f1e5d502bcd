import ipaddress
import re
import urllib.parse
import warnings

from .errors import InvalidSiteIdentifier

# RFC 3986 reg-name characters per dot-separated label; \w admits IDN letters
_HOST_LABEL = re.compile(r"[\w\-~!$&'()*+,;=%]+")


class SiteIdentifier:

    @staticmethod
    def _check_host(site: str, netloc: str, host: str) -> None:
        if "[" in netloc:
            try:
                ipaddress.ip_address(host)
            except ValueError as exc:
                raise InvalidSiteIdentifier(site, f"bad IP literal {host!r}") from exc
            return
        for label in host.split("."):
            if not _HOST_LABEL.fullmatch(label):
                raise InvalidSiteIdentifier(site, f"malformed host {host!r}")

    @staticmethod
    def host(site: str) -> str:
        """
        Extract the normalized host from an absolute URI.

        ``https://Example.com/path`` and ``HTTP://example.COM`` both give
        ``example.com``; scheme, port, path and query never reach the salt.
        """
        if not isinstance(site, str):
            raise TypeError(f"Site must be a string, got {type(site)!r}")
        text = site.strip()
        try:
            parts = urllib.parse.urlsplit(text)
            parts.port  # raises on a malformed port
        except ValueError as exc:
            raise InvalidSiteIdentifier(site, str(exc)) from exc
        if not parts.scheme:
            raise InvalidSiteIdentifier(site, "missing scheme (e.g. https://)")
        host = parts.hostname
        if not host:
            raise InvalidSiteIdentifier(site, "no host component")
        SiteIdentifier._check_host(site, parts.netloc, host)
        if parts.username is not None:
            warnings.warn(
                f"Ignoring credentials embedded in site URL; using host {host!r}",
                RuntimeWarning,
                stacklevel=2
            )
        return host.lower()


__all__ = ["SiteIdentifier"]
