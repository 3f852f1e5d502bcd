"""Version resolution for package metadata and the CLI banner."""

try:
    from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
    from importlib.metadata import version as _package_version
except Exception:  # pragma: no cover
    _PackageNotFoundError = Exception
    _package_version = None

# setup.py reads this line; keep it a plain string literal
ENGINE_VERSION = "1.0.0"

if ENGINE_VERSION.strip():
    __version__ = ENGINE_VERSION.strip()
elif _package_version is not None:
    try:
        __version__ = _package_version("hutch")
    except _PackageNotFoundError:
        __version__ = "0.0.0"
else:
    __version__ = "0.0.0"


__all__ = ["ENGINE_VERSION", "__version__"]
