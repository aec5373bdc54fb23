from __future__ import annotations

import importlib.metadata

__version__ = "0.1.0"


def get_version() -> str:
    # Installed metadata wins so the banner matches what pip reports
    try:
        return importlib.metadata.version("kiloview")
    except importlib.metadata.PackageNotFoundError:
        return __version__


def get_banner(product_name: str) -> str:
    return f"{product_name} -- version {get_version()}"
