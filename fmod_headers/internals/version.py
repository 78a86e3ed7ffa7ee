from __future__ import annotations
import platform

from fmod_headers import __version__ as app_ver, __dev__ as is_dev


def _get_versions() -> dict[str, str]:
    import lark
    import msgpack

    return {
        "app": app_ver,
        "python": platform.python_version(),
        "lark": getattr(lark, "__version__", "unknown"),
        "msgpack": ".".join(map(str, getattr(msgpack, "version", ()))) or "unknown",
    }


def version_line() -> str:
    v = _get_versions()
    dev_marker = " (dev)" if is_dev else ""
    return (f"fmod-headers {v['app']}{dev_marker} • Python {v['python']} • "
            f"lark {v['lark']} • msgpack {v['msgpack']}")
