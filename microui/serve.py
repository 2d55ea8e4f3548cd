"""Serve the current directory over HTTP and open it in a browser."""

from __future__ import annotations

import functools
import http.server
import os
import subprocess
import sys
from typing import List, Optional, Sequence

DEFAULT_PORT = "8080"


def browser_command(url: str, platform: Optional[str] = None) -> List[str]:
    """Return the command that opens url in a browser on the given platform."""
    if platform is None:
        platform = sys.platform
    if platform.startswith("win"):
        return ["cmd", "/c", "start", url]
    if platform == "darwin":
        return ["open", url]
    return ["xdg-open", url]


def _open_browser(url: str) -> None:
    try:
        subprocess.Popen(browser_command(url))
    except OSError:
        pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve the working directory on the port given as first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    port_text = args[0] if args else DEFAULT_PORT
    try:
        port = int(port_text)
    except ValueError:
        raise SystemExit(f"invalid port: {port_text}") from None

    url = f"http://localhost:{port_text}"
    handler = functools.partial(
        http.server.SimpleHTTPRequestHandler, directory=os.getcwd()
    )
    print(f"Serving WASM demo at {url}")
    print("Press Ctrl+C to stop")

    try:
        server = http.server.ThreadingHTTPServer(("", port), handler)
    except (OSError, OverflowError) as exc:
        raise SystemExit(f"listen on port {port_text}: {exc}") from None

    _open_browser(url)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
    return 0


if __name__ == "__main__":
    sys.exit(main())