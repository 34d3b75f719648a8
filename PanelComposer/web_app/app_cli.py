#!/usr/bin/env python3
"""Console-script entry point for the layout preview app.

Commands
--------
panelcomposer-preview [port]
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

DEFAULT_PORT = 5648
PORT_ENV_VAR = "PANELCOMPOSER_PORT"


def _launch_streamlit(port: int, env: Optional[dict] = None) -> int:
    app_path = Path(__file__).resolve().parent / "Home.py"
    return subprocess.call(
        [
            sys.executable,
            "-m",
            "streamlit",
            "run",
            str(app_path),
            "--server.headless",
            "true",
            "--server.port",
            str(port),
        ],
        env=env,
    )


def _validate_port(port: int) -> int:
    if not (1 <= port <= 65535):
        raise ValueError("Port must be between 1 and 65535.")
    return port


def _default_port() -> int:
    """Port from $PANELCOMPOSER_PORT, falling back to DEFAULT_PORT."""
    value = os.environ.get(PORT_ENV_VAR)
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError:
        print(f"⚠ Ignoring non-numeric {PORT_ENV_VAR}={value!r}")
        return DEFAULT_PORT


def main():
    """Launch the layout preview app via `panelcomposer-preview [port]`."""
    default_port = _default_port()
    parser = argparse.ArgumentParser(
        prog="panelcomposer-preview",
        description="Launch the PanelComposer layout preview in Streamlit.",
    )
    parser.add_argument(
        "port",
        nargs="?",
        type=int,
        default=default_port,
        help=f"Streamlit port (default: {default_port})",
    )
    args = parser.parse_args()

    try:
        port = _validate_port(args.port)
    except ValueError as exc:
        parser.error(str(exc))

    sys.exit(_launch_streamlit(port, env=os.environ.copy()))


if __name__ == "__main__":
    main()
