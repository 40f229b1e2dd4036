"""Run the Cheat CLI API proxy with uvicorn.

Usage:
    python proxy.py

Host and port come from configs/config_default.yaml, overridden by
CHEAT_PROXY_HOST / CHEAT_PROXY_PORT.
"""

import uvicorn

from cheatproxy import SERVER_HOST, SERVER_PORT, app


def main() -> None:
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT, log_level="info")


if __name__ == "__main__":
    main()
