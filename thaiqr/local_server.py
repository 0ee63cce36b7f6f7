import argparse
import sys

import uvicorn

from thaiqr.server_app import create_app, ServerSettings


class LocalServer:
    def __init__(self, settings: ServerSettings) -> None:
        self.settings = settings
        self.app = create_app(settings=self.settings)

    def start(self) -> None:
        uvicorn.run(self.app, host=self.settings.server_ip, port=self.settings.server_port, log_level="info")


def main():
    parser = argparse.ArgumentParser(description="Start the Thai QR decode/generate server.")
    parser.add_argument("--ip", type=str, default="127.0.0.1", help="IP address to bind the server to.")
    parser.add_argument("--port", type=int, default=10764, help="Port to run the server on.")
    parser.add_argument("--history", type=str, default=None, help="JSON file to persist scan history in.")
    args = parser.parse_args()

    server = LocalServer(ServerSettings(server_ip=args.ip, server_port=args.port, history_path=args.history))
    server.start()


if __name__ == "__main__":
    sys.exit(main())
