import argparse
import sys

import uvicorn

from escposkit.render_server_app import create_app, RenderSettings


class RenderServer:
    def __init__(self, settings: RenderSettings) -> None:
        self.settings = settings
        self.app = create_app(settings=self.settings)

    def start(self) -> None:
        uvicorn.run(self.app, host=self.settings.server_ip, port=self.settings.server_port, log_level="info")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Start the ESC/POS render server.")
    parser.add_argument("--ip", type=str, default="127.0.0.1", help="IP address to bind the render server to.")
    parser.add_argument("--port", type=int, default=10290, help="Port to run the render server on.")
    parser.add_argument("--table", type=str, default=None, help="Path to a custom command table JSON file.")
    parser.add_argument("--code-page", type=str, default="CP437", help="Code page used to transcode text.")

    args = parser.parse_args(argv)
    server = RenderServer(
        RenderSettings(
            server_ip=args.ip,
            server_port=args.port,
            command_table_path=args.table,
            default_code_page=args.code_page,
        )
    )
    server.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
