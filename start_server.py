#!/usr/bin/env python3
"""Launch the invoicing API server.

Usage:
    ./start_server.py                    # Serve on 127.0.0.1:5000
    ./start_server.py --port 8080        # Use custom port
    ./start_server.py --data-dir /srv/data --log-level DEBUG
"""

import argparse
import os

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="Launch the invoicing API server")
    parser.add_argument("--port", type=int, default=5000, help="Server port (default: 5000)")
    parser.add_argument("--host", default="127.0.0.1", help="Server host (default: 127.0.0.1)")
    parser.add_argument("--data-dir", help="Directory for entity JSON files (default: ./Data)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    args = parser.parse_args()

    # Must be set before invoicing.config is imported by uvicorn
    if args.data_dir:
        os.environ["INVOICING_DATA_DIR"] = os.path.abspath(args.data_dir)
    if args.log_level:
        os.environ["INVOICING_LOG_LEVEL"] = args.log_level

    print(f"Invoicing API running at http://{args.host}:{args.port} (docs at /api/docs)")

    uvicorn.run("invoicing.server:app", host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
