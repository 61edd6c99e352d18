#!/usr/bin/env python3
"""
Run the SalesAgent API locally.

Usage:
    python scripts/serve.py [--host 127.0.0.1] [--port 8000] [--json-logs]
"""

import argparse
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / '.env')

import uvicorn

from sales_agent.logging import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description='Serve the SalesAgent inbox API')
    parser.add_argument('--host', default='127.0.0.1')
    parser.add_argument('--port', type=int, default=8000)
    parser.add_argument('--json-logs', action='store_true', help='Emit JSON logs')
    args = parser.parse_args()

    configure_logging(json_output=args.json_logs)
    uvicorn.run('sales_agent.api.main:app', host=args.host, port=args.port)


if __name__ == '__main__':
    main()
