"""Command-line interface for the Nexmo client.

Credentials and transport come from the environment (``NEXMO_API_KEY``,
``NEXMO_API_SECRET``, ``NEXMO_PROTOCOL``, ``NEXMO_DEBUG``) or a ``.env``
file.

Examples
--------
.. code-block:: bash

    nexmo-client balance
    nexmo-client send-sms Acme 447700900000 "Hello there"
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

import httpx
import pydantic

from . import __version__
from .client import NexmoClient
from .config.settings import get_settings
from .exceptions import NexmoClientError
from .models.outcome import Outcome
from .utils.security import setup_secure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nexmo-client", description="Nexmo REST API client"
    )
    parser.add_argument("--version", action="version", version=__version__)
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("balance", help="Show the account balance")
    sub.add_parser("numbers", help="List the account's inbound numbers")

    pricing = sub.add_parser("pricing", help="Show outbound pricing for a country")
    pricing.add_argument("country", help="Two-letter country code")

    send = sub.add_parser("send-sms", help="Send a text message")
    send.add_argument("sender")
    send.add_argument("recipient")
    send.add_argument("text")

    search = sub.add_parser("search-message", help="Look up a sent message")
    search.add_argument("message_id")
    return parser


async def run_command(client: NexmoClient, args: argparse.Namespace) -> Outcome:
    """Dispatch a parsed command to the matching client operation.

    :param client: Initialized client
    :type client: NexmoClient
    :param args: Parsed arguments
    :type args: argparse.Namespace
    :return: Outcome of the operation
    :rtype: Outcome
    """
    if args.command == "balance":
        return await client.get_balance()
    if args.command == "numbers":
        return await client.get_numbers()
    if args.command == "pricing":
        return await client.get_pricing(args.country)
    if args.command == "send-sms":
        return await client.send_text_message(args.sender, args.recipient, args.text)
    if args.command == "search-message":
        return await client.search_message(args.message_id)
    raise ValueError(f"Unknown command: {args.command}")


def main(
    argv: Optional[List[str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    """Run the CLI.

    :param argv: Arguments, defaults to ``sys.argv[1:]``
    :param transport: Optional httpx transport
    :return: Process exit status
    """
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except pydantic.ValidationError as e:
        print(f"Error: Invalid settings: {e}", file=sys.stderr)
        return 1
    setup_secure_logging(level=settings.log_level)
    logger.debug("Running command %s", args.command)

    try:
        client = NexmoClient.from_settings(settings, transport=transport)
        outcome = asyncio.run(run_command(client, args))
    except NexmoClientError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if not outcome.ok:
        print(f"Error: {outcome.error.message}", file=sys.stderr)
        if outcome.raw_body:
            print(outcome.raw_body, file=sys.stderr)
        return 1

    print(json.dumps(outcome.payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
