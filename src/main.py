"""Run the Cosmos DB family demo from the command line."""

import argparse
import asyncio
from typing import List, Optional

from azure.cosmos import exceptions

from config import Settings, settings
from demo.console import print_error, print_line
from demo.orchestrator import DemoReport, run_demo
from family_store.client import open_client
from family_store.exceptions import FamilyServiceError
from utils.logging import logger, set_level


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Walk through basic Azure Cosmos DB operations on family documents.")
    parser.add_argument("--no-wait", action="store_true", help="exit without waiting for a key press")
    return parser.parse_args(argv)


def wait_for_keypress() -> None:
    try:
        input()
    except EOFError:
        # stdin closed, nothing to wait for
        pass


async def run(demo_settings: Settings) -> DemoReport:
    async with open_client(demo_settings) as client:
        return await run_demo(client, demo_settings)


def main(argv: Optional[List[str]] = None, demo_settings: Settings = settings) -> int:
    """Run the demo and report failures; returns the process exit code."""
    args = parse_args(argv)
    set_level(demo_settings.logging_level)
    print_line("Begin operation...")

    try:
        asyncio.run(run(demo_settings))
        return 0
    except FamilyServiceError as e:
        logger.error(f"Service error {e.status_code}: {e}", exc_info=True)
        print_error(f"{e.status_code} error occurred: {e}")
        return 1
    except exceptions.CosmosHttpResponseError as e:
        logger.error(f"Service error {e.status_code}: {e.message}", exc_info=True)
        print_error(f"{e.status_code} error occurred: {e.message}")
        return 1
    except Exception as e:
        logger.exception(f"Demo failed: {e}")
        print_error(f"Error: {e}")
        return 1
    finally:
        print_line("End of Demo. Press Enter to exit...")
        if demo_settings.wait_for_keypress and not args.no_wait:
            wait_for_keypress()


if __name__ == "__main__":
    raise SystemExit(main())
