#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main entry point for the Book-a-Demo service.

Provides the command-line interface: run the contact proxy, check the
configuration, or walk through the demo modal in a terminal.
"""

import sys
import argparse
import logging
from typing import Callable, List, Optional

from demo_booking.config import AppConfig
from demo_booking.hubspot.forms_client import HubSpotFormsClient
from demo_booking.modal.events import OPEN_DEMO_MODAL, EventBus
from demo_booking.modal.state_machine import BookDemoModal, ModalState
from demo_booking.modal.submitters import DirectFormSubmitter, ProxySubmitter, Submitter
from demo_booking.modal.views import ConsoleView
from demo_booking.utils.logger import configure_logging


def setup_argparse() -> argparse.ArgumentParser:
    """
    Set up command-line argument parsing.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        description="Book-a-Demo service",
        epilog="Contact proxy and demo modal for the landing page.",
    )

    parser.add_argument(
        "command",
        choices=["serve", "check-config", "book"],
        help="Command to execute",
    )

    # Serve options
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Interface to bind (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Port to listen on (default: PORT or 8000)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload on code changes",
    )

    # Book options
    parser.add_argument(
        "--direct",
        action="store_true",
        help="Submit straight to the HubSpot forms API instead of the proxy",
    )
    parser.add_argument(
        "--proxy-url",
        type=str,
        help="Contact proxy endpoint (default: BOOKING_PROXY_URL)",
    )

    # Common options
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level",
    )

    return parser


def build_submitter(app_config: AppConfig, direct: bool = False, proxy_url: Optional[str] = None) -> Submitter:
    """Pick the submitter for the ``book`` command."""
    if direct:
        forms_client = HubSpotFormsClient(
            app_config.hubspot_portal_id,
            app_config.hubspot_form_id,
            timeout=app_config.request_timeout,
        )
        return DirectFormSubmitter(forms_client, app_config.hubspot_meeting_slug, page_name="Book a demo (CLI)")
    return ProxySubmitter(proxy_url or app_config.proxy_url, timeout=app_config.request_timeout)


def run_serve(args: argparse.Namespace, app_config: AppConfig) -> int:
    import uvicorn

    uvicorn.run(
        "demo_booking.api.api:app",
        host=args.host,
        port=args.port or app_config.port,
        reload=args.reload or app_config.debug_mode,
    )
    return 0


def run_check_config(app_config: AppConfig, out: Callable[[str], None] = print) -> int:
    errors = app_config.validate()
    if not errors:
        out("Configuration OK")
        return 0
    for error in errors:
        out(f"- {error}")
    return 1


def run_book(
    submitter: Submitter,
    prompt: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> int:
    """
    Drive the modal from a terminal until the visitor books or gives up.

    An empty answer to every field closes the modal.
    """
    bus = EventBus()
    modal = BookDemoModal(submitter, view=ConsoleView(out), event_bus=bus)
    modal.attach()
    bus.publish(OPEN_DEMO_MODAL)

    try:
        while modal.state is ModalState.FORM:
            first_name = prompt("First Name: ")
            last_name = prompt("Last Name: ")
            email = prompt("Business Email: ")
            if not any(value.strip() for value in (first_name, last_name, email)):
                modal.close()
                return 1
            modal.set_field("first_name", first_name)
            modal.set_field("last_name", last_name)
            modal.set_field("email", email)
            modal.submit()
        return 0
    except (EOFError, KeyboardInterrupt):
        modal.close()
        return 1
    finally:
        modal.detach()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = setup_argparse()
    args = parser.parse_args(argv)

    app_config = AppConfig()
    level = args.log_level or app_config.log_level
    configure_logging(level=level, log_file=app_config.log_file_path, json_logs=app_config.json_logs)
    logging.getLogger("demo_booking").debug(f"Running command {args.command}")

    if args.command == "serve":
        return run_serve(args, app_config)
    if args.command == "check-config":
        return run_check_config(app_config)
    return run_book(build_submitter(app_config, args.direct, args.proxy_url))


if __name__ == "__main__":
    sys.exit(main())
