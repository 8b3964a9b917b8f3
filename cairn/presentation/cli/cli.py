"""
CLI Module

Architectural Intent:
- Command-line interface for Cairn
- Entry point for all user interactions
- Delegates to application use cases via composition root
- Supports --verbose/--debug flags for log level control
"""

import argparse
import sys
import logging
import traceback
from typing import Optional, Sequence

from cairn.composition_root import create_container
from cairn.domain.entities.cluster_record import ClusterRecord
from cairn.domain.errors import (
    ClusterNotFoundError,
    StateStoreError,
    StateStoreUsageError,
)
from cairn.domain.value_objects.cloud_provider import CloudProvider
from cairn.infrastructure.config import load_config
from cairn.infrastructure.logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cairn",
        description="Cairn: checkpointed state store provisioning for clusters",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit structured JSON logs"
    )
    parser.add_argument(
        "--config", "-c", default=None, help="Path to cairn.json config file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    register_parser = subparsers.add_parser(
        "register", help="Register a cluster record for state store provisioning"
    )
    register_parser.add_argument("cluster", help="Cluster name")
    register_parser.add_argument(
        "--provider",
        "-p",
        required=True,
        choices=[p.value for p in CloudProvider],
        help="Cloud provider",
    )
    register_parser.add_argument("--region", "-r", required=True, help="Cloud region")
    register_parser.add_argument(
        "--bucket", "-b", default="", help="State store bucket name"
    )
    register_parser.add_argument(
        "--artifacts-bucket", default="", help="Artifacts bucket name (aws)"
    )
    register_parser.add_argument("--aws-access-key-id", default="")
    register_parser.add_argument("--aws-secret-access-key", default="")

    for name, help_text in (
        ("credentials", "Acquire state store credentials (StateStoreCredentials)"),
        ("create", "Create the state store bucket (StateStoreCreate)"),
        ("provision", "Run both state store steps"),
        ("status", "Show state store checkpoint status"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("cluster", help="Cluster name")

    return parser


def _print_details(details) -> None:
    if details is None or details.is_empty:
        return
    for key, value in details.to_dict().items():
        if value:
            print(f"    {key}: {value}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "register" and args.provider == CloudProvider.AWS.value:
        if not args.aws_access_key_id or not args.aws_secret_access_key:
            parser.error(
                "register --provider aws requires --aws-access-key-id "
                "and --aws-secret-access-key"
            )

    config = load_config(args.config)

    # Configure logging based on flags
    if args.debug:
        configure_logging(level=logging.DEBUG, json_format=args.json_logs)
    elif args.verbose:
        configure_logging(level=logging.INFO, json_format=args.json_logs)
    else:
        configure_logging(level=config.log_level, json_format=args.json_logs)

    verbose = args.verbose or args.debug

    if args.command is None:
        parser.print_help()
        return

    container = create_container(config)

    try:
        if args.command == "register":
            record = ClusterRecord(
                cluster_name=args.cluster,
                cloud_provider=CloudProvider.parse(args.provider),
                cloud_region=args.region,
                state_store_bucket_name=args.bucket,
                artifacts_bucket_name=args.artifacts_bucket,
                aws_access_key_id=args.aws_access_key_id,
                aws_secret_access_key=args.aws_secret_access_key,
            )
            container.cluster_store.create_cluster(record)
            print(f"[+] Registered cluster '{args.cluster}' ({args.provider}, {args.region}).")
            return

        if args.command == "credentials":
            result = container.acquire_credentials.execute(args.cluster)
            if result.performed:
                print(f"[+] {result.provider} state store credentials created and set.")
            else:
                print("[*] State store credentials already set, nothing to do.")
            _print_details(result.details)
            return

        if args.command == "create":
            result = container.create_state_store.execute(args.cluster)
            if result.performed:
                print(f"[+] {result.provider} state store bucket created.")
            else:
                print("[*] State store bucket already in place, nothing to do.")
            _print_details(result.details)
            return

        if args.command == "provision":
            print(f"[*] Provisioning state store for cluster '{args.cluster}'...")
            result = container.provision_state_store.execute(args.cluster)
            print("[+] State store ready.")
            _print_details(result.details)
            return

        if args.command == "status":
            status = container.state_store_status.execute(args.cluster)
            print(f"[*] Cluster {status.cluster_name} ({status.provider}, {status.region})")
            print(f"    credentials: {'done' if status.credentials_done else 'pending'}")
            if status.create_step_required:
                print(f"    create: {'done' if status.create_done else 'pending'}")
            else:
                print("    create: not required")
            _print_details(status.details)
            return
    except ClusterNotFoundError as e:
        print(f"[-] {e}")
        sys.exit(1)
    except StateStoreUsageError as e:
        print(f"[-] {e}")
        sys.exit(1)
    except StateStoreError as e:
        print(f"[-] {args.command} failed: {e}")
        if verbose:
            traceback.print_exc()
        sys.exit(1)
    finally:
        container.exporter.flush()
        container.cluster_store.close()


if __name__ == "__main__":
    main()
