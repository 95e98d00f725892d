"""
CLI tool for the Helium node pack.

Provides terminal access to:
- The node definition
- The operations of a resource
- Running one operation for a single item
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from helium_nodes.node import CREDENTIAL_NAME, HeliumNetworkNode
from helium_nodes.observability import setup_logging
from helium_nodes.registry import get_registry
from helium_nodes.sdk import NodeExecutionContext, NodeOperationError


def parse_parameter(raw: str) -> tuple:
    """
    Parse a key=value pair. Values are read as JSON when possible
    (numbers, booleans), otherwise kept as strings.
    """
    if "=" not in raw:
        raise argparse.ArgumentTypeError(f"Expected key=value, got: {raw}")
    key, value = raw.split("=", 1)
    try:
        return key, json.loads(value)
    except ValueError:
        return key, value


def cmd_describe(args: argparse.Namespace) -> int:
    """Print the node definition."""
    print(json.dumps(HeliumNetworkNode.get_definition(), indent=2))
    return 0


def cmd_operations(args: argparse.Namespace) -> int:
    """List the operations of a resource."""
    operations = get_registry().operations_for(args.resource)
    if not operations:
        print(f"Error: Unknown resource: {args.resource}")
        return 1
    
    for descriptor in operations:
        params = ", ".join(
            f"{p.name}*" if p.required else p.name for p in descriptor.parameters
        )
        print(f"{descriptor.operation:<24} {descriptor.method.value:<6} {descriptor.path}  [{params}]")
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """Run one operation for a single item and print its output."""
    setup_logging()
    
    parameters: Dict[str, Any] = dict(args.param or [])
    parameters["resource"] = args.resource
    parameters["operation"] = args.operation
    
    credential: Dict[str, Any] = {}
    if args.api_key:
        credential["apiKey"] = args.api_key
    if args.base_url:
        credential["baseUrl"] = args.base_url
    
    context = NodeExecutionContext(
        parameters=parameters,
        credentials={CREDENTIAL_NAME: credential},
        input_data=[{"json": {}}],
        continue_on_fail=args.continue_on_fail,
    )
    
    node = HeliumNetworkNode()
    node.set_context(context)
    
    try:
        result = node.execute()
    except NodeOperationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    
    print(json.dumps(result[0], indent=2, default=str))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="helium-nodes",
        description="Helium Network node CLI",
    )
    
    subparsers = parser.add_subparsers(dest='command', help='Command to execute')
    
    # describe command
    subparsers.add_parser('describe', help='Print the node definition as JSON')
    
    # operations command
    operations_parser = subparsers.add_parser('operations', help='List operations of a resource')
    operations_parser.add_argument('resource', help='Resource name (e.g. hotspots)')
    
    # run command
    run_parser = subparsers.add_parser('run', help='Run one operation')
    run_parser.add_argument('resource', help='Resource name')
    run_parser.add_argument('operation', help='Operation name')
    run_parser.add_argument('-p', '--param', action='append', type=parse_parameter,
                            metavar='KEY=VALUE', help='Parameter value (repeatable)')
    run_parser.add_argument('--api-key', help='Helium API key')
    run_parser.add_argument('--base-url', help='API base URL')
    run_parser.add_argument('--continue-on-fail', action='store_true',
                            help='Emit an error record instead of failing')
    
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    if args.command == 'describe':
        return cmd_describe(args)
    elif args.command == 'operations':
        return cmd_operations(args)
    elif args.command == 'run':
        return cmd_run(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
