"""
CLI 入口点

``egg-runtime check`` wires a runtime from a YAML config (and optionally an
HTML page), starts every configured module and prints what each one
resolved to.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from egg.application.directory import RuntimeDirectory
from egg.application.registries import load_modules
from egg.application.runtime import Runtime
from egg.config import load_runtime_config
from egg.core.errors import ConfigurationError
from egg.infrastructure.dom import SoupDocument
from egg.infrastructure.error_log import InMemoryErrorLog, attach_error_log
from egg.infrastructure.logging import configure_logging


def create_parser() -> argparse.ArgumentParser:
    """创建 CLI 参数解析器"""
    parser = argparse.ArgumentParser(
        prog="egg-runtime",
        description="Module runtime: register, start and inspect UI modules",
    )

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    check_parser = subparsers.add_parser("check", help="start configured modules and report their state")
    check_parser.add_argument("--config", "-c", required=True, help="runtime YAML config")
    check_parser.add_argument("--page", "-p", help="HTML page used as the element tree")

    parser.add_argument("--version", "-v", action="store_true", help="显示版本")

    return parser


def describe_modules(runtime: Runtime) -> List[str]:
    lines = []
    for name in runtime.module.names():
        registration = runtime.module.registration(name)
        record = runtime.module.record(name)
        state = "started" if record else "stopped"
        if record is None or record.element is None:
            element = "headless"
        else:
            element = f"<{record.element.name}>"
        kinds = sorted(k for d in (record.delegates if record else []) for k in d.bound_kinds)
        flags = " main" if registration and registration.main else ""
        lines.append(f"{name:<20} {state:<8} {element:<12} {','.join(kinds) or '-'}{flags}")
    return lines


def run_check(config_path: str, page: Optional[str]) -> int:
    try:
        config = load_runtime_config(config_path)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    configure_logging(config.logging)
    document = SoupDocument.from_file(page) if page else None
    directory = RuntimeDirectory()
    error_log = InMemoryErrorLog()

    try:
        runtime = directory.create(config, document=document)
        attach_error_log(runtime, error_log)
        load_modules(runtime, config.modules)
        runtime.init()
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        directory.clear()
        return 2
    except Exception as e:  # noqa: BLE001
        print(f"error: {e}", file=sys.stderr)
        directory.clear()
        return 1

    print(f"runtime {runtime.name} (debug={runtime.debug})")
    for line in describe_modules(runtime):
        print("  " + line)

    errors = list(error_log.entries())
    for entry in errors:
        print(f"  ! {entry['error']}", file=sys.stderr)

    directory.clear()
    return 1 if errors else 0


def run_cli(args: Optional[list] = None) -> int:
    """
    运行 CLI

    Args:
        args: 命令行参数（默认使用 sys.argv）

    Returns:
        退出码
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.version:
        from egg import __version__

        print(f"egg-runtime {__version__}")
        return 0

    if not parsed.command:
        parser.print_help()
        return 0

    if parsed.command == "check":
        return run_check(parsed.config, parsed.page)

    parser.print_help()
    return 1


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
