#!/usr/bin/env python3
"""Component Health Check Manager.

Verifies, once at process start, that every backing component of the
messaging service is reachable and correctly configured.
"""

import argparse
import sys
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, Dict, List, Optional

from loguru import logger
from tabulate import tabulate

from component_health_checks.check_registry import check_reg
from component_health_checks.config_manager import ConfigManager
from component_health_checks.models.check_result import CheckResult
from component_health_checks.models.health_check_config import ComponentConfig


# -----------------------------------------------------------------------
# Colors
# -----------------------------------------------------------------------
class Colors:
    """ANSI color codes for terminal output."""

    GREEN = "\033[32m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    RESET = "\033[0m"


# -----------------------------------------------------------------------
# Health Check Class
# -----------------------------------------------------------------------
class ComponentHealthCheck:
    """Runs the registered component checks against one configuration."""

    def __init__(self, config: ComponentConfig, debug: bool = False) -> None:
        """Initialize the component health check manager.

        Args:
            config (ComponentConfig): The loaded configuration snapshot.
            debug (bool): Enable debug logging and unredacted diagnostics.
        """
        self.config = config
        self.debug = debug
        self.results: List[CheckResult] = []

        # Setup logging
        logger.remove()
        if self.debug:
            logger.add(sys.stderr, level="DEBUG")
        else:
            logger.add(sys.stderr, level="INFO")

        if self.debug:
            logger.debug(f"[INIT] ComponentHealthCheck initialized: debug={debug}")

    # Health Check Methods
    # =====================================================================
    def run_all_checks(
        self, components: Optional[List[str]] = None, concurrent: bool = False
    ) -> List[CheckResult]:
        """Run the registered checks.

        Args:
            components (List[str], optional): Filter by check names. If None, run all.
            concurrent (bool): Run the checks on a thread pool.

        Returns:
            List[CheckResult]: Results in registry order.
        """
        names = check_reg.get_check_names()
        if components:
            unknown = sorted(set(components) - set(names))
            if unknown:
                logger.warning(f"[CHECK] Unknown component(s) ignored: {unknown}")
            names = [name for name in names if name in components]
            if not names:
                logger.warning(f"No components found matching: {components}")
                self.results = []
                return self.results

        checks = [check_reg.get_check(name) for name in names]

        if concurrent:
            with ThreadPoolExecutor(max_workers=len(checks)) as pool:
                # map() yields in submission order, so reporting stays stable
                self.results = list(pool.map(self._run_check, checks))
        else:
            self.results = [self._run_check(check) for check in checks]

        return self.results

    def _run_check(self, check) -> CheckResult:
        """Execute one check and log its outcome.

        Args:
            check: A ComponentCheck from the registry.

        Returns:
            CheckResult: The result of the check.
        """
        if self.debug:
            logger.debug(f"[CHECK] Running {check.name}")

        try:
            result = check.execute(self.config, debug=self.debug)
        except Exception as e:
            logger.error(f"[CHECK] Error executing check '{check.name}': {e}")
            return check._create_result(
                passed=False,
                error_type=type(e).__name__,
                message=f"Error executing check: {e}",
            )

        if result.skipped:
            logger.info(f"[CHECK] {check.check_name} skipped: {result.message}")
        elif result.passed:
            logger.info(f"[CHECK] {check.check_name} OK: {result.descriptor}")
        else:
            logger.error(f"[CHECK] {check.check_name} failed: {result.message}")
        return result

    def list_checks(self) -> List[Dict[str, str]]:
        """List all available checks with their descriptions.

        Returns:
            List[Dict]: List of checks with name, display name, kind, and description.
        """
        return [
            {
                "name": name,
                "check_name": check.check_name,
                "kind": check.kind.value,
                "description": check.description,
            }
            for name, check in check_reg.get_all_checks().items()
        ]

    def print_checks(self) -> None:
        """Print all available checks in tabular format."""
        table_data = [
            [c["name"], c["check_name"], c["kind"], c["description"]]
            for c in self.list_checks()
        ]
        print(
            tabulate(
                table_data,
                headers=["Check ID", "Display Name", "Component", "Description"],
                tablefmt="pretty",
                colalign=("left", "left", "left", "left"),
            )
        )

    def get_results(self) -> List[CheckResult]:
        """Get all check results.

        Returns:
            List[CheckResult]: List of all check results.
        """
        return self.results

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of check results.

        Returns:
            Dict: Passed/failed/skipped/total counts.
        """
        summary = {"passed": 0, "failed": 0, "skipped": 0, "total": 0}
        for result in self.results:
            summary["total"] += 1
            if result.skipped:
                summary["skipped"] += 1
            elif result.passed:
                summary["passed"] += 1
            else:
                summary["failed"] += 1
        return summary

    def all_passed(self) -> bool:
        """Check whether no result failed.

        Returns:
            bool: True if every check passed or was skipped.
        """
        return all(result.passed for result in self.results)

    def print_results(self) -> None:
        """Print check results in tabular format with color coding."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        print(f"\n{'=' * 100}")
        print("Component Health Check Report")
        print(f"{'=' * 100}")
        print(f"Generated: {timestamp}")
        print(f"{'=' * 100}")

        table_data = []
        for result in self.results:
            if result.skipped:
                status = f"{Colors.YELLOW}SKIP{Colors.RESET}"
                detail = result.message
            elif result.passed:
                status = f"{Colors.GREEN}PASS{Colors.RESET}"
                detail = result.descriptor
            else:
                status = f"{Colors.RED}FAIL{Colors.RESET}"
                detail = result.message
            table_data.append([result.check_name, result.kind.value, status, detail])

        print(
            tabulate(
                table_data,
                headers=["Check", "Component", "Status", "Detail"],
                tablefmt="pretty",
                colalign=("left", "left", "left", "left"),
            )
        )

        summary = self.get_summary()
        if summary["total"] > 0:
            if summary["failed"] == 0:
                summary_color = Colors.GREEN
                summary_status = "PASS"
            else:
                summary_color = Colors.RED
                summary_status = "FAIL"

            print(
                f"\n{summary_color}Result: {summary_status} "
                f"({summary['passed']}/{summary['total']}, {summary['skipped']} skipped)"
                f"{Colors.RESET}\n"
            )

        print("=" * 100)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify the service's backing components before startup."
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to the configuration file (default: config/config.yaml)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--concurrent", action="store_true", help="Run the checks concurrently"
    )
    parser.add_argument(
        "--component",
        action="append",
        dest="components",
        help="Only run the named check (repeatable)",
    )
    parser.add_argument(
        "--list", action="store_true", help="List the available checks and exit"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the health checks and return the process exit code."""
    args = parse_args(argv)

    try:
        config = ConfigManager(args.config).config
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"[CONFIG] Failed to load configuration: {e}")
        return 1

    health_check = ComponentHealthCheck(config, debug=args.debug)

    if args.list:
        health_check.print_checks()
        return 0

    health_check.run_all_checks(components=args.components, concurrent=args.concurrent)
    health_check.print_results()

    return 0 if health_check.all_passed() else 1


if __name__ == "__main__":
    sys.exit(main())
