import argparse
import sys

from .errors import BootstrapError, PSITError
from .loader import load_toolkit


def main(argv=None):
    parser = argparse.ArgumentParser(prog="psit", description="Collect and show system information.")
    parser.add_argument("--computer", help="target host (default: local machine)")
    parser.add_argument("--unit", default="GB", help="GB, MB, KB or default")
    parser.add_argument("--csv", action="store_true", help="also save the report as CSV")
    parser.add_argument("--popup", action="store_true", help="show the report in a message box")
    parser.add_argument("--config", help="path to an alternative config file")
    args = parser.parse_args(argv)

    try:
        toolkit = load_toolkit(args.config)
    except BootstrapError as e:
        print(f"FATAL: {e}", file=sys.stderr)
        return 1

    log = toolkit.logger
    try:
        report = toolkit.command("get_system_info")(computer_name=args.computer, unit=args.unit)
    except (PSITError, KeyError, ValueError) as e:
        log.error(f"System info collection failed: {e}")
        return 2

    for name, value in report.to_dict().items():
        log.info(f"{name}: {value}")

    if args.csv:
        path = toolkit.command("export_report_csv")(report)
        log.info(f"Report saved to {path}")

    if args.popup:
        toolkit.command("new_message_box")(report.to_dict(), title=f"System Info - {report.computer_name}",
                                           title_background="SteelBlue", title_text_foreground="White")
    return 0


if __name__ == "__main__":
    sys.exit(main())
