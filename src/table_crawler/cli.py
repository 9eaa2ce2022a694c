import argparse
import sys

from pydantic import ValidationError

from table_crawler.config import DEFAULT_USER_AGENT, Settings
from table_crawler.logging_conf import setup_logging
from table_crawler.service.run_crawl import run_crawl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="table-crawler",
        description="Pages through a form-driven HTML table and saves its rows to a text file.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--url",
        required=True,
        help="Endpoint that accepts the paging form POST.",
    )
    parser.add_argument(
        "--cookie",
        required=True,
        help="Cookie header of an already authenticated session.",
    )
    parser.add_argument(
        "--total",
        type=int,
        default=100,
        help="Total number of records to page through.",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=50,
        help="Records returned by the endpoint per page.",
    )
    parser.add_argument(
        "--sort-column",
        default="LastName",
        help="Value sent as the SortCol form field.",
    )
    parser.add_argument(
        "--sort-direction",
        default="ASC",
        choices=["ASC", "DESC"],
        help="Value sent as the SortOrder form field.",
    )
    parser.add_argument(
        "--output",
        default="member_records.txt",
        help="Text file rewritten with every record gathered so far.",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=2.0,
        help="Seconds to wait between pages.",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=20,
        help="HTTP timeout in seconds.",
    )
    parser.add_argument(
        "--user-agent",
        default=DEFAULT_USER_AGENT,
        help="User-Agent header sent with every request.",
    )
    parser.add_argument(
        "--extractor",
        default="structural",
        choices=["structural", "pattern"],
        help="Row extractor: HTML tree walk or legacy regex scan.",
    )
    parser.add_argument(
        "--artifacts-dir",
        default=None,
        help="Directory for failed-response dumps (disabled when omitted).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )

    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    return Settings(
        url=args.url,
        credential=args.cookie,
        total_records=args.total,
        page_size=args.page_size,
        sort_column=args.sort_column,
        sort_direction=args.sort_direction,
        output=args.output,
        delay_seconds=args.delay,
        timeout=args.timeout,
        user_agent=args.user_agent,
        extractor=args.extractor,
        artifacts_dir=args.artifacts_dir,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = settings_from_args(args)
    except ValidationError as exc:
        parser.error(str(exc))

    setup_logging(settings.log_level)

    try:
        report = run_crawl(settings)
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"\nDone! Saved {report.record_count} records to {report.output}")


if __name__ == "__main__":
    main()
