import argparse


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="durationfmt", description="Convert durations to and from compact text"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Render seconds as duration text")
    encode.add_argument("seconds", type=int, help="Whole number of seconds")

    decode = subparsers.add_parser("decode", help="Print the seconds in duration text")
    decode.add_argument("text", help="Duration text such as 30s, 5m or 3h")

    check = subparsers.add_parser(
        "check", help="Validate duration fields of a JSON document"
    )
    check.add_argument("document", help="Path to a JSON document")
    check.add_argument(
        "--field",
        dest="fields",
        action="append",
        required=True,
        metavar="NAME",
        help="Key holding duration text (repeatable)",
    )

    return parser


def parse_args(argv):
    parser = create_parser()
    return parser.parse_args(argv)
