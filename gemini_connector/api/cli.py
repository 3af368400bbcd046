"""
Command-line adapter for the Gemini connector.

Architectural role:
- Collects prompts from arguments or stdin and runs them as one batch.
- Delegates all processing to `gemini_connector.core.engine.run`.

Request lifecycle:
1. Parse `--model`, `--property key=value`, `--api-key` and positional prompts.
2. Without positional prompts, read one prompt per non-blank stdin line.
3. Run the batch and print the response as indented JSON.

Input validation behavior:
- `--property` values without `=` are rejected by argparse.
- Property values are decoded as JSON when possible, else kept as strings.

Exit status:
- 0 when at least one completion succeeded (or no prompts were given).
- 1 when every completion is an error.
"""

import argparse
import json
import sys

from gemini_connector.core.engine import run
from gemini_connector.llm.provider_config import (
    API_KEY_SETTING,
    DEFAULT_MODEL,
    configure_logging,
)


def parse_property(raw: str):
    """Parse a `key=value` pair; the value is JSON-decoded when valid."""
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"Expected key=value, got {raw!r}")
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        parsed = value
    return key.strip(), parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gemini-connector",
        description="Run prompts through a Gemini model, attaching referenced files.",
    )
    parser.add_argument("prompts", nargs="*", help="Prompt texts (default: one per stdin line)")
    parser.add_argument("--model", default=DEFAULT_MODEL, help="Model identifier")
    parser.add_argument(
        "--property",
        dest="properties",
        action="append",
        type=parse_property,
        default=[],
        metavar="KEY=VALUE",
        help="Model configuration override (repeatable)",
    )
    parser.add_argument("--api-key", default=None, help="Model API key")
    return parser


def read_stdin_prompts(stream) -> list:
    """Return the non-blank lines of `stream`, stripped."""
    return [line.strip() for line in stream if line.strip()]


def main(argv=None) -> int:
    """Run the CLI and return the process exit code."""
    configure_logging()
    args = build_parser().parse_args(argv)

    prompts = args.prompts or read_stdin_prompts(sys.stdin)
    settings = {API_KEY_SETTING: args.api_key} if args.api_key else {}

    response = run(args.model, prompts, dict(args.properties), settings)

    print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))

    if response.completions and not any(c.ok for c in response.completions):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
