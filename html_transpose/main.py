"""
Command-line interface for html-transpose.

Usage:
    html-transpose input.html output.html
    html-transpose input.html            # writes input.transposed.html
    cat input.html | html-transpose -    # stdin -> stdout
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .config import SUPPORTED_PARSERS, TransposeConfig, get_config
from .exceptions import HtmlTransposeError
from .pipeline import transpose

STDIN_MARKER = "-"

USAGE_EXAMPLES = """\
예시:
  html-transpose input.html output.html
  html-transpose input.html
  cat input.html | html-transpose -
"""

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def print_success(msg: str) -> None:
    """Print success message."""
    console.print(f"[green]✓[/green] {escape(msg)}", soft_wrap=True, highlight=False)


def print_error(msg: str) -> None:
    """Print error message."""
    err_console.print(f"[red]✗[/red] {escape(msg)}", soft_wrap=True, highlight=False)


def default_output_path(input_path: str, suffix: str = ".transposed.html") -> Path:
    """Derive the output file from the input file name.

    Trailing ``.html`` and then ``.htm`` extensions are stripped (repeatedly)
    before ``suffix`` is appended.
    """
    stem = input_path
    while stem.endswith(".html"):
        stem = stem[: -len(".html")]
    while stem.endswith(".htm"):
        stem = stem[: -len(".htm")]
    return Path(f"{stem}{suffix}")


def read_input(source: str, encoding: str) -> str:
    if source == STDIN_MARKER:
        return sys.stdin.buffer.read().decode(encoding)
    return Path(source).read_text(encoding=encoding)


def write_stdout(text: str, encoding: str) -> None:
    sys.stdout.buffer.write(text.encode(encoding))
    sys.stdout.buffer.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-transpose",
        description="HTML 테이블의 행과 열을 전치합니다 (rowspan/colspan 지원).",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input_path",
        nargs="?",
        help="입력 HTML 파일 경로 ('-'이면 stdin에서 읽고 stdout으로 출력)",
    )
    parser.add_argument(
        "output_path",
        nargs="?",
        help="출력 파일 경로 (생략 시 <입력>.transposed.html)",
    )
    parser.add_argument(
        "--parser", choices=SUPPORTED_PARSERS, default=None, help="BeautifulSoup 파서"
    )
    parser.add_argument("--encoding", type=str, default=None, help="파일 인코딩")
    parser.add_argument("--verbose", action="store_true")
    return parser


def run(args: argparse.Namespace, config: TransposeConfig) -> int:
    parser_name = args.parser or config.parser
    encoding = args.encoding or config.encoding

    try:
        html_input = read_input(args.input_path, encoding)
    except (OSError, LookupError, UnicodeDecodeError) as e:
        print_error(f"파일 읽기 실패: {args.input_path} ({e})")
        return 1

    try:
        transposed_html = transpose(html_input, parser=parser_name)
    except HtmlTransposeError as e:
        print_error(f"에러: {e}")
        return 1

    if args.output_path:
        output_path = Path(args.output_path)
    elif args.input_path == STDIN_MARKER:
        try:
            write_stdout(transposed_html, encoding)
        except (OSError, UnicodeEncodeError) as e:
            print_error(f"출력 쓰기 실패: stdout ({e})")
            return 1
        return 0
    else:
        output_path = default_output_path(args.input_path, config.output_suffix)

    try:
        output_path.write_text(transposed_html, encoding=encoding)
    except (OSError, UnicodeEncodeError) as e:
        print_error(f"파일 쓰기 실패: {output_path} ({e})")
        return 1

    logger.info("Wrote %s", output_path)
    print_success(f"전치된 HTML이 {output_path} 파일에 저장되었습니다.")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.input_path is None:
        parser.print_help(sys.stderr)
        sys.exit(1)

    load_dotenv()
    try:
        config = get_config()
    except HtmlTransposeError as e:
        print_error(f"설정 오류: {e}")
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        status = run(args, config)
    except KeyboardInterrupt:
        print("\nAborted.")
        sys.exit(130)
    if status != 0:
        sys.exit(status)


if __name__ == "__main__":
    main()
