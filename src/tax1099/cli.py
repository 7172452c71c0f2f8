"""
Command-line access to the Tax1099 API.

Usage:
    tax1099 download-pdf --form-type 1099-MISC --form-id 123 --out form.pdf
    tax1099 download-pdf --form-type 1098 --form-id 1 --form-id 2 --out batch.pdf
    tax1099 download-pdf --form-type 1098 --payer-tin 123456789 --tax-year 2024 --out all.pdf
    tax1099 validate-1098 forms.json
    tax1099 import-1098 forms.json
    tax1099 submit-1098s submission.json

Environment:
    TAX1099_USERNAME, TAX1099_PASSWORD, TAX1099_APP_KEY (required), or a .env
    file in the working directory. See tax1099.config.load_config.

Exit codes:
    0 - Success
    1 - Configuration, validation or API error
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .client import Tax1099Client
from .config import Tax1099Config, load_config, load_config_from_dotenv
from .errors import Tax1099Error
from .pdf import count_pages, merge_pdfs
from .schemas import (
    DownloadFormRequest,
    FormStatus,
    Submit1098Request,
    Submit1098sRequest,
)

logger = logging.getLogger("tax1099.cli")


def _load_config(env_file: Optional[str]) -> Tax1099Config:
    if env_file:
        return load_config_from_dotenv(Path(env_file))
    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return load_config_from_dotenv(default_env)
    return load_config()


def _download_requests(args: argparse.Namespace) -> List[DownloadFormRequest]:
    common = dict(
        form_type=args.form_type,
        payer_tin=args.payer_tin,
        tax_year=args.tax_year,
        status=args.status,
        client_payer_id=args.client_payer_id,
        is_all_copies=True if args.all_copies else None,
        un_mask_pdf=True if args.unmask else None,
    )
    form_ids = args.form_id or [None]
    return [DownloadFormRequest(form_id=form_id, **common) for form_id in form_ids]


def cmd_download_pdf(client: Tax1099Client, args: argparse.Namespace) -> int:
    # One API call per form; several forms are stitched together locally
    documents = [client.download_filled_form(request) for request in _download_requests(args)]

    if len(documents) == 1:
        pdf_bytes = documents[0]
    else:
        pdf_bytes = merge_pdfs(documents)
        logger.info(f"Merged {len(documents)} forms into {count_pages(pdf_bytes)} page(s)")

    output = Path(args.out)
    output.write_bytes(pdf_bytes)
    print(f"Saved: {output} ({len(pdf_bytes)} bytes)")
    return 0


def cmd_validate_1098(client: Tax1099Client, args: argparse.Namespace) -> int:
    request = Submit1098Request.model_validate_json(Path(args.request_file).read_text())
    response = client.validate_1098(request)
    print(response.model_dump_json(by_alias=True, indent=2))
    return 1 if response.is_error or response.validation_errors else 0


def cmd_import_1098(client: Tax1099Client, args: argparse.Namespace) -> int:
    request = Submit1098Request.model_validate_json(Path(args.request_file).read_text())
    response = client.import_1098(request)
    print(response.model_dump_json(by_alias=True, indent=2))
    return 1 if response.is_error else 0


def cmd_submit_1098s(client: Tax1099Client, args: argparse.Namespace) -> int:
    request = Submit1098sRequest.model_validate_json(Path(args.request_file).read_text())
    response = client.submit_1098s(request)
    print(response.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    return 1 if response.is_error else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tax1099",
        description="Validate, submit and download forms through the Tax1099 API",
    )
    parser.add_argument("--env-file", default=None, help="Path to a .env file with credentials")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    download = subparsers.add_parser("download-pdf", help="Download filled form PDF(s)")
    download.add_argument("--form-type", required=True, help="e.g. 1098, 1099-MISC, 1099-NEC")
    download.add_argument(
        "--form-id", type=int, action="append",
        help="Tax1099 form id (repeat to merge several forms into one PDF)",
    )
    download.add_argument("--payer-tin", default=None, help="Payer TIN (with --tax-year)")
    download.add_argument("--tax-year", default=None, help="Tax year (with --payer-tin)")
    download.add_argument(
        "--status", default=None, choices=[status.value for status in FormStatus],
        help="Only forms with this status",
    )
    download.add_argument("--client-payer-id", default=None, help="Your id for the payer")
    download.add_argument("--all-copies", action="store_true", help="Include all copies")
    download.add_argument("--unmask", action="store_true", help="Unmask TINs in the PDF")
    download.add_argument("--out", required=True, help="Output PDF path")
    download.set_defaults(handler=cmd_download_pdf)

    for name, handler, help_text in (
        ("validate-1098", cmd_validate_1098, "Validate 1098 forms from a JSON request file"),
        ("import-1098", cmd_import_1098, "Import 1098 forms from a JSON request file"),
        ("submit-1098s", cmd_submit_1098s, "Submit a paid 1098 batch from a JSON request file"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("request_file", help="Path to the JSON request body")
        sub.set_defaults(handler=handler)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = _load_config(args.env_file)
        with Tax1099Client.from_config(config) as client:
            return args.handler(client, args)
    except (Tax1099Error, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
