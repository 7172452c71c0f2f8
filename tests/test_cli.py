"""Tests for the tax1099 command-line entry point."""

import json
from unittest.mock import MagicMock, patch

import pytest

from tax1099 import (
    DownloadFormRequest,
    Submit1098Response,
    Tax1099StatusError,
    Tax1099ValidationError,
)
from tax1099.cli import main
from tax1099.pdf import count_pages

from fakes import blank_pdf


@pytest.fixture(autouse=True)
def credentials_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TAX1099_USERNAME", "user@example.com")
    monkeypatch.setenv("TAX1099_PASSWORD", "s3cret")
    monkeypatch.setenv("TAX1099_APP_KEY", "app-key")
    monkeypatch.setenv("TAX1099_ENVIRONMENT", "staging")


@pytest.fixture
def api():
    """Patched Tax1099Client; yields the instance the CLI works with."""
    with patch("tax1099.cli.Tax1099Client") as client_cls:
        client = MagicMock()
        client_cls.from_config.return_value.__enter__.return_value = client
        client_cls.from_config.return_value.__exit__.return_value = False
        yield client


def test_download_single_form(api, tmp_path):
    api.download_filled_form.return_value = b"%PDF-1.4 mock"
    out = tmp_path / "form.pdf"

    code = main(["download-pdf", "--form-type", "1099-MISC", "--form-id", "123", "--out", str(out)])

    assert code == 0
    assert out.read_bytes() == b"%PDF-1.4 mock"
    request = api.download_filled_form.call_args.args[0]
    assert isinstance(request, DownloadFormRequest)
    assert request.form_id == 123
    assert request.form_type == "1099-MISC"
    assert request.payer_tin is None


def test_download_several_forms_are_merged(api, tmp_path):
    api.download_filled_form.side_effect = [blank_pdf(1), blank_pdf(2)]
    out = tmp_path / "batch.pdf"

    code = main([
        "download-pdf", "--form-type", "1098", "--form-id", "1", "--form-id", "2", "--out", str(out),
    ])

    assert code == 0
    assert api.download_filled_form.call_count == 2
    assert count_pages(out.read_bytes()) == 3


def test_download_by_payer_and_year(api, tmp_path):
    api.download_filled_form.return_value = b"%PDF"

    main([
        "download-pdf", "--form-type", "1098", "--payer-tin", "581234567", "--tax-year", "2024",
        "--status", "Submitted", "--all-copies", "--out", str(tmp_path / "all.pdf"),
    ])

    request = api.download_filled_form.call_args.args[0]
    assert request.form_id is None
    assert request.payer_tin == "581234567"
    assert request.tax_year == "2024"
    assert request.status == "Submitted"
    assert request.is_all_copies is True
    assert request.un_mask_pdf is None


def test_client_errors_exit_nonzero(api, tmp_path, capsys):
    api.download_filled_form.side_effect = Tax1099ValidationError("formType is required")

    code = main(["download-pdf", "--form-type", "", "--form-id", "1", "--out", str(tmp_path / "x.pdf")])

    assert code == 1
    assert "formType is required" in capsys.readouterr().err
    assert not (tmp_path / "x.pdf").exists()


def test_validate_1098_prints_response(api, tmp_path, capsys, submit_1098_request):
    request_file = tmp_path / "forms.json"
    request_file.write_text(submit_1098_request.to_wire())
    api.validate_1098.return_value = Submit1098Response(total_count=1, message="OK")

    code = main(["validate-1098", str(request_file)])

    assert code == 0
    sent = api.validate_1098.call_args.args[0]
    assert sent.model_dump() == submit_1098_request.model_dump()
    assert json.loads(capsys.readouterr().out)["totalCount"] == 1


def test_validate_1098_with_remote_errors_exits_nonzero(api, tmp_path, submit_1098_request):
    request_file = tmp_path / "forms.json"
    request_file.write_text(submit_1098_request.to_wire())
    api.validate_1098.return_value = Submit1098Response.model_validate({
        "isError": True,
        "validationErrors": [{"field": "zipCode", "source": "payerInfo", "message": "Invalid"}],
    })

    assert main(["validate-1098", str(request_file)]) == 1


def test_import_status_error_exits_nonzero(api, tmp_path, capsys, submit_1098_request):
    request_file = tmp_path / "forms.json"
    request_file.write_text(submit_1098_request.to_wire())
    api.import_1098.side_effect = Tax1099StatusError(500, "https://x/form/1098/import", "oops")

    assert main(["import-1098", str(request_file)]) == 1
    assert "status code 500" in capsys.readouterr().err


def test_malformed_request_file_exits_nonzero(api, tmp_path):
    request_file = tmp_path / "bad.json"
    request_file.write_text('{"items": []}')

    assert main(["submit-1098s", str(request_file)]) == 1
    api.submit_1098s.assert_not_called()


def test_missing_credentials_exit_nonzero(api, monkeypatch, tmp_path):
    monkeypatch.delenv("TAX1099_PASSWORD")

    assert main(["download-pdf", "--form-type", "1098", "--form-id", "1", "--out", str(tmp_path / "x.pdf")]) == 1
