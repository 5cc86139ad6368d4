from __future__ import annotations

import json

from click.testing import CliRunner

from pdfmetax import __version__, load_slot_from_path
from pdfmetax.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_show_prints_humanized_table(source_pdf):
    result = CliRunner().invoke(cli, ["show", str(source_pdf)])

    assert result.exit_code == 0, result.output
    assert "Quarterly Report" in result.output
    assert "Creation Date" in result.output
    assert "Department" in result.output


def test_show_json(source_pdf):
    result = CliRunner().invoke(cli, ["show", str(source_pdf), "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["Title"] == "Quarterly Report"
    assert payload["CreationDate"] == "2023-05-01T12:00:00+01:00"


def test_show_reports_corrupt_file(tmp_path):
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"garbage")

    result = CliRunner().invoke(cli, ["show", str(broken)])

    assert result.exit_code == 1
    assert "Error" in result.output
    assert "broken.pdf" in result.output


def test_translate_writes_output(source_pdf, target_pdf, tmp_path):
    output = tmp_path / "out" / "result.pdf"

    result = CliRunner().invoke(cli, ["translate", str(source_pdf), str(target_pdf), "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "Successfully created" in result.output
    metadata = load_slot_from_path(output).metadata
    assert metadata["Title"] == "Quarterly Report"
    assert metadata["Department"] == "Accounting"
    assert metadata["TargetOnly"] == "keep me"


def test_translate_default_output_name(source_pdf, target_pdf, tmp_path):
    runner = CliRunner()

    with runner.isolated_filesystem(temp_dir=tmp_path) as cwd:
        result = runner.invoke(cli, ["translate", str(source_pdf), str(target_pdf)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / cwd / "translated-metadata.pdf").exists()


def test_translate_reports_invalid_date(pdf_factory, target_pdf, tmp_path):
    source = pdf_factory("bad.pdf", {"/ModDate": "not-a-date"})
    output = tmp_path / "never.pdf"

    result = CliRunner().invoke(cli, ["translate", str(source), str(target_pdf), "-o", str(output)])

    assert result.exit_code == 1
    assert "ModDate" in result.output
    assert "not-a-date" in result.output
    assert not output.exists()


def test_translate_opens_encrypted_source_with_password(pdf_factory, target_pdf, tmp_path):
    source = pdf_factory("locked.pdf", {"/Title": "Locked Title"}, password="s3cret")
    output = tmp_path / "result.pdf"
    args = ["translate", str(source), str(target_pdf), "-o", str(output)]

    denied = CliRunner().invoke(cli, args)
    assert denied.exit_code == 1
    assert "locked.pdf" in denied.output

    result = CliRunner().invoke(cli, args + ["--source-password", "s3cret"])
    assert result.exit_code == 0, result.output
    assert load_slot_from_path(output).metadata["Title"] == "Locked Title"
