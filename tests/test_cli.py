import json

import pytest

from fee_receipt.cli import main
from fee_receipt.store import ReceiptStore


def _write_record(tmp_path, payload):
    path = tmp_path / "record.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_render_stores_pdf_and_prints_name(tmp_path, capsys, asha_payload):
    out = tmp_path / "out"
    record = _write_record(tmp_path, asha_payload)
    assert main(["--out", str(out), "render", str(record)]) == 0

    filename = capsys.readouterr().out.strip()
    assert filename.startswith("Asha_R_") and filename.endswith(".pdf")
    data = (out / filename).read_bytes()
    assert data.startswith(b"%PDF-")
    assert b"(Asha R)" in data


def test_render_fill_words(tmp_path, capsys, asha_payload):
    asha_payload["amountInWords"] = ""
    out = tmp_path / "out"
    record = _write_record(tmp_path, asha_payload)
    assert main(["--out", str(out), "render", str(record), "--fill-words"]) == 0
    filename = capsys.readouterr().out.strip()
    assert b"(five thousand only)" in (out / filename).read_bytes()


def test_strict_render_rejects_mismatched_totals(tmp_path, capsys, asha_payload):
    asha_payload["totalAmount"] = "6000"
    out = tmp_path / "out"
    record = _write_record(tmp_path, asha_payload)
    assert main(["--out", str(out), "render", str(record), "--strict"]) == 1
    assert "sum of all fee items" in capsys.readouterr().err
    assert not out.exists()


def test_unreadable_record_fails(tmp_path, capsys):
    assert main(["--out", str(tmp_path), "render", str(tmp_path / "missing.json")]) == 1
    assert "missing.json" in capsys.readouterr().err


def test_search_prints_matching_entries(tmp_path, capsys, asha):
    store = ReceiptStore(tmp_path)
    store.save(asha, b"a", timestamp=1)
    assert main(["--out", str(tmp_path), "search", "asha"]) == 0
    entries = json.loads(capsys.readouterr().out)
    assert entries == [{"studentName": "Asha R", "filename": "Asha_R_1.pdf", "date": "2024-06-01"}]


def test_output_dir_from_environment(tmp_path, monkeypatch, capsys, asha_payload):
    out = tmp_path / "env-out"
    monkeypatch.setenv("RECEIPT_OUTPUT_DIR", str(out))
    record = _write_record(tmp_path, asha_payload)
    assert main(["render", str(record)]) == 0
    filename = capsys.readouterr().out.strip()
    assert (out / filename).is_file()


def test_out_accepted_after_subcommand(tmp_path, capsys, asha_payload):
    out = tmp_path / "out"
    record = _write_record(tmp_path, asha_payload)
    assert main(["render", str(record), "--out", str(out)]) == 0
    filename = capsys.readouterr().out.strip()
    assert (out / filename).is_file()

    assert main(["search", "asha", "--out", str(out)]) == 0
    assert json.loads(capsys.readouterr().out)[0]["filename"] == filename


def test_fetch_prints_stored_path(tmp_path, capsys, asha):
    store = ReceiptStore(tmp_path)
    store.save(asha, b"%PDF-1.4 stub", timestamp=1)
    assert main(["fetch", "Asha_R_1.pdf", "--out", str(tmp_path)]) == 0
    assert capsys.readouterr().out.strip() == str(tmp_path / "Asha_R_1.pdf")


def test_fetch_copies_receipt(tmp_path, capsys, asha):
    store = ReceiptStore(tmp_path / "store")
    store.save(asha, b"%PDF-1.4 stub", timestamp=1)
    target = tmp_path / "copy.pdf"
    assert main(["--out", str(tmp_path / "store"), "fetch", "Asha_R_1.pdf", "--to", str(target)]) == 0
    assert target.read_bytes() == b"%PDF-1.4 stub"
    assert capsys.readouterr().out.strip() == str(target)


@pytest.mark.parametrize("filename", ["nobody.pdf", "../meta.json", ".."])
def test_fetch_unknown_receipt_fails(tmp_path, capsys, asha, filename):
    ReceiptStore(tmp_path).save(asha, b"a", timestamp=1)
    assert main(["--out", str(tmp_path), "fetch", filename]) == 1
    assert "receipt not found" in capsys.readouterr().err
