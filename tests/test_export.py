import smtplib
import typing
from datetime import datetime
from email import message_from_bytes
from email.policy import default as default_policy

import pytest

from cafe_stocklist.__main__ import main
from cafe_stocklist.export import StockExporter, report_filename
from cafe_stocklist.models import CategorySection, StockItem
from cafe_stocklist.paginator import DrawInstruction, Page, TextStyle
from cafe_stocklist.renderer import CanvasRenderer, DocumentRenderer
from cafe_stocklist.share import (
    EmailSharer,
    ExportSettings,
    ShareMetadata,
    Sharer,
    share_metadata,
)

WHEN = datetime(2024, 11, 2, 18, 30, 15)

CATS = (CategorySection("DRINKS", (StockItem(name="Cola").with_counts("3", "2"),)),)


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def render(self, pages, path):
        self.calls.append((pages, path))
        return path


class RecordingSharer:
    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def share(self, path, metadata):
        self.calls.append((path, metadata))
        if self.error:
            raise self.error


class FakeSMTP:
    instances = []

    def __init__(self, host, port):
        self.host, self.port = host, port
        self.tls = False
        self.login_args = None
        self.sent = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self, context=None):
        self.tls = True

    def login(self, user, password):
        self.login_args = (user, password)

    def send_message(self, msg):
        self.sent.append(msg)


@pytest.fixture
def fake_smtp(monkeypatch):
    FakeSMTP.instances = []
    monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)
    return FakeSMTP


def test_report_filename():
    assert report_filename("AKL-WLG", WHEN) == "AKL-WLG_StockList_20241102_183015.pdf"


def test_share_metadata():
    meta = share_metadata("Cafe Stock", WHEN)
    assert meta.mime_type == "application/pdf"
    assert meta.subject == "Cafe Stock Stock List Report - 02/11/2024 18:30"
    assert meta.body == "Please find attached the Cafe Stock stock list report."


def test_canvas_renderer_writes_pdf(tmp_path):
    page = Page(1, [DrawInstruction("Hello", 40, 50, TextStyle(18, bold=True)),
                    DrawInstruction("world", 60, 130)])
    out = CanvasRenderer(title="t").render([page], tmp_path / "sub" / "r.pdf")
    assert out.read_bytes().startswith(b"%PDF")


def test_exporter_renders_then_shares(tmp_path):
    renderer, sharer = RecordingRenderer(), RecordingSharer()
    exporter = StockExporter(sharer=sharer, output_dir=tmp_path, renderer=renderer,
                             clock=lambda: WHEN)
    path = exporter.export("Cafe Stock", CATS)

    assert path == tmp_path / "Cafe Stock_StockList_20241102_183015.pdf"
    (pages, rendered_to), = renderer.calls
    assert rendered_to == path
    assert [ins.text for ins in pages[0].instructions][-5:] == ["Cola", "", "3", "2", "5"]
    (shared, meta), = sharer.calls
    assert shared == path
    assert meta == share_metadata("Cafe Stock", WHEN)


def test_exporter_survives_share_failure(tmp_path, caplog):
    sharer = RecordingSharer(error=smtplib.SMTPException("down"))
    exporter = StockExporter(sharer=sharer, output_dir=tmp_path, renderer=RecordingRenderer(),
                             clock=lambda: WHEN)
    path = exporter.export("Cafe Stock", CATS)
    assert path.name.endswith(".pdf")
    assert len(sharer.calls) == 1
    assert "sharing" in caplog.text


def test_exporter_writes_real_pdf_without_sharer(tmp_path):
    path = StockExporter(output_dir=tmp_path, clock=lambda: WHEN).export("AKL-WLG", CATS)
    assert path.exists()
    assert path.read_bytes()[:4] == b"%PDF"


def test_email_sharer_sends_attachment(tmp_path, fake_smtp):
    pdf = tmp_path / "report.pdf"
    pdf.write_bytes(b"%PDF-1.4 test")
    settings = ExportSettings(smtp_host="mail.example", smtp_port=2525, sender="bar@example.com",
                              recipients=("ops@example.com", "mgr@example.com"),
                              username="bar", password="secret")
    EmailSharer(settings).share(pdf, share_metadata("Cafe Stock", WHEN))

    smtp, = fake_smtp.instances
    assert (smtp.host, smtp.port, smtp.tls) == ("mail.example", 2525, True)
    assert smtp.login_args == ("bar", "secret")
    msg, = smtp.sent
    parsed = message_from_bytes(msg.as_bytes(), policy=default_policy)
    assert parsed["Subject"] == "Cafe Stock Stock List Report - 02/11/2024 18:30"
    assert parsed["To"] == "ops@example.com, mgr@example.com"
    attachment, = parsed.iter_attachments()
    assert attachment.get_content_type() == "application/pdf"
    assert attachment.get_filename() == "report.pdf"
    assert attachment.get_content() == b"%PDF-1.4 test"


def test_email_sharer_without_recipients_sends_nothing(tmp_path, fake_smtp):
    pdf = tmp_path / "report.pdf"
    pdf.write_bytes(b"%PDF")
    EmailSharer(ExportSettings()).share(pdf, ShareMetadata("s", "b"))
    assert fake_smtp.instances == []


def test_main_writes_report(tmp_path, capsys):
    assert main(["--page", "AKL-WLG", "--output-dir", str(tmp_path)]) == 0
    out, = tmp_path.glob("AKL-WLG_StockList_*.pdf")
    assert f"Saved to: {out}" in capsys.readouterr().out


def test_exporter_collaborators_are_typed_by_capability():
    hints = typing.get_type_hints(StockExporter.__init__)
    assert hints["renderer"] == typing.Optional[DocumentRenderer]
    assert hints["sharer"] == typing.Optional[Sharer]
