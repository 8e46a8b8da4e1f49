"""
Sending a finished report somewhere.

``Sharer`` is the capability the exporter depends on; ``EmailSharer`` is the
implementation shipped here, mailing the PDF as an attachment over SMTP.
"""

from __future__ import annotations

import logging
import smtplib
import ssl
from dataclasses import dataclass, field
from datetime import datetime
from email.message import EmailMessage
from pathlib import Path
from typing import Optional, Protocol, Tuple

from .paginator import TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"


@dataclass(frozen=True)
class ShareMetadata:
    subject: str
    body: str
    mime_type: str = PDF_MIME_TYPE


def share_metadata(page_name, when: datetime) -> ShareMetadata:
    return ShareMetadata(
        subject=f"{page_name} Stock List Report - {when.strftime(TIMESTAMP_FORMAT)}",
        body=f"Please find attached the {page_name} stock list report.",
    )


class Sharer(Protocol):
    def share(self, path: Path, metadata: ShareMetadata) -> None:
        ...


@dataclass(frozen=True)
class ExportSettings:
    output_dir: Path = Path(".")
    smtp_host: str = "localhost"
    smtp_port: int = 587
    sender: str = ""
    recipients: Tuple[str, ...] = field(default_factory=tuple)
    username: Optional[str] = None
    password: Optional[str] = None
    starttls: bool = True


class EmailSharer:
    """Mails the report as an attachment to every configured recipient"""

    def __init__(self, settings: ExportSettings):
        self.settings = settings

    def build_message(self, path, metadata):
        s = self.settings
        path = Path(path)
        maintype, _, subtype = metadata.mime_type.partition("/")

        msg = EmailMessage()
        msg["From"] = s.sender
        msg["To"] = ", ".join(s.recipients)
        msg["Subject"] = metadata.subject
        msg.set_content(metadata.body)
        msg.add_attachment(path.read_bytes(), maintype=maintype, subtype=subtype,
                           filename=path.name)
        return msg

    def share(self, path, metadata):
        s = self.settings
        if not s.recipients:
            logger.warning("no recipients configured, %s not sent", Path(path).name)
            return

        msg = self.build_message(path, metadata)
        with smtplib.SMTP(s.smtp_host, s.smtp_port) as server:
            if s.starttls:
                server.starttls(context=ssl.create_default_context())
            if s.username:
                server.login(s.username, s.password or "")
            server.send_message(msg)
        logger.info("sent %s to %s", Path(path).name, ", ".join(s.recipients))
