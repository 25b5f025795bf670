"""
Module: answerboxes.file_upload

Purpose:
    File-upload answer box. Always emits the file input; when a previous
    upload exists it links the stored file, carries the file token in a
    hidden ``lf{id}`` field so a re-submission without a new upload keeps
    the old file, and offers an inline preview toggle by file extension.

Recorded answers:
    - ``@FILE:<token>@``: stored file reference
    - ``Error...``: failed upload message, redisplayed verbatim
"""

from __future__ import annotations

import html
import posixpath
import re
from typing import Mapping
from urllib.parse import quote

from .base import AnswerBox, AnswerBoxOutput

FILE_TOKEN_RE = re.compile(r"@FILE:(.+?)@")

IMAGE_EXTENSIONS = ("jpg", "gif", "png", "bmp", "jpe")
DOCUMENT_EXTENSIONS = ("doc", "docx", "pdf", "xls", "xlsx", "ppt", "pptx")


def file_extension(url: str) -> str:
    """
    Lower-cased extension used to pick a preview.

    Only the first three characters after the last dot are kept, so
    ``.jpeg`` reads as ``jpe`` and ``.docx`` as ``doc``.
    """
    return url[url.rfind(".") + 1:][:3].lower()


class FileUploadAnswerBox(AnswerBox):
    """File input with last-upload link, hidden token and preview toggle."""

    def generate(self) -> AnswerBoxOutput:
        p = self.params
        fid = p.field_id
        last = "" if p.last_answer is None else str(p.last_answer)

        out = self._label()
        out += self._wrap_colorbox(f'<input type="file" name="qn{fid}" id="qn{fid}" />\n')

        if last != "":
            if p.score_ref is not None:
                out += self._quick_score_icons()
            if p.assessment_id:
                if last.startswith("Error"):
                    out += f"<br/>{last}"
                else:
                    out += self._last_file(FILE_TOKEN_RE.sub(r"\1", last))
            else:
                out += f"<br/>{last}"

        return AnswerBoxOutput(
            answer_box=out,
            js_params={},
            entry_tip="Select a file to upload",
            correct_answer=self._correct_answer(),
            preview_location="",
        )

    def _last_file(self, token: str) -> str:
        """Link, hidden token field and preview toggle for a stored file."""
        p = self.params
        fid = p.field_id
        url = p.config.file_url(token)
        safe_url = html.escape(url)
        filename = html.escape(posixpath.basename(token))

        out = f'<br/>Last file uploaded: <a href="{safe_url}" target="_new">{filename}</a>'
        out += f'<input type="hidden" name="lf{fid}" value="{html.escape(token)}" />'

        extension = file_extension(url)
        if extension in IMAGE_EXTENSIONS:
            out += (
                f' <span aria-expanded="false" aria-controls="img{fid}" class="clickable" '
                f'id="filetog{fid}" onclick="toggleinlinebtn(\'img{fid}\',\'filetog{fid}\');">[+]</span>'
            )
            out += (
                f' <br/><div><img id="img{fid}" style="display:none;max-width:80%;" aria-hidden="true" '
                f'onclick="rotateimg(this)" src="{safe_url}" alt="Student uploaded image"/></div>'
            )
        elif extension in DOCUMENT_EXTENSIONS:
            viewer = f"{p.config.document_viewer_url}?url={quote(url, safe='')}&embedded=true"
            out += (
                f' <span aria-expanded="false" aria-controls="fileprev{fid}" class="clickable" '
                f'id="filetog{fid}" onclick="toggleinlinebtn(\'fileprev{fid}\',\'filetog{fid}\');">[+]</span>'
            )
            out += (
                f' <br/><iframe id="fileprev{fid}" style="display:none;" aria-hidden="true" '
                f'src="{html.escape(viewer)}" width="80%" height="600px"></iframe>'
            )
        return out

    def _quick_score_icons(self) -> str:
        """Grader shortcuts setting full, half or no credit."""
        p = self.params
        ref = p.score_ref
        if p.is_multipart:
            element = f"{ref.element}-{p.part_number}"
            score = ref.score[p.part_number] if isinstance(ref.score, Mapping) else ref.score
        else:
            element = ref.element
            score = ref.score

        root = p.config.asset_root
        icons = (
            ("q_fullbox.gif", "Set score full credit", f"{score}"),
            ("q_halfbox.gif", "Set score half credit", f".5*{score}"),
            ("q_emptybox.gif", "Set score no credit", "0"),
        )
        out = '<span style="float:right;">'
        for image, alt, value in icons:
            out += (
                f'<img class="scoreicon" src="{root}/img/{image}" alt="{alt}" '
                f"onclick=\"quicksetscore('{element}',{value})\" />"
            )
        return out + "</span>"
